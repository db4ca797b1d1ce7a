"""Upload schemas."""

from blog_api.schemas.base import APIModel


class ImageUploadResponse(APIModel):
    url: str
