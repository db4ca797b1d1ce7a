"""Upload API endpoints."""

from typing import Annotated

from fastapi import Depends, File, UploadFile

from blog_api.api.dependencies import get_current_user, get_image_service
from blog_api.models.user import User
from blog_api.schemas.upload import ImageUploadResponse
from blog_api.services.images import ImageService
from blog_api.services.permissions import Operation, authorize


async def upload_image(
    file: Annotated[UploadFile, File(description="Image (JPEG, PNG, GIF, or WebP)")],
    current_user: Annotated[User, Depends(get_current_user)],
    images: Annotated[ImageService, Depends(get_image_service)],
):
    """Upload an image to the hosting provider and return its URL.

    Note: This endpoint must remain async because UploadFile.read() is async.
    """
    authorize(Operation.UPLOAD_IMAGE, current_user)
    # One byte past the limit is enough to reject oversized files
    data = await file.read(images.max_bytes + 1)
    url = await images.upload(data, file.content_type, file.filename or "image")
    return ImageUploadResponse(url=url)
