"""Error response schema."""

from datetime import datetime

from blog_api.schemas.base import APIModel


class ErrorResponse(APIModel):
    """Body returned for every failed request."""

    code: str
    message: str
    timestamp: datetime
    path: str
