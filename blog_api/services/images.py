"""Image hosting service for the Cloudinary upload API."""

import hashlib
import logging
import re
import time
from urllib.parse import urlparse

import httpx

from blog_api.config import Settings
from blog_api.errors import UpstreamError, ValidationError

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/png", "image/gif", "image/webp"}

DELIVERY_HOST = "res.cloudinary.com"
_VERSION_SEGMENT = re.compile(r"^v\d+$")


def sign_params(params: dict[str, str], api_secret: str) -> str:
    """Sign request parameters: sha1 over the sorted ``key=value`` pairs plus the secret."""
    to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params) if params[key])
    return hashlib.sha1(f"{to_sign}{api_secret}".encode()).hexdigest()  # noqa: S324


class ImageService:
    """Uploads images to, and deletes them from, the hosting provider.

    Only the URL the provider returns is kept by the application.
    """

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self.cloud_name = settings.cloudinary_cloud_name
        self.api_key = settings.cloudinary_api_key
        self.api_secret = settings.cloudinary_api_secret
        self.folder = settings.cloudinary_folder
        self.max_bytes = settings.image_max_bytes
        self.timeout = settings.image_upload_timeout
        self.transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.settings.cloudinary_base_url}/{self.cloud_name}/image"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    def _ensure_configured(self) -> None:
        if not self.settings.image_provider_configured:
            raise UpstreamError("Image provider is not configured", retryable=True)

    def _signed(self, params: dict[str, str]) -> dict[str, str]:
        params = {**params, "timestamp": str(int(time.time()))}
        params = {key: value for key, value in params.items() if value}
        signature = sign_params(params, self.api_secret)
        return {**params, "api_key": self.api_key, "signature": signature}

    def validate(self, data: bytes, content_type: str | None) -> None:
        if content_type not in ALLOWED_IMAGE_TYPES:
            raise ValidationError(
                f"Invalid file type. Allowed types: {', '.join(sorted(ALLOWED_IMAGE_TYPES))}"
            )
        if not data:
            raise ValidationError("Uploaded file is empty")
        if len(data) > self.max_bytes:
            raise ValidationError(f"File too large. Maximum size is {self.max_bytes} bytes.")

    async def upload(self, data: bytes, content_type: str | None, filename: str = "image") -> str:
        """Upload an image and return its public URL.

        Raises:
            ValidationError: unsupported type, empty or oversized payload.
            UpstreamError: provider unavailable (503) or rejecting the upload (502).
        """
        self.validate(data, content_type)
        self._ensure_configured()

        form = self._signed({"folder": self.folder or ""})
        try:
            async with self._client() as client:
                response = await client.post(
                    f"{self.endpoint}/upload",
                    data=form,
                    files={"file": (filename, data, content_type)},
                )
                response.raise_for_status()
                payload = response.json()
        except (httpx.TimeoutException, httpx.TransportError) as e:
            logger.error(f"Image provider unreachable: {e}")
            raise UpstreamError("Image provider is unavailable", retryable=True) from e
        except httpx.HTTPStatusError as e:
            logger.error(f"Image provider rejected upload: {e.response.status_code}")
            raise UpstreamError("Image provider rejected the upload") from e
        except ValueError as e:
            logger.error(f"Image provider returned invalid JSON: {e}")
            raise UpstreamError("Image provider returned an invalid response") from e

        if not isinstance(payload, dict):
            logger.error(f"Image provider returned unexpected payload: {payload!r}")
            raise UpstreamError("Image provider returned an invalid response")
        url = payload.get("secure_url") or payload.get("url")
        if not url:
            logger.error(f"Image provider response missing URL: {payload}")
            raise UpstreamError("Image provider returned an invalid response")

        logger.info(f"Uploaded image {payload.get('public_id')} ({len(data)} bytes)")
        return url

    def public_id_from_url(self, url: str | None) -> str | None:
        """Extract the provider's public id from a delivery URL.

        Returns None for URLs that are not hosted under the configured cloud.
        """
        if not url or not self.cloud_name:
            return None
        parsed = urlparse(url)
        if parsed.hostname != DELIVERY_HOST:
            return None

        segments = [segment for segment in parsed.path.split("/") if segment]
        # /<cloud>/image/upload/[transformations/][v123/]<public_id>.<ext>
        if segments[:3] != [self.cloud_name, "image", "upload"]:
            return None
        segments = segments[3:]
        for index, segment in enumerate(segments):
            if _VERSION_SEGMENT.match(segment):
                segments = segments[index + 1 :]
                break
        if not segments:
            return None

        public_id = "/".join(segments)
        return public_id.rsplit(".", 1)[0] if "." in segments[-1] else public_id

    async def delete(self, url: str) -> bool:
        """Delete a hosted image by its URL.

        Returns False when the URL is not one of ours.
        """
        public_id = self.public_id_from_url(url)
        if public_id is None:
            return False
        self._ensure_configured()

        try:
            async with self._client() as client:
                response = await client.post(
                    f"{self.endpoint}/destroy", data=self._signed({"public_id": public_id})
                )
                response.raise_for_status()
                payload = response.json()
        except (httpx.TimeoutException, httpx.TransportError) as e:
            raise UpstreamError("Image provider is unavailable", retryable=True) from e
        except (httpx.HTTPStatusError, ValueError) as e:
            raise UpstreamError("Image provider rejected the delete") from e

        if not isinstance(payload, dict):
            raise UpstreamError("Image provider returned an invalid response")
        result = payload.get("result")
        logger.info(f"Deleted image {public_id}: {result}")
        return result == "ok"
