# findmeme/services/storage/cloudinary_storage.py
from __future__ import annotations

import base64

import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError

from findmeme.common.logging import get_logger
from findmeme.common.settings import MediaStorageConfig
from findmeme.domain.entities.meme import MediaUpload
from findmeme.domain.errors import UpstreamFailure
from findmeme.domain.ports.media_storage import MediaStoragePort

logger = get_logger(__name__)


class CloudinaryMediaStorage(MediaStoragePort):
    """
    Uploads media to Cloudinary and returns the HTTPS delivery URL.
    resource_type="auto" lets Cloudinary detect image/gif/video.
    """

    def __init__(self, cfg: MediaStorageConfig) -> None:
        self.cfg = cfg
        self._config = dict(
            cloud_name=cfg.cloud_name,
            api_key=cfg.api_key,
            api_secret=cfg.api_secret,
            secure=True,
        )

    def _data_uri(self, media: MediaUpload) -> str:
        b64 = base64.b64encode(media.content).decode("ascii")
        return f"data:{media.content_type or 'application/octet-stream'};base64,{b64}"

    def upload(self, media: MediaUpload) -> str:
        if not self.cfg.configured:
            raise UpstreamFailure("Media storage is not configured")
        try:
            result = cloudinary.uploader.upload(
                self._data_uri(media),
                folder=self.cfg.folder,
                resource_type="auto",
                **self._config,
            )
        except CloudinaryError as e:
            logger.error("Cloudinary upload failed: %s", e)
            raise UpstreamFailure() from e
        except OSError as e:
            # network-level failures from the HTTP client
            logger.error("Cloudinary unreachable: %s", e)
            raise UpstreamFailure() from e

        url = result.get("secure_url") or result.get("url")
        if not url:
            raise UpstreamFailure("Media host returned no URL")
        logger.info("Uploaded %s (%d bytes) to %s", media.filename or "media", media.size, url)
        return url
