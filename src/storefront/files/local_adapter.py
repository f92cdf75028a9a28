"""Image store backed by the local filesystem."""

from pathlib import Path

import structlog

from storefront.files.port import ImageStore
from storefront.shared.errors import PersistenceError

logger = structlog.get_logger(__name__)


class LocalImageStore(ImageStore):
    def delete_file(self, path: str) -> None:
        try:
            Path(path).unlink()
        except FileNotFoundError:
            logger.warning("Image file already missing", path=path)
            return
        except OSError as exc:
            raise PersistenceError(f"Could not delete image file {path}: {exc}") from exc

        logger.info("Image file deleted", path=path)
