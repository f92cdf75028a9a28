"""Image file collaborator.

Product handlers release image files through whichever ``ImageStore`` is
active. The local-disk store is used unless another one has been installed,
which the test suite does with ``FakeImageStore``.
"""

from storefront.files.local_adapter import LocalImageStore
from storefront.files.port import ImageStore

_active_store: ImageStore | None = None


def get_image_store() -> ImageStore:
    """The active store, created as a ``LocalImageStore`` on first use."""
    global _active_store
    if _active_store is None:
        _active_store = LocalImageStore()
    return _active_store


def set_image_store(store: ImageStore) -> None:
    global _active_store
    _active_store = store


def reset_image_store() -> None:
    """Drop the installed store; the next lookup falls back to local disk."""
    global _active_store
    _active_store = None
