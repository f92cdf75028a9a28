"""Recording image store for tests and development.

Nothing touches the disk; every request is kept in ``deleted`` so callers can
assert on which images were released.
"""

from storefront.files.port import ImageStore
from storefront.shared.errors import PersistenceError


class FakeImageStore(ImageStore):
    def __init__(self) -> None:
        self.deleted: list[str] = []
        self.should_fail: bool = False

    def configure(self, should_fail: bool) -> None:
        self.should_fail = should_fail

    def delete_file(self, path: str) -> None:
        if self.should_fail:
            raise PersistenceError(f"Could not delete image file {path}")
        self.deleted.append(path)
