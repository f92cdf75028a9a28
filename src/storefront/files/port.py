"""Image file collaborator port.

Product images are uploaded and served outside the core; the core only needs
to release an image file once no product references it any more.
"""

from abc import ABC, abstractmethod


class ImageStore(ABC):
    """Abstract image storage interface."""

    @abstractmethod
    def delete_file(self, path: str) -> None:
        """Delete the file at ``path``. A file that is already gone is not an error."""
        ...
