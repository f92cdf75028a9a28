"""Byte sinks an invoice is delivered to.

A sink accepts bytes, then is either committed (``close``) or thrown away
(``abort``). Nothing a sink has been given is visible to readers until
``close`` succeeds.
"""

import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path


class InvoiceSink(ABC):
    name = "sink"

    @abstractmethod
    def write(self, data: bytes) -> None: ...

    @abstractmethod
    def close(self) -> None:
        """Commit everything written so far."""

    @abstractmethod
    def abort(self) -> None:
        """Discard everything written so far. Safe to call more than once."""


class FileSink(InvoiceSink):
    """Durable artifact at ``path``.

    Bytes go to a temporary file beside the target, which is renamed over the
    target on ``close``; an aborted or failed write never leaves a partial
    artifact behind.
    """

    name = "artifact"

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._tmp_path: Path | None = None
        self._handle = None
        self._committed = False

    def _open(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
        self._tmp_path = Path(tmp_name)
        self._handle = os.fdopen(fd, "wb")

    def write(self, data: bytes) -> None:
        if self._handle is None:
            self._open()
        self._handle.write(data)

    def close(self) -> None:
        if self._handle is None:
            self._open()
        self._handle.flush()
        os.fsync(self._handle.fileno())
        self._handle.close()
        self._handle = None
        os.replace(self._tmp_path, self.path)
        self._tmp_path = None
        self._committed = True

    def abort(self) -> None:
        if self._committed:
            # Another sink failed after this one committed
            self.path.unlink(missing_ok=True)
            self._committed = False
        if self._handle is not None:
            self._handle.close()
            self._handle = None
        if self._tmp_path is not None:
            self._tmp_path.unlink(missing_ok=True)
            self._tmp_path = None


class BufferSink(InvoiceSink):
    """In-memory sink used as the HTTP response body."""

    name = "response"

    def __init__(self) -> None:
        self._chunks: list[bytes] = []
        self.closed = False

    def write(self, data: bytes) -> None:
        self._chunks.append(data)

    def close(self) -> None:
        self.closed = True

    def abort(self) -> None:
        self._chunks = []
        self.closed = False

    def getvalue(self) -> bytes:
        if not self.closed:
            raise RuntimeError("Response body requested before the invoice was delivered")
        return b"".join(self._chunks)
