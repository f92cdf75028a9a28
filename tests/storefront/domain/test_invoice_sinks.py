"""Tests for invoice sinks and all-or-nothing delivery."""

import pytest
from storefront.invoice.delivery import deliver
from storefront.invoice.sinks import BufferSink, FileSink, InvoiceSink
from storefront.shared.errors import InvoiceDeliveryError, PersistenceError


class FailingSink(InvoiceSink):
    name = "broken"

    def __init__(self, fail_on="write"):
        self.fail_on = fail_on
        self.aborted = False

    def write(self, data):
        if self.fail_on == "write":
            raise OSError("disk full")

    def close(self):
        if self.fail_on == "close":
            raise OSError("disk full")

    def abort(self):
        self.aborted = True


class TestFileSink:
    def test_nothing_visible_until_close(self, tmp_path):
        target = tmp_path / "out" / "invoice-1.txt"
        sink = FileSink(target)

        sink.write(b"hello ")
        sink.write(b"world")
        assert not target.exists()

        sink.close()
        assert target.read_bytes() == b"hello world"

    def test_abort_leaves_no_partial_file(self, tmp_path):
        target = tmp_path / "invoice-1.txt"
        sink = FileSink(target)

        sink.write(b"partial")
        sink.abort()

        assert list(tmp_path.iterdir()) == []

    def test_abort_after_close_removes_artifact(self, tmp_path):
        target = tmp_path / "invoice-1.txt"
        sink = FileSink(target)
        sink.write(b"done")
        sink.close()

        sink.abort()

        assert not target.exists()

    def test_close_replaces_existing_artifact(self, tmp_path):
        target = tmp_path / "invoice-1.txt"
        target.write_bytes(b"old")

        sink = FileSink(target)
        sink.write(b"new")
        sink.close()

        assert target.read_bytes() == b"new"


class TestBufferSink:
    def test_value_available_after_close(self):
        sink = BufferSink()
        sink.write(b"a")
        sink.write(b"b")
        sink.close()
        assert sink.getvalue() == b"ab"

    def test_value_not_available_before_close(self):
        sink = BufferSink()
        sink.write(b"a")
        with pytest.raises(RuntimeError):
            sink.getvalue()


class TestDeliver:
    def test_every_sink_receives_the_same_bytes(self, tmp_path):
        target = tmp_path / "invoice-1.txt"
        response = BufferSink()

        deliver("1", b"document", [FileSink(target), response])

        assert target.read_bytes() == b"document"
        assert response.getvalue() == b"document"

    def test_write_failure_aborts_every_sink(self, tmp_path):
        target = tmp_path / "invoice-1.txt"
        response = BufferSink()
        broken = FailingSink(fail_on="write")

        with pytest.raises(InvoiceDeliveryError) as exc:
            deliver("1", b"document", [FileSink(target), broken, response])

        assert exc.value.sink == "broken"
        assert exc.value.order_id == "1"
        assert broken.aborted
        assert list(tmp_path.iterdir()) == []
        assert response.closed is False

    def test_close_failure_removes_committed_artifact(self, tmp_path):
        target = tmp_path / "invoice-1.txt"

        with pytest.raises(InvoiceDeliveryError):
            deliver("1", b"document", [FileSink(target), FailingSink(fail_on="close")])

        assert not target.exists()

    def test_delivery_error_is_a_persistence_error(self, tmp_path):
        with pytest.raises(PersistenceError):
            deliver("1", b"document", [FailingSink(fail_on="write")])
