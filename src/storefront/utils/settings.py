"""Runtime settings read from the environment."""

import os
from pathlib import Path

DEFAULT_ITEMS_PER_PAGE = 2


def items_per_page() -> int:
    """Catalogue page size shared by the public and admin listings."""
    value = int(os.getenv("ITEMS_PER_PAGE", DEFAULT_ITEMS_PER_PAGE))
    if value < 1:
        raise ValueError(f"ITEMS_PER_PAGE must be a positive integer, got {value}")
    return value


def invoice_dir() -> Path:
    """Directory holding the durable invoice artifacts."""
    return Path(os.getenv("INVOICE_DIR", os.path.join("data", "invoices")))
