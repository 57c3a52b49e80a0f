"""Composition root: wires concrete stores for the CLI.

This is the only place in the codebase that knows where data lives on disk.
"""

from __future__ import annotations

from pathlib import Path

from stockroom.domain.model.inventory import InventoryItem
from stockroom.domain.repository.repository import Repository
from stockroom.infrastructure.persistence.persistent_log import PersistentLog
from stockroom.infrastructure.persistence.record_codec import RecordCodec

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_INVENTORY_FILE = _DATA_DIR / "inventory.json"


def repository() -> Repository:
    return Repository()


def inventory_log(file_path: Path | None = None) -> PersistentLog[InventoryItem]:
    path = file_path if file_path is not None else DEFAULT_INVENTORY_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    return PersistentLog(path, RecordCodec(InventoryItem))
