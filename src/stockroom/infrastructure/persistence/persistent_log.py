"""JSON-file-backed persistence for a Store.

Persistence is best-effort: ``save`` and ``load`` never raise. Any failure
is logged and handed back in a PersistenceResult, and a failed ``load``
leaves the in-memory store exactly as it was.
"""

from __future__ import annotations

import contextlib
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, TypeVar

from stockroom.domain.exceptions import (
    DecodeError,
    EncodeError,
    PersistenceError,
    SinkIOError,
)
from stockroom.domain.repository.store import Store
from stockroom.infrastructure.persistence.record_codec import RecordCodec

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class PersistenceResult:
    """Outcome of a save or load.

    ``skipped`` is set when ``load`` found no sink file.
    """

    operation: str
    records: int = 0
    skipped: bool = False
    error: PersistenceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


class PersistentLog(Generic[T]):

    def __init__(
        self,
        file_path: Path,
        codec: RecordCodec[T],
        store: Store[T] | None = None,
    ) -> None:
        self._file_path = Path(file_path)
        self._codec = codec
        self._store: Store[T] = store if store is not None else Store()

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- Store delegation -----------------------------------------------------

    def add(self, item: T) -> None:
        self._store.add(item)

    def get_all(self) -> list[T]:
        return self._store.get_all()

    # --- Persistence ----------------------------------------------------------

    def save(self) -> PersistenceResult:
        items = self._store.get_all()
        try:
            text = json.dumps([self._codec.to_raw(i) for i in items], indent=2) + "\n"
        except (AttributeError, TypeError, ValueError) as exc:
            return self._failed("save", EncodeError(f"Error encoding records: {exc}"))

        # A failed write must leave the previous snapshot intact.
        staging = self._file_path.with_name(self._file_path.name + ".tmp")
        try:
            staging.write_text(text, encoding="utf-8")
            staging.replace(self._file_path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                staging.unlink(missing_ok=True)
            return self._failed(
                "save", SinkIOError(f"Error saving to {self._file_path}: {exc}")
            )

        logger.info("Saved %d records to %s", len(items), self._file_path)
        return PersistenceResult("save", records=len(items))

    def load(self) -> PersistenceResult:
        if not self._file_path.exists():
            logger.debug("No sink at %s, nothing to load", self._file_path)
            return PersistenceResult("load", skipped=True)

        try:
            text = self._file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            return self._failed(
                "load", DecodeError(f"{self._file_path} is not valid UTF-8: {exc}")
            )
        except OSError as exc:
            return self._failed(
                "load", SinkIOError(f"Error loading from {self._file_path}: {exc}")
            )

        try:
            items = self._decode(text)
        except DecodeError as exc:
            return self._failed("load", exc)

        self._store.replace_all(items)
        logger.info("Loaded %d records from %s", len(items), self._file_path)
        return PersistenceResult("load", records=len(items))

    # --- Internal helpers -----------------------------------------------------

    def _decode(self, text: str) -> list[T]:
        try:
            raw = json.loads(text)
        except (ValueError, RecursionError) as exc:
            raise DecodeError(f"Malformed JSON in {self._file_path}: {exc}") from exc
        if not isinstance(raw, list):
            raise DecodeError(
                f"Expected a JSON array in {self._file_path}, got {type(raw).__name__}"
            )
        return [self._codec.from_raw(entry) for entry in raw]

    def _failed(self, operation: str, error: PersistenceError) -> PersistenceResult:
        logger.warning("%s failed: %s", operation.capitalize(), error)
        return PersistenceResult(operation, error=error)
