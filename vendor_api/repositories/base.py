"""Generic in-memory repository with tenant isolation and monotonic ids."""

from __future__ import annotations

import dataclasses
import threading
from typing import Any, Generic, Iterable, Mapping, Optional, TypeVar

from vendor_api.domain.mixins import OwnershipMixin, TimestampMixin

RecordT = TypeVar("RecordT", bound=OwnershipMixin)


class InMemoryRepository(Generic[RecordT]):
    """Process-local CRUD repository. Every read and write is owner-filtered.

    Owner filter: ``user_id`` / ``org_id`` of ``None`` mean "no constraint";
    when both are given a record must match both. A record that fails the
    filter is reported exactly like a missing one (``None``), so callers can
    never probe for another tenant's ids.

    A single re-entrant lock serializes all operations; id assignment and the
    read-modify-write in update/delete are atomic with respect to each other.
    """

    model: type[RecordT]

    def __init__(self, records: Iterable[RecordT] = ()):
        self._lock = threading.RLock()
        self._records: list[RecordT] = list(records)
        self._last_id = max((r.id for r in self._records), default=0)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _find(
        self, entity_id: int, user_id: Optional[int], org_id: Optional[int]
    ) -> Optional[int]:
        """Index of the record with ``entity_id`` if it passes the owner filter."""
        for index, record in enumerate(self._records):
            if record.id == entity_id:
                return index if record.is_visible_to(user_id, org_id) else None
        return None

    def _allocate_id(self) -> int:
        self._last_id = self.next_id()
        return self._last_id

    def _fields(self) -> frozenset[str]:
        return frozenset(f.name for f in dataclasses.fields(self.model))

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def next_id(self) -> int:
        """Id the next create will receive.

        ``max(id) + 1`` over live records, but never lower than an id already
        issued, so deleting the newest record does not free its id.
        """
        with self._lock:
            live_max = max((r.id for r in self._records), default=0)
            return max(live_max, self._last_id) + 1

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def get_by_id(
        self,
        entity_id: int,
        user_id: Optional[int] = None,
        org_id: Optional[int] = None,
    ) -> Optional[RecordT]:
        with self._lock:
            index = self._find(entity_id, user_id, org_id)
            return None if index is None else self._records[index]

    def list(
        self,
        user_id: Optional[int] = None,
        org_id: Optional[int] = None,
    ) -> list[RecordT]:
        """Visible records, most recently created first."""
        with self._lock:
            visible = [r for r in self._records if r.is_visible_to(user_id, org_id)]
        # ids break created_at ties so same-tick inserts still list newest first
        return sorted(visible, key=lambda r: (r.created_at, r.id), reverse=True)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def create(self, data: Mapping[str, Any]) -> RecordT:
        self.validate_create(data)
        known = self._fields() - TimestampMixin.IMMUTABLE_FIELDS
        values = {k: v for k, v in data.items() if k in known}
        with self._lock:
            record = self.model(
                id=self._allocate_id(),
                created_at=self.model.now(),
                **values,
            )
            self._records.append(record)
        return record

    def update(
        self,
        entity_id: int,
        data: Mapping[str, Any],
        user_id: Optional[int] = None,
        org_id: Optional[int] = None,
    ) -> Optional[RecordT]:
        """Apply every field present in ``data``, None included.

        id, created_at and owner fields never change.
        """
        frozen = TimestampMixin.IMMUTABLE_FIELDS | OwnershipMixin.OWNER_FIELDS
        writable = self._fields() - frozen
        changes = {k: v for k, v in data.items() if k in writable}
        self.validate_update(changes)
        with self._lock:
            index = self._find(entity_id, user_id, org_id)
            if index is None:
                return None
            updated = dataclasses.replace(self._records[index], **changes)
            self._records[index] = updated
            return updated

    def delete(
        self,
        entity_id: int,
        user_id: Optional[int] = None,
        org_id: Optional[int] = None,
    ) -> Optional[RecordT]:
        """Remove and return the record as it was just before removal."""
        with self._lock:
            index = self._find(entity_id, user_id, org_id)
            if index is None:
                return None
            return self._records.pop(index)

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def validate_create(self, data: Mapping[str, Any]) -> None:
        """Override to reject payloads before a record is built."""
        return None

    def validate_update(self, changes: Mapping[str, Any]) -> None:
        """Override to reject changes before they are applied."""
        return None
