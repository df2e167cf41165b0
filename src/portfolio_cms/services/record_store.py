"""Generic record store shared by every portfolio resource.

Each resource describes itself with an :class:`EntityDescriptor` (model,
writable columns, default ordering, enum constraints) and gets a
:class:`RecordStore` with the same CRUD contract:

- ``create`` / ``update`` / ``delete`` return ``True`` or ``False``
- ``get_by_id`` returns a field map or ``None``
- ``list_all`` / ``find`` return a (possibly empty) list of field maps

Database failures never escape a store. They are logged with the resource
name and converted to the sentinel above.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from portfolio_cms.data.db import Base, get_session

logger = logging.getLogger(__name__)

# sqlite3 raises OverflowError for integers outside the 64-bit range
_STORE_ERRORS = (SQLAlchemyError, OverflowError)

__all__ = [
    "EntityDescriptor",
    "RecordStore",
]


@dataclass(frozen=True)
class EntityDescriptor:
    """Static description of one resource table.

    Attributes:
        label: Human-readable resource name used in logs and messages.
        model: ORM model class.
        fields: Columns written on insert.
        update_fields: Columns replaced on update (defaults to ``fields``).
        ordering: ORDER BY clauses used by ``list_all``.
        enums: Column name to allowed values; checked before every write.
    """

    label: str
    model: type[Base]
    fields: tuple[str, ...]
    update_fields: tuple[str, ...] | None = None
    ordering: tuple[Any, ...] = ()
    enums: Mapping[str, frozenset[str]] = field(default_factory=dict)

    @property
    def replace_fields(self) -> tuple[str, ...]:
        return self.update_fields if self.update_fields is not None else self.fields


class RecordStore:
    """CRUD operations for one resource, parameterized by its descriptor."""

    def __init__(self, descriptor: EntityDescriptor) -> None:
        self.descriptor = descriptor
        self.model = descriptor.model
        self.label = descriptor.label

    def to_dict(self, record: Base) -> dict[str, Any]:
        """Convert an ORM row to a field map in column order."""
        return {column.key: getattr(record, column.key) for column in self.model.__table__.columns}

    def _enum_violation(self, data: Mapping[str, Any]) -> str | None:
        for column, allowed in self.descriptor.enums.items():
            value = data.get(column)
            if value is not None and value not in allowed:
                return f"{column}={value!r}"
        return None

    def create(self, data: Mapping[str, Any]) -> bool:
        """Insert a row from the writable fields present in ``data``.

        Fields missing from ``data`` fall back to their column default or null.
        """
        violation = self._enum_violation(data)
        if violation:
            logger.warning("Rejected %s insert with invalid %s", self.label, violation)
            return False

        values = {name: data[name] for name in self.descriptor.fields if name in data}
        try:
            with get_session() as session:
                session.add(self.model(**values))
            return True
        except _STORE_ERRORS:
            logger.exception("Failed to create %s", self.label)
            return False

    def get_by_id(self, record_id: int) -> dict[str, Any] | None:
        """Return the row with ``record_id``, or None if it does not exist."""
        try:
            with get_session() as session:
                record = session.get(self.model, record_id)
                if record is None:
                    return None
                return self.to_dict(record)
        except _STORE_ERRORS:
            logger.exception("Failed to get %s %s", self.label, record_id)
            return None

    def exists(self, record_id: int) -> bool:
        return self.get_by_id(record_id) is not None

    def list_all(self) -> list[dict[str, Any]]:
        """Return every row in the resource's default order."""
        return self.find(order_by=self.descriptor.ordering)

    def find(self, *criteria: Any, order_by: tuple[Any, ...] | None = None) -> list[dict[str, Any]]:
        """Return rows matching all ``criteria``.

        Args:
            criteria: SQLAlchemy filter expressions, combined with AND.
            order_by: ORDER BY clauses; defaults to the descriptor ordering.
        """
        ordering = self.descriptor.ordering if order_by is None else order_by
        statement = select(self.model).where(*criteria).order_by(*ordering)
        try:
            with get_session() as session:
                return [self.to_dict(record) for record in session.scalars(statement)]
        except _STORE_ERRORS:
            logger.exception("Failed to query %s records", self.label)
            return []

    def count(self) -> int | None:
        """Return the number of rows, or None if the query failed."""
        try:
            with get_session() as session:
                return session.scalar(select(func.count()).select_from(self.model))
        except _STORE_ERRORS:
            logger.exception("Failed to count %s records", self.label)
            return None

    def update(self, record_id: int, data: Mapping[str, Any]) -> bool:
        """Replace every updatable column of an existing row.

        Columns missing from ``data`` are set to null. Returns False when no
        row has ``record_id``; stores never upsert.
        """
        values = {name: data.get(name) for name in self.descriptor.replace_fields}
        return self.update_columns(record_id, values)

    def update_columns(self, record_id: int, values: Mapping[str, Any]) -> bool:
        """Set only the given columns on an existing row."""
        violation = self._enum_violation(values)
        if violation:
            logger.warning("Rejected %s update with invalid %s", self.label, violation)
            return False

        try:
            with get_session() as session:
                updated = (
                    session.query(self.model)
                    .filter(self.model.id == record_id)
                    .update(dict(values), synchronize_session=False)
                )
            return updated == 1
        except _STORE_ERRORS:
            logger.exception("Failed to update %s %s", self.label, record_id)
            return False

    def delete(self, record_id: int) -> bool:
        """Delete a row. True only if exactly one row was removed."""
        try:
            with get_session() as session:
                deleted = (
                    session.query(self.model)
                    .filter(self.model.id == record_id)
                    .delete(synchronize_session=False)
                )
            return deleted == 1
        except _STORE_ERRORS:
            logger.exception("Failed to delete %s %s", self.label, record_id)
            return False
