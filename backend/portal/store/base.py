# portal/store/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Tuple

# (field, op, value); op is one of FILTER_OPS
Filter = Tuple[str, str, Any]

FILTER_OPS = ("eq", "neq", "in")


def eq(field: str, value: Any) -> Filter:
    return (field, "eq", value)


class ContentStore(ABC):
    """
    Query contract the portal needs from its backing store.

    Records go in and come out as plain dicts. Implementations raise
    `RecordNotFound` for empty single-row lookups and deletes of missing
    rows, and `QueryFailure` for anything the store rejects.
    """

    @abstractmethod
    def query_records(
        self,
        table: str,
        filters: Iterable[Filter] = (),
        order_by: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Rows matching every filter. `order_by` may be prefixed with "-" for descending."""

    @abstractmethod
    def query_one(self, table: str, filters: Iterable[Filter]) -> Dict[str, Any]:
        ...

    @abstractmethod
    def count_records(self, table: str, filters: Iterable[Filter] = ()) -> int:
        ...

    @abstractmethod
    def insert_record(self, table: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        ...

    @abstractmethod
    def delete_record(self, table: str, record_id: str) -> None:
        ...

    @abstractmethod
    def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        """Start a session; raises `AuthRequired` on bad credentials."""

    @abstractmethod
    def get_current_session(self) -> Optional[Dict[str, Any]]:
        """Session of the current request, or None for anonymous visitors."""
