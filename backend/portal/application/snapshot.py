from dataclasses import dataclass, field
from typing import Any, Dict, List

from portal.domain.exceptions import RecordNotFound
from portal.store import ContentStore, eq


@dataclass
class ViewSnapshot:
    """What one view fetched: its section and that section's active items."""

    section: Dict[str, Any]
    items: List[Dict[str, Any]] = field(default_factory=list)


def load_section(store: ContentStore, section_id: str):
    try:
        return store.query_one("sections", [eq("id", section_id)])
    except RecordNotFound as exc:
        raise RecordNotFound(
            "The requested section could not be found.",
            table="sections",
            record_id=section_id,
        ) from exc


def load_items(store: ContentStore, section_id: str):
    return store.query_records(
        "section_content",
        [eq("section_id", section_id), eq("is_active", True)],
        order_by="display_order",
    )


def load_snapshot(store: ContentStore, section_id: str) -> ViewSnapshot:
    """
    Fetch a section and its active items for one view.

    Both fetches complete before anything is derived from them, and the
    snapshot belongs to the request that loaded it.
    """
    section = load_section(store, section_id)
    items = load_items(store, section_id)
    return ViewSnapshot(section=section, items=items)
