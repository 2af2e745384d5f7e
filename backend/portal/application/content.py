from typing import Any, Dict, Mapping, Optional

from portal.domain.invariants.content import (
    assert_content_value,
    assert_study_material_fields,
)
from portal.domain.exceptions import ValidationFailure
from portal.domain.sections import is_study_material
from portal.store import ContentStore, eq
from portal.utils.audit import log_action
from portal.utils.order import next_display_order


def _clean(value) -> str:
    return "" if value is None else str(value).strip()


def build_content_record(section: Mapping[str, Any], form: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Turn admin form fields into a section_content record.

    Rules:
    - title is required
    - study-material sections need category, plus class and subject for
      "Class 8 to 12" or subject alone for any other category
    - other sections carry no classification at all
    - content_type is required and picks whether `text` or `url` is
      required and stored

    Raises ValidationFailure naming the first offending field. Touches no store.
    """
    title = _clean(form.get("title"))
    if not title:
        raise ValidationFailure("title", "Please enter a title")

    content_data: Dict[str, Any] = {}
    if is_study_material(section):
        content_data.update(assert_study_material_fields(form))

    content_type = _clean(form.get("content_type"))
    if not content_type:
        raise ValidationFailure("content_type", "Please select a content type")

    content_data.update(assert_content_value(content_type, form))

    return {
        "section_id": section["id"],
        "title": title,
        "description": _clean(form.get("description")),
        "content_type": content_type,
        "content_data": content_data,
        "is_active": True,
    }


def add_content(
    store: ContentStore,
    *,
    section: Mapping[str, Any],
    form: Mapping[str, Any],
    actor_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Validate and append a content item to `section`.

    Validation runs before the first store call, so a rejected form never
    reaches the store. The new item goes after every existing item of the
    section, inactive ones included.
    """
    fields = build_content_record(section, form)

    count = store.count_records("section_content", [eq("section_id", section["id"])])
    fields["display_order"] = next_display_order(count)

    record = store.insert_record("section_content", fields)

    log_action(
        action="content.create",
        entity_type="section_content",
        entity_id=record["id"],
        actor_id=actor_id,
        payload={
            "section_id": record["section_id"],
            "content_type": record["content_type"],
            "display_order": record["display_order"],
        },
    )

    return record


def delete_content(
    store: ContentStore,
    *,
    content_id: str,
    actor_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Remove one content item by id and return what was removed.

    A missing id raises RecordNotFound before anything is deleted; nothing
    else in the section is touched.
    """
    item = store.query_one("section_content", [eq("id", content_id)])
    store.delete_record("section_content", content_id)

    log_action(
        action="content.delete",
        entity_type="section_content",
        entity_id=content_id,
        actor_id=actor_id,
        payload={"section_id": item["section_id"]},
    )

    return item


def list_section_contents(store: ContentStore, section_id: str):
    return store.query_records(
        "section_content",
        [eq("section_id", section_id)],
        order_by="display_order",
    )
