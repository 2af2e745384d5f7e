from ..classification import CLASS_8_TO_12, is_member
from ..exceptions import ValidationFailure

CONTENT_TYPES = ("text", "link")

# content_type -> key holding its value in content_data
CONTENT_VALUE_KEYS = {
    "text": "text",
    "link": "url",
}


def _clean(value):
    if value is None:
        return ""
    return str(value).strip()


def assert_member(field, dimension, value):
    if not is_member(dimension, value):
        raise ValidationFailure(field, f"Invalid {field}: {value}")


def assert_study_material_fields(form):
    """
    Classification a study-material item must carry.

    Returns the payload to merge into content_data. A class submitted for
    any category other than "Class 8 to 12" is dropped.
    """
    category = _clean(form.get("category"))
    class_num = _clean(form.get("class"))
    subject = _clean(form.get("subject"))

    if not category:
        raise ValidationFailure(
            "category", "Please select a Category for Study Materials"
        )
    assert_member("category", "category", category)

    if category == CLASS_8_TO_12:
        if not class_num or not subject:
            raise ValidationFailure(
                "class" if not class_num else "subject",
                "Please select both Class and Subject for Class 8 to 12",
            )
        assert_member("class", "class", class_num)
        assert_member("subject", "subject", subject)
        return {"category": category, "class": class_num, "subject": subject}

    if not subject:
        raise ValidationFailure(
            "subject", "Please select a Subject for Study Materials"
        )
    assert_member("subject", "subject", subject)
    return {"category": category, "subject": subject}


def assert_content_value(content_type, form):
    if content_type not in CONTENT_TYPES:
        raise ValidationFailure("content_type", f"Invalid content type: {content_type}")

    key = CONTENT_VALUE_KEYS[content_type]
    value = _clean(form.get(key))
    if not value:
        label = "Content" if content_type == "text" else "URL"
        raise ValidationFailure(key, f"{label} is required")

    return {key: value}
