def normalize_content(item, admin=False):
    content_type = item.get("content_type")
    payload = item.get("content_data")
    if not isinstance(payload, dict):
        payload = {}

    base = {
        "id": item["id"],
        "title": item["title"],
        "description": item.get("description") or "",
        "content_type": content_type,
        "icon": "Link" if content_type == "link" else "FileText",
    }

    if content_type == "link" and payload.get("url"):
        base["url"] = payload["url"]
    elif content_type == "text" and payload.get("text"):
        base["text"] = payload["text"]

    if admin:
        base["section_id"] = item.get("section_id")
        base["content_data"] = payload
        base["display_order"] = item.get("display_order")
        base["is_active"] = item.get("is_active")

    return base
