from portal.domain.navigation import href_for

def normalize_section(section, admin=False):
    data = {
        "id": section["id"],
        "title": section["title"],
        "description": section.get("description") or "",
        "icon": section.get("icon") or "FileText",
        "href": href_for(section),
    }

    if admin:
        data["display_order"] = section.get("display_order")
        data["is_active"] = section.get("is_active")
        data["kind"] = section.get("kind")

    return data
