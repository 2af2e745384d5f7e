from flask import current_app
from portal.domain.classification import numeric_class_key


def class_sort_key():
    if current_app.config.get("NUMERIC_CLASS_ORDER"):
        return numeric_class_key
    return None
