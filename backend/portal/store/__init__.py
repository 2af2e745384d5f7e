from flask import current_app

from .base import ContentStore, Filter, eq


def get_store() -> ContentStore:
    return current_app.extensions["content_store"]
