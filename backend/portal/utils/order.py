def next_display_order(current_count):
    """
    Append-only ordering: a new item goes after the `current_count` items
    already in its section. Gaps left by deletes are never filled.
    """
    return (current_count or 0) + 1
