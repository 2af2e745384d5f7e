"""In-memory ContentStore fakes for tests that observe or break store calls."""
from portal.domain.exceptions import QueryFailure, RecordNotFound
from portal.store import ContentStore


class RecordingStore(ContentStore):
    """In-memory store that records every call it receives."""

    def __init__(self, tables=None, session=None):
        self.tables = {name: list(rows) for name, rows in (tables or {}).items()}
        self.session = session
        self.calls = []

    def _rows(self, table, filters):
        rows = self.tables.get(table, [])
        for field, op, value in filters:
            if op == "eq":
                rows = [r for r in rows if r.get(field) == value]
            elif op == "neq":
                rows = [r for r in rows if r.get(field) != value]
            else:
                rows = [r for r in rows if r.get(field) in value]
        return rows

    def query_records(self, table, filters=(), order_by=None):
        self.calls.append(("query_records", table))
        rows = self._rows(table, filters)
        if order_by:
            rows = sorted(rows, key=lambda r: r.get(order_by.lstrip("-")) or 0,
                          reverse=order_by.startswith("-"))
        return [dict(r) for r in rows]

    def query_one(self, table, filters):
        self.calls.append(("query_one", table))
        rows = self._rows(table, filters)
        if not rows:
            raise RecordNotFound(table=table)
        return dict(rows[0])

    def count_records(self, table, filters=()):
        self.calls.append(("count_records", table))
        return len(self._rows(table, filters))

    def insert_record(self, table, fields):
        self.calls.append(("insert_record", table))
        record = {"id": f"{table}-{len(self.tables.get(table, [])) + 1}", **fields}
        self.tables.setdefault(table, []).append(record)
        return dict(record)

    def delete_record(self, table, record_id):
        self.calls.append(("delete_record", table))
        rows = self.tables.get(table, [])
        remaining = [r for r in rows if r["id"] != record_id]
        if len(remaining) == len(rows):
            raise RecordNotFound(table=table, record_id=record_id)
        self.tables[table] = remaining

    def sign_in(self, email, password):
        self.calls.append(("sign_in", "users"))
        return {"user_id": "user-1", "email": email, "access_token": "token"}

    def get_current_session(self):
        self.calls.append(("get_current_session", None))
        return self.session


class FailingStore(RecordingStore):
    """Every read and write fails as if the store were unreachable."""

    def _fail(self, *args, **kwargs):
        raise QueryFailure("store unreachable")

    query_records = _fail
    query_one = _fail
    count_records = _fail
    insert_record = _fail
    delete_record = _fail



class RoleLookupFailingStore(RecordingStore):
    """Sections load normally; every user_roles lookup fails."""

    def query_one(self, table, filters):
        if table == "user_roles":
            raise QueryFailure("roles unreachable")
        return super().query_one(table, filters)
