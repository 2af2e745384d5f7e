# portal/store/sql.py
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from flask_jwt_extended import (
    create_access_token,
    get_jwt,
    get_jwt_identity,
    verify_jwt_in_request,
)
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from portal.domain.exceptions import AuthRequired, QueryFailure, RecordNotFound
from portal.models import Section, SectionContent, User, UserRole
from .base import FILTER_OPS, ContentStore, Filter

logger = logging.getLogger(__name__)

MODELS = {
    "sections": Section,
    "section_content": SectionContent,
    "user_roles": UserRole,
    "users": User,
}


class SQLContentStore(ContentStore):
    """ContentStore backed by the Flask-SQLAlchemy session."""

    def __init__(self, db):
        self.db = db

    # -------------------------------------------------
    # Query building
    # -------------------------------------------------

    def _model(self, table):
        try:
            return MODELS[table]
        except KeyError:
            raise QueryFailure(f"Unknown table: {table}") from None

    def _column(self, model, field):
        if field not in model.__table__.columns:
            raise QueryFailure(f"Unknown field '{field}' on {model.__tablename__}")
        return getattr(model, field)

    def _clause(self, model, flt: Filter):
        try:
            field, op, value = flt
        except (TypeError, ValueError):
            raise QueryFailure(f"Malformed filter: {flt!r}") from None

        column = self._column(model, field)

        if op not in FILTER_OPS:
            raise QueryFailure(f"Unsupported filter op: {op}")
        if op == "eq":
            return column == value
        if op == "neq":
            return column != value
        return column.in_(list(value))

    def _select(self, model, filters, order_by=None):
        stmt = select(model).where(*[self._clause(model, f) for f in filters])

        if order_by:
            descending = order_by.startswith("-")
            column = self._column(model, order_by.lstrip("-"))
            stmt = stmt.order_by(column.desc() if descending else column.asc())

        return stmt

    def _fail(self, action, table, exc):
        self.db.session.rollback()
        logger.error("store %s on %s failed: %s", action, table, exc)
        raise QueryFailure(f"Could not {action} {table}") from exc

    # -------------------------------------------------
    # Reads
    # -------------------------------------------------

    def query_records(
        self,
        table: str,
        filters: Iterable[Filter] = (),
        order_by: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        model = self._model(table)
        stmt = self._select(model, filters, order_by)

        try:
            rows = self.db.session.execute(stmt).scalars().all()
        except SQLAlchemyError as exc:
            self._fail("query", table, exc)

        return [row.to_dict() for row in rows]

    def query_one(self, table: str, filters: Iterable[Filter]) -> Dict[str, Any]:
        model = self._model(table)
        stmt = self._select(model, filters).limit(1)

        try:
            row = self.db.session.execute(stmt).scalars().first()
        except SQLAlchemyError as exc:
            self._fail("query", table, exc)

        if row is None:
            raise RecordNotFound(f"No matching record in {table}", table=table)
        return row.to_dict()

    def count_records(self, table: str, filters: Iterable[Filter] = ()) -> int:
        model = self._model(table)
        stmt = (
            select(func.count())
            .select_from(model)
            .where(*[self._clause(model, f) for f in filters])
        )

        try:
            return self.db.session.execute(stmt).scalar_one()
        except SQLAlchemyError as exc:
            self._fail("count", table, exc)

    # -------------------------------------------------
    # Mutations (one commit per call)
    # -------------------------------------------------

    def insert_record(self, table: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        model = self._model(table)

        try:
            row = model(**fields)
        except TypeError as exc:
            raise QueryFailure(f"Invalid fields for {table}: {exc}") from exc

        try:
            self.db.session.add(row)
            self.db.session.commit()
        except SQLAlchemyError as exc:
            self._fail("insert into", table, exc)

        return row.to_dict()

    def delete_record(self, table: str, record_id: str) -> None:
        model = self._model(table)

        try:
            row = self.db.session.get(model, record_id)
        except SQLAlchemyError as exc:
            self._fail("query", table, exc)

        if row is None:
            raise RecordNotFound(
                f"No record {record_id} in {table}", table=table, record_id=record_id
            )

        try:
            self.db.session.delete(row)
            self.db.session.commit()
        except SQLAlchemyError as exc:
            self._fail("delete from", table, exc)

    # -------------------------------------------------
    # Sessions
    # -------------------------------------------------

    def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        try:
            user = self.db.session.execute(
                select(User).where(User.email == email)
            ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            self._fail("query", "users", exc)

        if not user or not user.check_password(password):
            raise AuthRequired("Invalid credentials")

        if not user.is_active:
            raise AuthRequired("User account disabled")

        token = create_access_token(identity=user.id, additional_claims={"email": user.email})

        return {
            "user_id": user.id,
            "email": user.email,
            "access_token": token,
        }

    def get_current_session(self) -> Optional[Dict[str, Any]]:
        try:
            verify_jwt_in_request(optional=True)
        except (JWTExtendedException, PyJWTError) as exc:
            logger.info("ignoring unusable access token: %s", exc)
            return None

        user_id = get_jwt_identity()
        if not user_id:
            return None

        return {
            "user_id": user_id,
            "email": get_jwt().get("email"),
        }

