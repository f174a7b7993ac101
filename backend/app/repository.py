"""
Tenant-scoped access to the domain collections.

TenantRepository is bound to one session and one client id. Every read it
issues is filtered by that client id and every write is tagged with it, so a
handler holding a repository cannot reach another tenant's rows.

Upserts use the dialect's native INSERT ... ON CONFLICT DO UPDATE, which
PostgreSQL and SQLite both provide.
"""
import logging
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _insert_for(session: Session):
    dialect = session.get_bind().dialect.name
    try:
        return _INSERTS[dialect]
    except KeyError:
        raise RuntimeError(f"Upsert not supported for dialect '{dialect}'") from None


def _primary_key(model) -> list[str]:
    return [c.name for c in model.__table__.primary_key.columns]


class TenantRepository:
    def __init__(self, db: Session, client_id: str):
        self._db = db
        self.client_id = client_id

    @contextmanager
    def transaction(self) -> Iterator["TenantRepository"]:
        """Commit on clean exit, roll back on any exception and re-raise."""
        try:
            yield self
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise

    def upsert(self, model, values: dict[str, Any]) -> None:
        """Insert one row or overwrite every non-key column of the existing one."""
        row = {**values, "client_id": self.client_id}
        keys = _primary_key(model)
        insert = _insert_for(self._db)
        stmt = insert(model).values(row)
        updates = {k: stmt.excluded[k] for k in row if k not in keys}
        if updates:
            stmt = stmt.on_conflict_do_update(index_elements=keys, set_=updates)
        else:
            stmt = stmt.on_conflict_do_nothing(index_elements=keys)
        self._db.execute(stmt)

    def query_by_tenant(self, model, *criteria) -> list:
        stmt = select(model).where(model.client_id == self.client_id, *criteria)
        return list(self._db.scalars(stmt).all())
