"""
Tenant store: resolves (client id, credential) pairs and provisions clients.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .errors import Conflict
from .models.tenant import Client

logger = logging.getLogger(__name__)


class CredentialKind(str, Enum):
    WRITE = "write"
    READ = "read"


@dataclass(frozen=True)
class TenantIdentity:
    client_id: str
    kind: CredentialKind


_SECRET_COLUMN = {
    CredentialKind.WRITE: Client.api_key,
    CredentialKind.READ:  Client.read_token,
}


def resolve(db: Session, client_id: str, credential: str, kind: CredentialKind) -> Optional[TenantIdentity]:
    """Exact, case-sensitive match of credential against the secret of the given kind."""
    row = db.execute(
        select(Client.id).where(
            Client.id == client_id,
            _SECRET_COLUMN[kind] == credential,
        )
    ).first()
    if row is None:
        return None
    return TenantIdentity(client_id=row[0], kind=kind)


def create_client(db: Session, client_id: str, api_key: str, read_token: str, on_duplicate: str = "reject") -> bool:
    """
    Create a client row. Existing rows are never updated.

    on_duplicate="reject" raises Conflict when the id exists;
    on_duplicate="ignore" leaves the existing row alone and returns False.
    Returns True when a row was created.
    """
    if db.get(Client, client_id) is not None:
        return _duplicate(client_id, on_duplicate)

    db.add(Client(id=client_id, api_key=api_key, read_token=read_token))
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent add of the same id
        db.rollback()
        return _duplicate(client_id, on_duplicate)

    logger.info("Client provisioned: %s", client_id)
    return True


def _duplicate(client_id: str, on_duplicate: str) -> bool:
    if on_duplicate == "ignore":
        logger.info("Client %s already exists; add ignored", client_id)
        return False
    raise Conflict(f"Client '{client_id}' already exists")
