"""
Write and read guards.

Both run as route dependencies, so they reject a request before the handler
body executes. Credentials are taken from X-API-Key first, then from an
"Authorization: Bearer <credential>" header.
"""
import logging
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .database import get_db
from .errors import InternalError, Unauthorized
from .tenants import CredentialKind, TenantIdentity, resolve

logger = logging.getLogger(__name__)

CLIENT_ID_HEADER = "X-Client-ID"
API_KEY_HEADER = "X-API-Key"


def extract_credential(request: Request) -> Optional[str]:
    api_key = request.headers.get(API_KEY_HEADER)
    if api_key:
        return api_key
    authorization = request.headers.get("Authorization", "")
    scheme, _, value = authorization.partition(" ")
    if scheme.lower() == "bearer" and value.strip():
        return value.strip()
    return None


def _guard(kind: CredentialKind):
    def dependency(request: Request, db: Session = Depends(get_db)) -> TenantIdentity:
        client_id = request.headers.get(CLIENT_ID_HEADER)
        credential = extract_credential(request)
        if not client_id or not credential:
            raise Unauthorized("Unauthorized")

        try:
            identity = resolve(db, client_id, credential, kind)
        except SQLAlchemyError:
            logger.exception("Credential lookup failed for client %s", client_id)
            raise InternalError()

        if identity is None:
            logger.info("Rejected %s credential for client %s on %s", kind.value, client_id, request.url.path)
            raise Unauthorized("Invalid credentials")

        request.state.tenant = identity
        return identity

    dependency.__name__ = f"require_{kind.value}_client"
    return dependency


require_write_client = _guard(CredentialKind.WRITE)
require_read_client = _guard(CredentialKind.READ)
