"""
Tenant provisioning.

POST /admin/add-client

Open unless ADMIN_TOKEN is configured, in which case the X-Admin-Token header
must match it. Duplicate ids follow DUPLICATE_CLIENT_POLICY.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..config import Settings, get_app_settings
from ..database import get_db
from ..errors import InternalError, Unauthorized
from ..schemas.admin import AddClientRequest, AddClientResult
from ..tenants import create_client

router = APIRouter()
logger = logging.getLogger(__name__)


def require_admin(
    x_admin_token: Optional[str] = Header(None, alias="X-Admin-Token"),
    settings: Settings = Depends(get_app_settings),
) -> None:
    if settings.admin_token and x_admin_token != settings.admin_token:
        raise Unauthorized("Invalid admin token")


@router.post(
    "/add-client",
    response_model=AddClientResult,
    response_model_exclude_none=True,
    dependencies=[Depends(require_admin)],
)
def add_client(
    body: AddClientRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    try:
        created = create_client(
            db,
            body.client_id,
            body.api_key,
            body.read_token,
            on_duplicate=settings.duplicate_client_policy,
        )
    except SQLAlchemyError:
        logger.exception("Provisioning failed for client %s", body.client_id)
        raise InternalError()

    return AddClientResult(message="Client added" if created else "Client already exists")
