import logging
from datetime import date, datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..auth import require_read_client
from ..config import Settings, get_app_settings
from ..database import get_db
from ..errors import BadRequest, InternalError
from ..models.sales import Sale
from ..repository import TenantRepository
from ..schemas.sales import SaleOut
from ..tenants import TenantIdentity
from ..utils.aggregation import sales_cutoff

router = APIRouter()
logger = logging.getLogger(__name__)


def get_today() -> date:
    """Current UTC calendar day. Overridable in tests."""
    return datetime.now(timezone.utc).date()


def _parse_days(raw: Optional[str], settings: Settings) -> int:
    default = settings.default_sales_days
    if raw is None or raw == "":
        return default
    try:
        days = int(raw)
    except ValueError:
        days = 0
    if days > 0:
        return days
    if settings.strict_days_param:
        raise BadRequest("days must be a positive integer")
    logger.warning("Invalid days=%r; falling back to %d", raw, default)
    return default


@router.get("/sales", response_model=List[SaleOut])
def list_sales(
    days: Optional[str] = Query(None, description="Window size in calendar days (default 90)"),
    identity: TenantIdentity = Depends(require_read_client),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    today: date = Depends(get_today),
):
    window = _parse_days(days, settings)
    cutoff = sales_cutoff(today, window)
    repo = TenantRepository(db, identity.client_id)
    try:
        rows = repo.query_by_tenant(Sale, Sale.date >= cutoff)
    except SQLAlchemyError:
        logger.exception("Sales query failed for client %s", identity.client_id)
        raise InternalError()

    return [
        SaleOut(id=s.id, product_id=s.product_id, date=s.date, quantity=s.quantity)
        for s in rows
    ]
