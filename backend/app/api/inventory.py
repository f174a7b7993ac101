import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..auth import require_read_client
from ..database import get_db
from ..errors import InternalError
from ..models.inventory import Branch, Product, Stock
from ..repository import TenantRepository
from ..schemas.inventory import BranchOut, ProductOut
from ..tenants import TenantIdentity
from ..utils.aggregation import stock_by_branch

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/branches", response_model=List[BranchOut])
def list_branches(
    identity: TenantIdentity = Depends(require_read_client),
    db: Session = Depends(get_db),
):
    repo = TenantRepository(db, identity.client_id)
    try:
        return repo.query_by_tenant(Branch)
    except SQLAlchemyError:
        logger.exception("Branch query failed for client %s", identity.client_id)
        raise InternalError()


@router.get("/products", response_model=List[ProductOut])
def list_products(
    identity: TenantIdentity = Depends(require_read_client),
    db: Session = Depends(get_db),
):
    """Every product of the tenant with its stock quantity per branch."""
    repo = TenantRepository(db, identity.client_id)
    try:
        products = repo.query_by_tenant(Product)
        stocks = repo.query_by_tenant(Stock)
    except SQLAlchemyError:
        logger.exception("Product query failed for client %s", identity.client_id)
        raise InternalError()

    by_product = stock_by_branch((p.id for p in products), stocks)
    return [
        ProductOut(
            id=p.id,
            sku=p.sku,
            name=p.name,
            supplier_id=p.supplier_id,
            stock_by_branch=by_product[p.id],
        )
        for p in products
    ]
