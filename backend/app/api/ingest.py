"""
Connector ingestion endpoints.

POST /ingest/branches
POST /ingest/products
POST /ingest/stocks
POST /ingest/sales

Upsert behaviour:
  - Each record is written in array order, keyed by its natural id plus the
    authenticated client id. clientId values in the body are ignored.
  - An existing row is overwritten with the submitted values (last write wins).
  - The whole batch runs in one transaction; a storage failure on any record
    rolls back every record and returns HTTP 500.
"""
import logging
from typing import Callable, Sequence

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..auth import require_write_client
from ..database import get_db
from ..errors import InternalError
from ..models.inventory import Branch, Product, Stock
from ..models.sales import Sale
from ..repository import TenantRepository
from ..schemas.ingest import (
    BranchBatch,
    ProductBatch,
    StockBatch,
    SaleBatch,
    IngestResult,
)
from ..tenants import TenantIdentity

router = APIRouter()
logger = logging.getLogger(__name__)


# ─── helpers ──────────────────────────────────────────────────────────────────

def _ingest(
    db: Session,
    identity: TenantIdentity,
    model,
    rows: Sequence,
    to_values: Callable[[object], dict],
) -> IngestResult:
    repo = TenantRepository(db, identity.client_id)
    try:
        with repo.transaction():
            for r in rows:
                repo.upsert(model, to_values(r))
    except SQLAlchemyError:
        logger.exception(
            "Ingest into %s failed for client %s; %d record(s) rolled back",
            model.__tablename__, identity.client_id, len(rows),
        )
        raise InternalError()

    logger.info("Ingested %d %s record(s) for client %s", len(rows), model.__tablename__, identity.client_id)
    return IngestResult(received=len(rows))


# ─── routes ───────────────────────────────────────────────────────────────────

@router.post("/branches", response_model=IngestResult, summary="Upsert branches")
def ingest_branches(
    body: BranchBatch,
    identity: TenantIdentity = Depends(require_write_client),
    db: Session = Depends(get_db),
):
    return _ingest(db, identity, Branch, body.data, lambda r: {"id": r.id, "name": r.name})


@router.post("/products", response_model=IngestResult, summary="Upsert products")
def ingest_products(
    body: ProductBatch,
    identity: TenantIdentity = Depends(require_write_client),
    db: Session = Depends(get_db),
):
    return _ingest(
        db, identity, Product, body.data,
        lambda r: {"id": r.id, "sku": r.sku, "name": r.name, "supplier_id": r.supplier_id},
    )


@router.post("/stocks", response_model=IngestResult, summary="Upsert stock snapshots")
def ingest_stocks(
    body: StockBatch,
    identity: TenantIdentity = Depends(require_write_client),
    db: Session = Depends(get_db),
):
    return _ingest(
        db, identity, Stock, body.data,
        lambda r: {"product_id": r.product_id, "branch_id": r.branch_id, "quantity": r.quantity},
    )


@router.post("/sales", response_model=IngestResult, summary="Upsert sales")
def ingest_sales(
    body: SaleBatch,
    identity: TenantIdentity = Depends(require_write_client),
    db: Session = Depends(get_db),
):
    return _ingest(
        db, identity, Sale, body.data,
        lambda r: {"id": r.id, "product_id": r.product_id, "date": r.date, "quantity": r.quantity},
    )
