import re
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel

_ISO_DAY = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)


class _Row(BaseModel):
    """Connector record. Field names are camelCase on the wire; clientId is ignored."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        coerce_numbers_to_str = True


# ─── Request bodies ──────────────────────────────────────────────────────────

class BranchRow(_Row):
    id:   str
    name: Optional[str] = None


class ProductRow(_Row):
    id:          str
    sku:         Optional[str] = None
    name:        Optional[str] = None
    supplier_id: Optional[str] = None


class StockRow(_Row):
    product_id: str
    branch_id:  str
    quantity:   int


class SaleRow(_Row):
    id:         str
    product_id: str
    date:       str
    quantity:   int

    @field_validator("date")
    @classmethod
    def validate_date_format(cls, v):
        # Stored as text and compared lexically, so only YYYY-MM-DD sorts correctly
        if not _ISO_DAY.match(v):
            raise ValueError("Date must be in YYYY-MM-DD format")
        try:
            datetime.strptime(v, "%Y-%m-%d")
        except ValueError:
            raise ValueError("Date must be a real calendar day in YYYY-MM-DD format")
        return v


class BranchBatch(BaseModel):
    data: List[BranchRow]


class ProductBatch(BaseModel):
    data: List[ProductRow]


class StockBatch(BaseModel):
    data: List[StockRow]


class SaleBatch(BaseModel):
    data: List[SaleRow]


# ─── Response bodies ──────────────────────────────────────────────────────────

class IngestResult(BaseModel):
    status:   str = "ok"
    received: int
