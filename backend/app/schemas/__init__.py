from .ingest import BranchBatch, ProductBatch, StockBatch, SaleBatch, IngestResult
from .inventory import BranchOut, ProductOut
from .sales import SaleOut
from .admin import AddClientRequest, AddClientResult

__all__ = [
    "BranchBatch", "ProductBatch", "StockBatch", "SaleBatch", "IngestResult",
    "BranchOut", "ProductOut",
    "SaleOut",
    "AddClientRequest", "AddClientResult",
]
