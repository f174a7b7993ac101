from ..database import Base
from .tenant import Client
from .inventory import Branch, Product, Stock
from .sales import Sale

__all__ = [
    "Base",
    # Tenancy
    "Client",
    # Catalog + stock snapshots
    "Branch", "Product", "Stock",
    # Sales facts
    "Sale",
]
