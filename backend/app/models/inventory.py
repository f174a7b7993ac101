from sqlalchemy import Column, Integer, String, ForeignKey
from ..database import Base


class Branch(Base):
    __tablename__ = "branches"

    id        = Column(String(200), primary_key=True)
    client_id = Column(String(200), ForeignKey("clients.id"), primary_key=True)
    name      = Column(String(500))


class Product(Base):
    __tablename__ = "products"

    id          = Column(String(200), primary_key=True)
    client_id   = Column(String(200), ForeignKey("clients.id"), primary_key=True)
    sku         = Column(String(200))
    name        = Column(String(500))
    supplier_id = Column(String(200))


class Stock(Base):
    """
    Grain: (product, branch, client)
    quantity is an absolute snapshot, replaced on every ingestion.
    No FK to products/branches: connectors may push stock before the catalog.
    """
    __tablename__ = "stocks"

    product_id = Column(String(200), primary_key=True)
    branch_id  = Column(String(200), primary_key=True)
    client_id  = Column(String(200), ForeignKey("clients.id"), primary_key=True)
    quantity   = Column(Integer, nullable=False)
