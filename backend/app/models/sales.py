from sqlalchemy import Column, Integer, String, ForeignKey, Index
from ..database import Base


class Sale(Base):
    """
    Grain: (sale id, client)
    date is a 'YYYY-MM-DD' string; the sales query compares it lexically.
    """
    __tablename__ = "sales"

    id         = Column(String(200), primary_key=True)
    client_id  = Column(String(200), ForeignKey("clients.id"), primary_key=True)
    product_id = Column(String(200), nullable=False)
    date       = Column(String(10), nullable=False)
    quantity   = Column(Integer, nullable=False)

    __table_args__ = (
        Index("ix_sales_client_date", "client_id", "date"),
    )
