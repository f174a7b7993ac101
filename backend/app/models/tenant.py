from sqlalchemy import Column, String, DateTime, func
from ..database import Base


class Client(Base):
    """
    One row per tenant. Create-only: rows are never updated or deleted.
    api_key grants ingestion writes; read_token grants read-only queries.
    """
    __tablename__ = "clients"

    id         = Column(String(200), primary_key=True)
    api_key    = Column(String(500), nullable=False)
    read_token = Column(String(500), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
