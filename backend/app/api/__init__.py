from fastapi import APIRouter
from .inventory import router as inventory_router
from .sales import router as sales_router
from .ingest import router as ingest_router
from .admin import router as admin_router

api_router = APIRouter()
api_router.include_router(inventory_router, tags=["Inventory"])
api_router.include_router(sales_router,     tags=["Sales"])
api_router.include_router(ingest_router,    prefix="/ingest", tags=["Ingest"])
api_router.include_router(admin_router,     prefix="/admin",  tags=["Admin"])
