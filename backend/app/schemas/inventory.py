from typing import Optional, Dict
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class BranchOut(BaseModel):
    id: str
    name: Optional[str]

    class Config:
        from_attributes = True


class ProductOut(BaseModel):
    id: str
    sku: Optional[str]
    name: Optional[str]
    supplier_id: Optional[str]
    stock_by_branch: Dict[str, int] = {}

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
