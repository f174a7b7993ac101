from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class SaleOut(BaseModel):
    id: str
    product_id: str
    date: str
    quantity: int

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
