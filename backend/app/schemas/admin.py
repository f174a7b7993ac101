from typing import Optional
from pydantic import BaseModel, Field


class AddClientRequest(BaseModel):
    client_id:  str = Field(alias="clientId", min_length=1)
    api_key:    str = Field(alias="apiKey", min_length=1)
    read_token: str = Field(alias="readToken", min_length=1)

    class Config:
        populate_by_name = True


class AddClientResult(BaseModel):
    status:  str = "ok"
    message: Optional[str] = None
