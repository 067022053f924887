from pydantic import BaseModel, ConfigDict, Field
from typing import List

# Request/response bodies for the receipts endpoints.
# Field content is checked by the rules, not here: a bad date still scores.
class Item(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_description: str = Field(alias="shortDescription")
    price: str

class Receipt(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    retailer: str
    purchase_date: str = Field(alias="purchaseDate")
    purchase_time: str = Field(alias="purchaseTime")
    items: List[Item]
    total: str

class ProcessResponse(BaseModel):
    id: str

class PointsResponse(BaseModel):
    points: int
