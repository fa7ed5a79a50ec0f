# storefront/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Union

Number = Union[int, float]


class Product(BaseModel):
    id: int
    name: str
    price: Number
    category: str


class Customer(BaseModel):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None


class Review(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    product_id: Optional[int] = Field(None, alias="productId")
    content: Optional[str] = None
