# storefront/core.py
import json
from typing import Any, Dict, Optional, Type, TypeVar

from fastapi import Depends, HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .models import Number

# Request-shape contracts, body decoding and the product validation gate.

PRODUCT_FIELDS = ("name", "price", "category")
MISSING_PRODUCT_FIELDS = "Name, price, and category are required."

ShapeT = TypeVar("ShapeT", bound=BaseModel)


class _RequestShape(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ProductIn(_RequestShape):
    name: Optional[str] = None
    price: Optional[Number] = None
    category: Optional[str] = None


class ProductPatch(ProductIn):
    pass


class CustomerIn(_RequestShape):
    name: Optional[str] = None
    email: Optional[str] = None


class ReviewIn(_RequestShape):
    product_id: Optional[int] = Field(None, alias="productId")
    content: Optional[str] = None


def parse_body(shape: Type[ShapeT], body: Dict[str, Any]) -> ShapeT:
    try:
        return shape.model_validate(body)
    except ValidationError:
        raise HTTPException(status_code=400, detail="Invalid request body.")


def _reject_constant(token: str):
    # NaN and Infinity are not JSON
    raise ValueError(token)


async def decoded_body(request: Request) -> Dict[str, Any]:
    """Decode a JSON or form-encoded body into a plain mapping.

    Any other content type, or an empty body, decodes to ``{}``.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type == "application/json":
        raw = await request.body()
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw, parse_constant=_reject_constant)
        except ValueError:
            raise HTTPException(status_code=400, detail="Malformed request body.")
        if not isinstance(data, dict):
            raise HTTPException(status_code=400, detail="Malformed request body.")
        return data
    if content_type == "application/x-www-form-urlencoded":
        form = await request.form()
        return dict(form)
    return {}


async def validated_product(body: Dict[str, Any] = Depends(decoded_body)) -> ProductIn:
    # zero and empty strings count as missing
    if not all(body.get(field) for field in PRODUCT_FIELDS):
        raise HTTPException(status_code=400, detail=MISSING_PRODUCT_FIELDS)
    return parse_body(ProductIn, body)


def truthy_fields(body: Dict[str, Any], fields=PRODUCT_FIELDS) -> Dict[str, Any]:
    return {field: body[field] for field in fields if body.get(field)}
