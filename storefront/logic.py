import re
from typing import Any, Dict, List, Optional

from fastapi import HTTPException

from .core import CustomerIn, ProductIn, ProductPatch, ReviewIn, parse_body, truthy_fields
from .database import Store
from .models import Customer, Product, Review

# This file contains the logic behind each API endpoint.

PRODUCT_NOT_FOUND = "Product not found."

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_id(raw: str) -> Optional[int]:
    """Read the leading integer of a path segment ("12abc" -> 12, "abc" -> None)."""
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


def _require_product(store: Store, raw_id: str) -> Product:
    product_id = _parse_id(raw_id)
    product = store.find_product(product_id) if product_id is not None else None
    if not product:
        raise HTTPException(status_code=404, detail=PRODUCT_NOT_FOUND)
    return product


# Product endpoints
async def list_products_logic(store: Store, category: Optional[str] = None) -> List[Product]:
    if not category:
        return store.products
    return [p for p in store.products if p.category == category]


async def create_product_logic(store: Store, payload: ProductIn) -> Product:
    return store.add_product(payload.name, payload.price, payload.category)


async def update_product_logic(store: Store, raw_id: str, body: Dict[str, Any]) -> Product:
    product = _require_product(store, raw_id)
    # only fields sent with a truthy value overwrite the stored ones
    changes = parse_body(ProductPatch, truthy_fields(body)).model_dump(exclude_unset=True)
    for field, value in changes.items():
        setattr(product, field, value)
    return product


async def delete_product_logic(store: Store, raw_id: str) -> None:
    product_id = _parse_id(raw_id)
    if product_id is None or not store.remove_product(product_id):
        raise HTTPException(status_code=404, detail=PRODUCT_NOT_FOUND)


# Customer endpoints
async def list_customers_logic(store: Store) -> List[Customer]:
    return store.customers


async def create_customer_logic(store: Store, body: Dict[str, Any]) -> Customer:
    payload = parse_body(CustomerIn, body)
    return store.add_customer(payload.name, payload.email)


# Review endpoints
async def list_reviews_logic(store: Store) -> List[Review]:
    return store.reviews


async def create_review_logic(store: Store, body: Dict[str, Any]) -> Review:
    payload = parse_body(ReviewIn, body)
    return store.add_review(payload.product_id, payload.content)
