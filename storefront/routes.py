# storefront/routes.py
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from .core import ProductIn, decoded_body, validated_product
from .database import Store
from .logic import (
    create_customer_logic, create_product_logic, create_review_logic,
    delete_product_logic, list_customers_logic, list_products_logic,
    list_reviews_logic, update_product_logic,
)
from .models import Customer, Product, Review

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))

router = APIRouter()


def get_store(request: Request) -> Store:
    return request.app.state.store


# ---------------------------
# Product endpoints
# ---------------------------
@router.get("/products", response_model=List[Product])
async def list_products(category: Optional[str] = None, store: Store = Depends(get_store)):
    return await list_products_logic(store, category)


@router.post("/products", response_model=Product, status_code=201)
async def create_product(
    payload: ProductIn = Depends(validated_product),
    store: Store = Depends(get_store),
):
    return await create_product_logic(store, payload)


@router.patch("/products/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    body: Dict[str, Any] = Depends(decoded_body),
    store: Store = Depends(get_store),
):
    return await update_product_logic(store, product_id, body)


@router.delete("/products/{product_id}", status_code=204, response_class=Response)
async def delete_product(product_id: str, store: Store = Depends(get_store)):
    await delete_product_logic(store, product_id)
    return Response(status_code=204)


# ---------------------------
# Customer endpoints
# ---------------------------
@router.get("/customers", response_model=List[Customer])
async def list_customers(store: Store = Depends(get_store)):
    return await list_customers_logic(store)


@router.post("/customers", response_model=Customer, status_code=201)
async def create_customer(
    body: Dict[str, Any] = Depends(decoded_body),
    store: Store = Depends(get_store),
):
    return await create_customer_logic(store, body)


# ---------------------------
# Review endpoints
# ---------------------------
@router.get("/reviews", response_model=List[Review])
async def list_reviews(store: Store = Depends(get_store)):
    return await list_reviews_logic(store)


@router.post("/reviews", response_model=Review, status_code=201)
async def create_review(
    body: Dict[str, Any] = Depends(decoded_body),
    store: Store = Depends(get_store),
):
    return await create_review_logic(store, body)


# ---------------------------
# Product listing page
# ---------------------------
@router.get("/", response_class=HTMLResponse)
async def index(request: Request, store: Store = Depends(get_store)):
    return templates.TemplateResponse(request, "index.html", {"products": store.products})
