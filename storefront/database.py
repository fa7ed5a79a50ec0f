import itertools
import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from .models import Customer, Number, Product, Review
from .seed import SEED_CUSTOMERS, SEED_PRODUCTS, SEED_REVIEWS

# This file holds the in-memory collections behind every endpoint.

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
Record = Union[BaseModel, Dict[str, Any]]


def _load(model: Type[ModelT], records: Iterable[Record]) -> List[ModelT]:
    return [r if isinstance(r, model) else model.model_validate(r) for r in records]


def _id_counter(items: List[Any]) -> Iterator[int]:
    # ids are never reused, even after a delete
    return itertools.count(max((item.id for item in items), default=0) + 1)


class Store:
    """The three collections plus one id counter per collection.

    Built once per application and reached by handlers through
    ``request.app.state.store``.
    """

    def __init__(
        self,
        products: Iterable[Record] = (),
        customers: Iterable[Record] = (),
        reviews: Iterable[Record] = (),
    ):
        self.products: List[Product] = _load(Product, products)
        self.customers: List[Customer] = _load(Customer, customers)
        self.reviews: List[Review] = _load(Review, reviews)
        self._product_ids = _id_counter(self.products)
        self._customer_ids = _id_counter(self.customers)
        self._review_ids = _id_counter(self.reviews)

    # Products
    def add_product(self, name: str, price: Number, category: str) -> Product:
        product = Product(id=next(self._product_ids), name=name, price=price, category=category)
        self.products.append(product)
        logger.info("Created product %s (%s)", product.id, product.name)
        return product

    def find_product(self, product_id: int) -> Optional[Product]:
        for p in self.products:
            if p.id == product_id:
                return p
        return None

    def remove_product(self, product_id: int) -> bool:
        for index, p in enumerate(self.products):
            if p.id == product_id:
                del self.products[index]
                logger.info("Deleted product %s", product_id)
                return True
        return False

    # Customers
    def add_customer(self, name: Optional[str], email: Optional[str]) -> Customer:
        customer = Customer(id=next(self._customer_ids), name=name, email=email)
        self.customers.append(customer)
        logger.info("Created customer %s", customer.id)
        return customer

    # Reviews
    def add_review(self, product_id: Optional[int], content: Optional[str]) -> Review:
        review = Review(id=next(self._review_ids), product_id=product_id, content=content)
        self.reviews.append(review)
        logger.info("Created review %s for product %s", review.id, product_id)
        return review


def seeded_store() -> Store:
    return Store(products=SEED_PRODUCTS, customers=SEED_CUSTOMERS, reviews=SEED_REVIEWS)
