# storefront_sdk/client.py
import requests
from typing import Any, Optional, Union

Number = Union[int, float]


class StorefrontError(Exception):
    """Raised for any 4xx/5xx answer from the server."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


def _error_message(r) -> str:
    try:
        body = r.json()
    except ValueError:
        return r.text
    if isinstance(body, dict) and "error" in body:
        return str(body["error"])
    return r.text


class StorefrontClient:
    def __init__(self, base_url: str = "http://127.0.0.1:3000", timeout: int = 10, session: Any = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        # anything with requests' get/post/patch/delete signature works here
        self.session = session if session is not None else requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _unwrap(self, r) -> Any:
        if r.status_code >= 400:
            raise StorefrontError(r.status_code, _error_message(r))
        if r.status_code == 204:
            return None
        return r.json()

    # Products
    def list_products(self, category: Optional[str] = None):
        params = {"category": category} if category else {}
        r = self.session.get(self._url("/products"), params=params, timeout=self.timeout)
        return self._unwrap(r)

    def create_product(self, name: str, price: Number, category: str):
        r = self.session.post(self._url("/products"), json={
            "name": name, "price": price, "category": category
        }, timeout=self.timeout)
        return self._unwrap(r)

    def update_product(self, product_id: int, **fields):
        payload = {k: v for k, v in fields.items() if v is not None}
        r = self.session.patch(self._url(f"/products/{product_id}"), json=payload, timeout=self.timeout)
        return self._unwrap(r)

    def delete_product(self, product_id: int) -> None:
        r = self.session.delete(self._url(f"/products/{product_id}"), timeout=self.timeout)
        return self._unwrap(r)

    # Customers
    def list_customers(self):
        return self._unwrap(self.session.get(self._url("/customers"), timeout=self.timeout))

    def create_customer(self, name: str, email: str):
        r = self.session.post(self._url("/customers"), json={"name": name, "email": email}, timeout=self.timeout)
        return self._unwrap(r)

    # Reviews
    def list_reviews(self):
        return self._unwrap(self.session.get(self._url("/reviews"), timeout=self.timeout))

    def create_review(self, product_id: int, content: str):
        r = self.session.post(self._url("/reviews"), json={
            "productId": product_id, "content": content
        }, timeout=self.timeout)
        return self._unwrap(r)

    # Listing page
    def fetch_index_page(self) -> str:
        r = self.session.get(self._url("/"), timeout=self.timeout)
        if r.status_code >= 400:
            raise StorefrontError(r.status_code, r.text)
        return r.text
