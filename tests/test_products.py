# tests/test_products.py
from fastapi.testclient import TestClient

from storefront.database import Store
from storefront.main import create_app

LAPTOP = {"id": 1, "name": "Laptop", "price": 999, "category": "Electronics"}


def fresh_client(*products):
    store = Store(products=products or [LAPTOP])
    return TestClient(create_app(store=store)), store


def test_walkthrough_create_filter_delete():
    client, _ = fresh_client()
    r = client.post("/products", json={"name": "Mouse", "price": 20, "category": "Electronics"})
    assert r.status_code == 201
    assert r.json() == {"id": 2, "name": "Mouse", "price": 20, "category": "Electronics"}

    r = client.get("/products", params={"category": "Electronics"})
    assert [p["name"] for p in r.json()] == ["Laptop", "Mouse"]

    r = client.delete("/products/1")
    assert r.status_code == 204
    assert r.content == b""

    assert client.get("/products").json() == [
        {"id": 2, "name": "Mouse", "price": 20, "category": "Electronics"}
    ]


def test_create_assigns_previous_count_plus_one():
    client, store = fresh_client()
    for expected_id in (2, 3, 4):
        before = len(store.products)
        r = client.post("/products", json={"name": f"P{expected_id}", "price": 5, "category": "Misc"})
        assert r.status_code == 201
        assert r.json()["id"] == before + 1 == expected_id


def test_ids_are_not_reused_after_delete():
    client, _ = fresh_client()
    client.post("/products", json={"name": "Mouse", "price": 20, "category": "Electronics"})
    client.delete("/products/1")
    r = client.post("/products", json={"name": "Cable", "price": 5, "category": "Electronics"})
    assert r.json()["id"] == 3
    ids = [p["id"] for p in client.get("/products").json()]
    assert ids == [2, 3]


def test_create_rejects_missing_or_falsy_fields():
    client, store = fresh_client()
    bad_bodies = [
        {},
        {"price": 10, "category": "Toys"},
        {"name": "Ball", "category": "Toys"},
        {"name": "Ball", "price": 10},
        {"name": "", "price": 10, "category": "Toys"},
        {"name": "Ball", "price": 0, "category": "Toys"},
        {"name": "Ball", "price": 10, "category": None},
        {"name": "Ball", "price": False, "category": "Toys"},
    ]
    for body in bad_bodies:
        r = client.post("/products", json=body)
        assert r.status_code == 400
        assert r.json() == {"error": "Name, price, and category are required."}
    assert len(store.products) == 1


def test_create_rejects_uncoercible_types():
    client, store = fresh_client()
    r = client.post("/products", json={"name": "Ball", "price": "cheap", "category": "Toys"})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid request body."}
    assert len(store.products) == 1


def test_create_accepts_form_encoded_body():
    client, _ = fresh_client()
    r = client.post("/products", data={"name": "Desk", "price": "150", "category": "Furniture"})
    assert r.status_code == 201
    assert r.json() == {"id": 2, "name": "Desk", "price": 150, "category": "Furniture"}


def test_form_encoded_zero_price_passes_the_gate():
    client, _ = fresh_client()
    r = client.post("/products", data={"name": "Z", "price": "0", "category": "C"})
    assert r.status_code == 201
    assert r.json() == {"id": 2, "name": "Z", "price": 0, "category": "C"}


def test_create_rejects_nan_price():
    client, store = fresh_client()
    for token in (b"NaN", b"Infinity", b"-Infinity"):
        body = b'{"name": "Ball", "price": ' + token + b', "category": "Toys"}'
        r = client.post("/products", content=body, headers={"Content-Type": "application/json"})
        assert r.status_code == 400
        assert r.json() == {"error": "Malformed request body."}
    assert len(store.products) == 1


def test_filter_is_exact_and_keeps_order():
    client, _ = fresh_client(
        {"id": 1, "name": "Laptop", "price": 999, "category": "Electronics"},
        {"id": 2, "name": "Mug", "price": 10, "category": "Kitchen"},
        {"id": 3, "name": "Phone", "price": 500, "category": "Electronics"},
    )
    names = [p["name"] for p in client.get("/products?category=Electronics").json()]
    assert names == ["Laptop", "Phone"]
    assert client.get("/products?category=electronics").json() == []
    assert len(client.get("/products?category=").json()) == 3


def test_patch_updates_only_truthy_fields():
    client, _ = fresh_client()
    r = client.patch("/products/1", json={"price": 899, "name": ""})
    assert r.status_code == 200
    assert r.json() == {"id": 1, "name": "Laptop", "price": 899, "category": "Electronics"}

    r = client.patch("/products/1", json={})
    assert r.json() == {"id": 1, "name": "Laptop", "price": 899, "category": "Electronics"}


def test_patch_unknown_product_is_404():
    client, store = fresh_client()
    for raw_id in ("42", "abc"):
        r = client.patch(f"/products/{raw_id}", json={"name": "Ghost"})
        assert r.status_code == 404
        assert r.json() == {"error": "Product not found."}
    assert store.products[0].name == "Laptop"


def test_patch_reads_leading_digits_of_id():
    client, _ = fresh_client()
    r = client.patch("/products/1abc", json={"category": "Computers"})
    assert r.status_code == 200
    assert r.json()["category"] == "Computers"


def test_delete_unknown_product_is_404():
    client, store = fresh_client()
    r = client.delete("/products/7")
    assert r.status_code == 404
    assert r.json() == {"error": "Product not found."}
    assert len(store.products) == 1


def test_patch_rejects_uncoercible_value():
    client, store = fresh_client()
    r = client.patch("/products/1", json={"price": "cheap", "name": "Notebook"})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid request body."}
    assert store.products[0].model_dump() == LAPTOP
