# Initial contents of each collection when SEED_DATA is enabled.

SEED_PRODUCTS = [
    {"id": 1, "name": "Laptop", "price": 999, "category": "Electronics"},
    {"id": 2, "name": "Smartphone", "price": 699, "category": "Electronics"},
    {"id": 3, "name": "Coffee Mug", "price": 12.5, "category": "Kitchen"},
    {"id": 4, "name": "Desk Lamp", "price": 45, "category": "Home"},
]

SEED_CUSTOMERS = [
    {"id": 1, "name": "Alice Johnson", "email": "alice@example.com"},
    {"id": 2, "name": "Bob Smith", "email": "bob@example.com"},
]

SEED_REVIEWS = [
    {"id": 1, "productId": 1, "content": "Fast and light, battery lasts all day."},
    {"id": 2, "productId": 3, "content": "Keeps coffee warm for a while."},
]
