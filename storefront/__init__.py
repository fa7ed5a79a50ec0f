"""In-memory storefront API: products, customers and reviews."""
