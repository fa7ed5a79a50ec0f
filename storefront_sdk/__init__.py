"""HTTP client and command line tools for the storefront API."""
