"""Shared fixtures for catalog tests."""

import json

import pytest

from fakestore.errors import TransportError

SAMPLE_PRODUCT = {
    "id": 1,
    "title": "T",
    "price": 9.99,
    "image": "http://x",
    "rating": {"rate": 4.5, "count": 10},
}

API_PRODUCT = {
    "id": 2,
    "title": "Mens Casual Premium Slim Fit T-Shirts",
    "price": 22.3,
    "description": "Slim-fitting style, contrast raglan long sleeve.",
    "category": "men's clothing",
    "image": "https://fakestoreapi.com/img/71-3HjGNDUL._AC_SY879._SL1500_.jpg",
    "rating": {"rate": 4.1, "count": 259},
}


class FakeSource:
    """In-memory catalog source returning canned bodies per path."""

    def __init__(self, responses=None, error=None):
        self.responses = responses or {}
        self.error = error
        self.calls = []

    async def fetch(self, path: str) -> str:
        self.calls.append(path)
        if self.error is not None:
            raise self.error
        return self.responses[path]

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


@pytest.fixture
def products_body():
    return json.dumps([SAMPLE_PRODUCT, API_PRODUCT])


@pytest.fixture
def source(products_body):
    return FakeSource(
        {
            "products": products_body,
            "products/1": json.dumps(SAMPLE_PRODUCT),
            "products/2": json.dumps(API_PRODUCT),
        }
    )


@pytest.fixture
def failing_source():
    return FakeSource(error=TransportError("Error fetching products: connection refused"))
