"""Client and observable store for the fake store product catalog."""

from .client import CatalogClient
from .config import CatalogSettings, get_settings
from .errors import CatalogError, DecodeError, TransportError
from .model import Product, Rating, decode_product, decode_products
from .protocol import CatalogSource
from .state import Error, FetchState, Loaded, Loading
from .store import CatalogStore

__all__ = [
    "CatalogClient",
    "CatalogError",
    "CatalogSettings",
    "CatalogSource",
    "CatalogStore",
    "DecodeError",
    "Error",
    "FetchState",
    "Loaded",
    "Loading",
    "Product",
    "Rating",
    "TransportError",
    "decode_product",
    "decode_products",
    "get_settings",
]
