from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from .errors import DecodeError


class Rating(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    rate: float
    count: int


class Product(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    id: int
    title: str
    price: float
    image: str
    rating: Rating


_product_list = TypeAdapter(list[Product])


def decode_product(text: str) -> Product:
    """Decode a single product from a JSON document."""
    try:
        return Product.model_validate_json(text)
    except ValidationError as e:
        raise DecodeError(f"Invalid product data: {_summarize(e)}") from e


def decode_products(text: str) -> list[Product]:
    """Decode a JSON array of products."""
    try:
        return _product_list.validate_json(text)
    except ValidationError as e:
        raise DecodeError(f"Invalid product list: {_summarize(e)}") from e


def _summarize(error: ValidationError) -> str:
    """Reduce a validation error to its first problem, e.g. "0.rating.count: Field required"."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if location:
        return f"{location}: {first['msg']}"
    return first["msg"]
