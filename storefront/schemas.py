# storefront/schemas.py
"""
Typed request bodies.

Every route parses its JSON payload into one of these dataclasses before
touching the database, so services only ever see well-formed values.
"""
from dataclasses import dataclass, field
from typing import Optional

from .errors import ValidationError
from .model import PAYMENT_METHODS


# largest value a 32-bit INTEGER column holds on every backend
MAX_MONEY = 2**31 - 1
MAX_QUANTITY = 10_000


def _is_int(v) -> bool:
    # bool is an int subclass; money and quantities never are
    return isinstance(v, int) and not isinstance(v, bool)


def require_name(v, field_name="name") -> str:
    if not isinstance(v, str) or not v.strip():
        raise ValidationError(f"{field_name} is required")
    return v.strip()


def require_money(v, field_name="price") -> int:
    if not _is_int(v) or v < 0:
        raise ValidationError(f"{field_name} must be a non-negative integer (minor units)")
    if v > MAX_MONEY:
        raise ValidationError(f"{field_name} must not exceed {MAX_MONEY}")
    return v


def require_quantity(v) -> int:
    if not _is_int(v) or v < 1:
        raise ValidationError("quantity must be a positive integer")
    if v > MAX_QUANTITY:
        raise ValidationError(f"quantity must not exceed {MAX_QUANTITY}")
    return v


def optional_image_url(v) -> Optional[str]:
    if v is None:
        return None
    if not isinstance(v, str):
        raise ValidationError("imageUrl must be a string")
    return v.strip() or None


def _require_object(data):
    if not isinstance(data, dict):
        raise ValidationError("JSON object body required")
    return data


@dataclass
class ProductInput:
    name: str
    price: int
    image_url: Optional[str] = None

    @classmethod
    def from_json(cls, data):
        data = _require_object(data)
        return cls(
            name=require_name(data.get("name")),
            price=require_money(data.get("price")),
            image_url=optional_image_url(data.get("imageUrl")),
        )


@dataclass
class ProductChanges:
    """Partial product update; only recognized keys present in the body land in `values`."""
    values: dict = field(default_factory=dict)

    @classmethod
    def from_json(cls, data):
        data = _require_object(data)
        values = {}
        if "name" in data:
            values["name"] = require_name(data["name"])
        if "imageUrl" in data:
            values["image_url"] = optional_image_url(data["imageUrl"])
        if "price" in data:
            values["price"] = require_money(data["price"])
        return cls(values=values)

    @property
    def is_empty(self) -> bool:
        return not self.values


@dataclass
class CheckoutItem:
    name: str
    price: int
    quantity: int
    product_id: Optional[int] = None

    @classmethod
    def from_json(cls, data, index=0):
        if not isinstance(data, dict):
            raise ValidationError(f"items[{index}] must be an object")
        product_id = data.get("productId")
        if product_id is not None and (not _is_int(product_id) or product_id < 1):
            raise ValidationError(f"items[{index}].productId must be a positive integer")
        try:
            return cls(
                name=require_name(data.get("name")),
                price=require_money(data.get("price")),
                quantity=require_quantity(data.get("quantity")),
                product_id=product_id,
            )
        except ValidationError as e:
            raise ValidationError(f"items[{index}]: {e.message}") from e


@dataclass
class CheckoutRequest:
    items: list
    payment_method: str

    @classmethod
    def from_json(cls, data):
        data = _require_object(data)
        raw_items = data.get("items")
        if not isinstance(raw_items, list) or not raw_items:
            raise ValidationError("items required")
        items = [CheckoutItem.from_json(it, idx) for idx, it in enumerate(raw_items)]

        method = data.get("paymentMethod")
        if method not in PAYMENT_METHODS:
            raise ValidationError("invalid paymentMethod")
        # a client "total" is never read; see order_service.create_order
        return cls(items=items, payment_method=method)


@dataclass
class LoginRequest:
    username: str
    password: str

    @classmethod
    def from_json(cls, data):
        data = _require_object(data)
        username = data.get("username")
        password = data.get("password")
        if not isinstance(username, str) or not username.strip() \
                or not isinstance(password, str) or not password:
            raise ValidationError("username and password are required")
        return cls(username=username.strip(), password=password)
