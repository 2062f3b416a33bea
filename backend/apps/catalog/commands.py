from dataclasses import dataclass
from typing import Any, Dict, Optional

from .exceptions import InvalidArgumentError
from .models import NAME_MAX_LENGTH, STOCK_MAX, STOCK_MIN


def _parse_int(value: Any, field_name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{field_name} must be an integer.")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(
            f"{field_name} must be an integer.", details={field_name: value}
        )


def _parse_name(value: Any) -> Optional[str]:
    if value is None:
        return None
    name = str(value)
    if len(name) > NAME_MAX_LENGTH:
        raise InvalidArgumentError(
            f"name must be at most {NAME_MAX_LENGTH} characters.",
            details={"name": len(name)},
        )
    return name


def _parse_float(value: Any, field_name: str) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(
            f"{field_name} must be a number.", details={field_name: value}
        )


@dataclass
class CategoryCommand:
    name: Optional[str]

    @staticmethod
    def from_raw(payload: Optional[Dict[str, Any]]):
        data = dict(payload or {})
        # ids are always assigned by the database
        data.pop("id", None)
        return CategoryCommand(name=_parse_name(data.get("name")))


@dataclass
class ProductCommand:
    """Full replacement of a product's mutable fields.

    Omitted fields take their empty value (price None, stock 0) because create
    and update both write every field.
    """

    name: Optional[str]
    price: Optional[float]
    stock: int
    category_id: Optional[int]

    @staticmethod
    def from_raw(payload: Optional[Dict[str, Any]]):
        data = dict(payload or {})
        data.pop("id", None)
        raw_category = data.get("category_id", data.get("categoryId"))
        stock = _parse_int(data.get("stock"), "stock")
        if stock is not None and not STOCK_MIN <= stock <= STOCK_MAX:
            raise InvalidArgumentError(
                f"stock must be between {STOCK_MIN} and {STOCK_MAX}.",
                details={"stock": stock},
            )
        return ProductCommand(
            name=_parse_name(data.get("name")),
            price=_parse_float(data.get("price"), "price"),
            stock=stock if stock is not None else 0,
            category_id=_parse_int(raw_category, "categoryId"),
        )
