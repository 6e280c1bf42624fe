"""Item records sent to and extracted from the batch import endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, NamedTuple, Sequence

from .errors import OzonMissingArgumentError


def _stringify(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def _require_offer_id(kind: str, offer_id: Any) -> None:
    if offer_id is None or offer_id == "":
        raise OzonMissingArgumentError(f"{kind} requires offer_id")


@dataclass(frozen=True)
class PriceUpdateItem:
    """Price fields for one offer in a prices import.

    Every value is stored as a string, whatever numeric type was passed in.
    """

    offer_id: str
    price: str
    old_price: str
    premium_price: str

    def __post_init__(self) -> None:
        _require_offer_id("PriceUpdateItem", self.offer_id)
        for name in ("price", "old_price", "premium_price"):
            value = getattr(self, name)
            if value is None:
                raise OzonMissingArgumentError(f"PriceUpdateItem requires {name}")
            object.__setattr__(self, name, _stringify(value))
        object.__setattr__(self, "offer_id", _stringify(self.offer_id))

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "PriceUpdateItem":
        """Build from a positional row: [offer_id, price, old_price, premium_price]."""
        if len(row) != 4:
            raise OzonMissingArgumentError(
                f"Price row needs 4 values (offer_id, price, old_price, premium_price), got {len(row)}"
            )
        offer_id, price, old_price, premium_price = row
        return cls(offer_id, price, old_price, premium_price)

    @classmethod
    def coerce(cls, value: Any) -> "PriceUpdateItem":
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(
                offer_id=value.get("offer_id"),
                price=value.get("price"),
                old_price=value.get("old_price"),
                premium_price=value.get("premium_price"),
            )
        if isinstance(value, (list, tuple)):
            return cls.from_row(value)
        raise OzonMissingArgumentError(
            f"Cannot build PriceUpdateItem from {type(value).__name__}"
        )

    def to_payload(self) -> Dict[str, str]:
        return {
            "offer_id": self.offer_id,
            "price": self.price,
            "old_price": self.old_price,
            "premium_price": self.premium_price,
        }


@dataclass(frozen=True)
class StockUpdateItem:
    """Inventory count for one offer in a stocks import. Values are sent as given."""

    offer_id: Any
    stock: Any

    def __post_init__(self) -> None:
        _require_offer_id("StockUpdateItem", self.offer_id)
        if self.stock is None:
            raise OzonMissingArgumentError("StockUpdateItem requires stock")

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "StockUpdateItem":
        """Build from a positional row: [offer_id, stock]."""
        if len(row) != 2:
            raise OzonMissingArgumentError(
                f"Stock row needs 2 values (offer_id, stock), got {len(row)}"
            )
        offer_id, stock = row
        return cls(offer_id, stock)

    @classmethod
    def coerce(cls, value: Any) -> "StockUpdateItem":
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(offer_id=value.get("offer_id"), stock=value.get("stock"))
        if isinstance(value, (list, tuple)):
            return cls.from_row(value)
        raise OzonMissingArgumentError(
            f"Cannot build StockUpdateItem from {type(value).__name__}"
        )

    def to_payload(self) -> Dict[str, Any]:
        return {"offer_id": self.offer_id, "stock": self.stock}


class BatchError(NamedTuple):
    """First error reported for one item of a batch import."""

    index: int
    offer_id: Any
    code: Any
    message: Any
