"""Invoice line item schemas."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from app.backend.src.services.ledger import LineItem


class LineItemCreate(BaseModel):
    """Raw product form texts; parsing happens in the ledger."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = ""
    price: str = ""
    quantity: str = ""


class LineItemRead(BaseModel):
    id: int
    name: str
    price: Decimal
    quantity: int
    total: Decimal

    @classmethod
    def from_item(cls, item: LineItem) -> "LineItemRead":
        return cls(
            id=item.id,
            name=item.name,
            price=item.price,
            quantity=item.quantity,
            total=item.total,
        )
