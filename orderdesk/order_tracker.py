"""Book-side bookkeeping of an order's open quantity."""

from __future__ import annotations

from typing import Any

from orderdesk.simple_order import OrderCondition


class OrderTracker:
    """Tracks open and reserved quantity of an order kept in a book.

    The tracked order needs an ``order_qty`` attribute.
    """

    def __init__(
        self,
        order: Any,
        conditions: OrderCondition | int = OrderCondition.NO_CONDITIONS,
    ) -> None:
        self.order = order
        self.conditions = OrderCondition(conditions)
        self._open_qty = order.order_qty
        self._reserved = 0

    def __repr__(self) -> str:
        return f"OrderTracker({self.order!r}, open={self.open_qty()})"

    def change_qty(self, delta: int) -> None:
        """Adjust the open quantity by ``delta``.

        Raises ValueError if a reduction exceeds the open quantity.
        """
        if delta < 0 and self._open_qty < -delta:
            raise ValueError("Replace size reduction larger than open quantity")
        self._open_qty += delta

    def fill(self, qty: int) -> None:
        """Remove ``qty`` from the open quantity.

        Raises ValueError if ``qty`` exceeds the open quantity.
        """
        if qty > self._open_qty:
            raise ValueError("Fill size larger than open quantity")
        self._open_qty -= qty

    def filled(self) -> bool:
        """True once no open quantity remains."""
        return self._open_qty == 0

    def filled_qty(self) -> int:
        """Quantity of the order that is no longer available."""
        return self.order.order_qty - self.open_qty()

    def open_qty(self) -> int:
        """Open quantity less any reservation."""
        return self._open_qty - self._reserved

    def all_or_none(self) -> bool:
        return bool(self.conditions & OrderCondition.ALL_OR_NONE)

    def immediate_or_cancel(self) -> bool:
        return bool(self.conditions & OrderCondition.IMMEDIATE_OR_CANCEL)

    def reserve(self, reserved: int) -> int:
        """Add to the reservation and return the quantity still available."""
        self._reserved += reserved
        return self._open_qty - self._reserved