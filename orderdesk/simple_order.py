"""A minimal order used to drive and observe an order book."""

from __future__ import annotations

import itertools
from enum import Enum, IntFlag


class OrderState(Enum):
    """Life-cycle state of a :class:`SimpleOrder`."""

    NEW = "new"
    ACCEPTED = "accepted"
    COMPLETE = "complete"
    CANCELLED = "cancelled"
    REJECTED = "rejected"


class OrderCondition(IntFlag):
    """Bit flags describing special handling of an order."""

    NO_CONDITIONS = 0
    ALL_OR_NONE = 1
    IMMEDIATE_OR_CANCEL = 2


class SimpleOrder:
    """An order that records its own fills, cancels and replaces.

    Every order gets a process-wide increasing ``order_id``.
    A price of 0 means a market order.
    """

    _ids = itertools.count(1)

    def __init__(
        self,
        is_buy: bool,
        price: int,
        qty: int,
        stop_price: int = 0,
        conditions: OrderCondition | int = OrderCondition.NO_CONDITIONS,
    ) -> None:
        self.state = OrderState.NEW
        self.is_buy = is_buy
        self.price = price
        self.order_qty = qty
        self.stop_price = stop_price
        self.conditions = OrderCondition(conditions)
        self.filled_qty = 0
        self.filled_cost = 0
        self.order_id = next(SimpleOrder._ids)

    def __repr__(self) -> str:
        side = "BUY" if self.is_buy else "SELL"
        return (
            f"SimpleOrder(#{self.order_id} {side} {self.order_qty} @ {self.price}, "
            f"state={self.state.name})"
        )

    def all_or_none(self) -> bool:
        """True if the order may trade only when it can be filled completely."""
        return bool(self.conditions & OrderCondition.ALL_OR_NONE)

    def immediate_or_cancel(self) -> bool:
        """True if any quantity left after matching is to be cancelled."""
        return bool(self.conditions & OrderCondition.IMMEDIATE_OR_CANCEL)

    def open_qty(self) -> int:
        """Quantity not yet filled; never negative."""
        return max(self.order_qty - self.filled_qty, 0)

    def fill(self, fill_qty: int, fill_cost: int, fill_id: int) -> None:
        """Record a fill; the order becomes complete once nothing is open."""
        self.filled_qty += fill_qty
        self.filled_cost += fill_cost
        if not self.open_qty():
            self.state = OrderState.COMPLETE

    def accept(self) -> None:
        """Mark a new order as accepted by the exchange."""
        if self.state is OrderState.NEW:
            self.state = OrderState.ACCEPTED

    def cancel(self) -> None:
        """Mark the order cancelled unless it is already complete."""
        if self.state is not OrderState.COMPLETE:
            self.state = OrderState.CANCELLED

    def replace(self, size_delta: int, new_price: int) -> None:
        """Change quantity and price of an accepted order."""
        if self.state is OrderState.ACCEPTED:
            self.order_qty += size_delta
            self.price = new_price