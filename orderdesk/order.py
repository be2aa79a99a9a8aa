"""An order with a recorded history of life-cycle events, for order entry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

PRICE_UNCHANGED = 0
SIZE_UNCHANGED = 0


class State(Enum):
    """Events in an order's life cycle."""

    SUBMITTED = "Submitted"
    REJECTED = "Rejected"
    ACCEPTED = "Accepted"
    MODIFY_REQUESTED = "ModifyRequested"
    MODIFY_REJECTED = "ModifyRejected"
    MODIFIED = "Modified"
    PARTIAL_FILLED = "PartialFilled"
    FILLED = "Filled"
    CANCEL_REQUESTED = "CancelRequested"
    CANCEL_REJECTED = "CancelRejected"
    CANCELLED = "Cancelled"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class StateChange:
    """One entry in an order's history."""

    state: State = State.UNKNOWN
    description: str = ""

    def __str__(self) -> str:
        return f"{{{self.state.value} {self.description}}}"


class Order:
    """An order for one symbol that keeps the history of what happened to it.

    A price of 0 means a market order; a stop price of 0 means no stop.
    """

    def __init__(
        self,
        order_id: str,
        buy_side: bool,
        quantity: int,
        symbol: str,
        price: int,
        stop_price: int = 0,
        aon: bool = False,
        ioc: bool = False,
    ) -> None:
        self.order_id = order_id
        self.is_buy = buy_side
        self.order_qty = quantity
        self.symbol = symbol
        self.price = price
        self.stop_price = stop_price
        self._aon = aon
        self._ioc = ioc
        self.quantity_filled = 0
        self.quantity_on_market = 0
        self.fill_cost = 0
        self.history: list[StateChange] = []
        self.verbose = False

    def is_limit(self) -> bool:
        """True unless this is a market order."""
        return self.price != 0

    def all_or_none(self) -> bool:
        """True if the order may trade only when it can be filled completely."""
        return self._aon

    def immediate_or_cancel(self) -> bool:
        """True if any quantity left after matching is to be cancelled."""
        return self._ioc

    def current_state(self) -> StateChange:
        """The most recent history entry.

        Raises IndexError if nothing has happened to the order yet.
        """
        if not self.history:
            raise IndexError("order has no history")
        return self.history[-1]

    def _record(self, state: State, description: str = "") -> None:
        self.history.append(StateChange(state, description))

    def on_submitted(self) -> None:
        side = "BUY" if self.is_buy else "SELL"
        price = "MKT" if self.price == 0 else str(self.price)
        self._record(State.SUBMITTED, f"{side} {self.order_qty} {self.symbol} @{price}")

    def on_accepted(self) -> None:
        self.quantity_on_market = self.order_qty
        self._record(State.ACCEPTED)

    def on_rejected(self, reason: str) -> None:
        self._record(State.REJECTED, reason)

    def on_filled(self, fill_qty: int, fill_cost: int) -> None:
        self.quantity_on_market -= fill_qty
        self.fill_cost += fill_cost
        self._record(State.FILLED, f"{fill_qty} for {fill_cost}")

    def on_cancel_requested(self) -> None:
        self._record(State.CANCEL_REQUESTED)

    def on_cancelled(self) -> None:
        self.quantity_on_market = 0
        self._record(State.CANCELLED)

    def on_cancel_rejected(self, reason: str) -> None:
        self._record(State.CANCEL_REJECTED, reason)

    @staticmethod
    def _replace_description(size_delta: int, new_price: int) -> str:
        parts = []
        if size_delta != SIZE_UNCHANGED:
            parts.append(f"Quantity change: {size_delta} ")
        if new_price != PRICE_UNCHANGED:
            parts.append(f"New Price {new_price}")
        return "".join(parts)

    def on_replace_requested(self, size_delta: int, new_price: int) -> None:
        self._record(
            State.MODIFY_REQUESTED, self._replace_description(size_delta, new_price)
        )

    def on_replaced(self, size_delta: int, new_price: int) -> None:
        if size_delta != SIZE_UNCHANGED:
            self.order_qty += size_delta
            self.quantity_on_market += size_delta
        if new_price != PRICE_UNCHANGED:
            self.price = new_price
        self._record(State.MODIFIED, self._replace_description(size_delta, new_price))

    def on_replace_rejected(self, reason: str) -> None:
        self._record(State.MODIFY_REJECTED, reason)

    def __str__(self) -> str:
        parts = [
            f"[#{self.order_id}",
            " BUY" if self.is_buy else " SELL",
            f" {self.order_qty}",
            f" {self.symbol}",
            " MKT" if self.price == 0 else f" ${self.price}",
        ]
        if self.stop_price != 0:
            parts.append(f" STOP {self.stop_price}")
        if self._aon:
            parts.append(" AON")
        if self._ioc:
            parts.append(" IOC")
        if self.quantity_on_market != 0:
            parts.append(f" Open: {self.quantity_on_market}")
        if self.quantity_filled != 0:
            parts.append(f" Filled: {self.quantity_filled}")
        if self.fill_cost != 0:
            parts.append(f" Cost: {self.fill_cost}")
        if self.verbose:
            parts.extend(f"\n\t{event}" for event in self.history)
        else:
            parts.append(f" Last Event:{self.current_state()}")
        parts.append("]")
        return "".join(parts)