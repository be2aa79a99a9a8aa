# orderdesk

Building blocks for working with orders in a limit order book. A price of
`0` means a market order throughout.

## Modules

- `orderdesk.simple_order`
  - `SimpleOrder(is_buy, price, qty, stop_price=0, conditions=OrderCondition.NO_CONDITIONS)`
    is a plain order. Each one gets an increasing `order_id`. It has the
    attributes `state`, `is_buy`, `price`, `order_qty`, `stop_price`,
    `conditions`, `filled_qty` and `filled_cost`, and the methods:
    - `all_or_none()` and `immediate_or_cancel()` read the condition flags;
    - `open_qty()` gives the unfilled quantity, never below zero;
    - `fill(fill_qty, fill_cost, fill_id)` adds to the filled quantity and
      cost, and sets the state to `COMPLETE` once nothing is open;
    - `accept()` moves a `NEW` order to `ACCEPTED`;
    - `cancel()` sets `CANCELLED` unless the order is `COMPLETE`;
    - `replace(size_delta, new_price)` changes quantity and price, but only
      while the order is `ACCEPTED`.
  - `OrderState` has the members `NEW`, `ACCEPTED`, `COMPLETE`, `CANCELLED`
    and `REJECTED`. No method sets `REJECTED`.
  - `OrderCondition` is a flag set: `NO_CONDITIONS`, `ALL_OR_NONE`,
    `IMMEDIATE_OR_CANCEL`.

- `orderdesk.order_tracker`
  - `OrderTracker(order, conditions=OrderCondition.NO_CONDITIONS)` holds the
    open and reserved quantity of an order kept in a book. The order only
    needs an `order_qty` attribute.
    - `fill(qty)` and `change_qty(delta)` raise `ValueError` when the amount
      would take the open quantity below zero;
    - `open_qty()` is the open quantity less the reservation, and
      `filled_qty()` is the order's quantity less that;
    - `reserve(reserved)` adds to the reservation and returns what is left;
    - `filled()`, `all_or_none()` and `immediate_or_cancel()`.

- `orderdesk.order`
  - `Order(order_id, buy_side, quantity, symbol, price, stop_price=0, aon=False, ioc=False)`
    is an order for order entry that keeps a `history` list of
    `StateChange` entries. The `on_submitted`, `on_accepted`, `on_rejected`,
    `on_filled`, `on_cancel_requested`, `on_cancelled`,
    `on_cancel_rejected`, `on_replace_requested`, `on_replaced` and
    `on_replace_rejected` methods each add an entry; `on_accepted`,
    `on_filled`, `on_cancelled` and `on_replaced` also update
    `quantity_on_market`, `fill_cost`, `order_qty` or `price`.
    `current_state()` returns the last entry and raises `IndexError` when
    there is none. `str(order)` gives a one-line summary ending with the
    last event, or the whole history when `order.verbose` is true.
  - `State` lists the events; `StateChange(state, description)` prints as
    `{Accepted }`, `{Filled 100 for 125000}` and so on.

- `orderdesk.util`
  - `split(text, delimiters)` splits on any delimiter character;
  - `to_uint32(text)` and `to_int32(text)` parse decimal text, allow leading
    whitespace, return `0` for an empty string, and raise `ValueError` for
    text that is ill-formed or out of the 32-bit range;
  - `string_to_price(text)` returns `0` for `"MARKET"` or `"MKT"`, else
    parses with `to_uint32`;
  - `ltrimmed`, `rtrimmed`, `trimmed` strip whitespace;
  - `prompt_for_string`, `prompt_for_price`, `prompt_for_uint32`,
    `prompt_for_int32` and `prompt_for_yes_no` write a prompt to standard
    output and read a line from standard input. `prompt_for_yes_no` asks
    again until it gets Y/YES/T/TRUE or N/NO/F/FALSE, and raises `EOFError`
    if input ends first.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from orderdesk.simple_order import SimpleOrder, OrderState
from orderdesk.order_tracker import OrderTracker

bid = SimpleOrder(True, 1250, 100)
bid.accept()
tracker = OrderTracker(bid)
tracker.fill(40)
bid.fill(40, 40 * 1250, 1)

assert tracker.open_qty() == 60
assert bid.open_qty() == 60
assert bid.state is OrderState.ACCEPTED
```

```python
from orderdesk.order import Order

order = Order("1", True, 100, "IBM", 1250)
order.on_submitted()
order.on_accepted()
order.on_filled(100, 125000)
print(order)
# [#1 BUY 100 IBM $1250 Cost: 125000 Last Event:{Filled 100 for 125000}]
```

## What it does not do

The package has no order book and no matching: nothing here keeps bids and
asks, crosses orders, produces fills or tracks market depth. The order
classes only record what they are told. There is also no command-line
program; the prompt helpers in `orderdesk.util` are functions to build one
with.