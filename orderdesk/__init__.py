"""Orders, order tracking and order-entry helpers for limit order books."""

__version__ = "0.1.0"