"""Stocks listed on a market."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Stock:
    """An immutable listed stock: name, ticker and id."""

    name: str
    ticker: str
    id: int