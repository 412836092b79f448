"""Command that builds a small sample market and reports on it."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from clobook.market import Market


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Create a sample exchange, list a few stocks and print its state."""
    parser = argparse.ArgumentParser(
        prog="clobook",
        description="Build a sample market and print its name, ticker and stock count.",
    )
    parser.parse_args(argv)

    market = Market("New York Stock Exchange", "NYSE")
    print(market.exchange_name)
    print(market.exchange_ticker)
    print(market.num_stocks())
    market.add_stock("Apple", "AAPL")
    print(market.num_stocks())
    market.add_stock("Microsoft", "MSFT")
    print(market.num_stocks())
    market.add_stock("Google", "GOOGL")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())