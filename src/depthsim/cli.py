"""Command-line preview of a hypothetical order against a synthetic book.

Example:
    depthsim --symbol BTC-USDT --side buy --type limit --price 45000 \\
        --quantity 2 --timing 5s --seed 7 --snapshots 3
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from depthsim.analytics.book import top_of_book
from depthsim.analytics.simulation import ExecutionMetrics, SimulationSession
from depthsim.core.config import LOG_LEVELS, AppConfig, FeedConfig
from depthsim.core.exceptions import DepthsimError, InvalidOrderError
from depthsim.core.models import (
    POPULAR_SYMBOLS,
    BookSnapshot,
    OrderRequest,
    OrderType,
    Side,
    TimingHint,
    Venue,
)
from depthsim.feeds.synthetic import SyntheticBookFeed

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="depthsim",
        description="Preview how a hypothetical order would execute against an order book",
    )
    parser.add_argument(
        "--venue",
        choices=[v.value for v in Venue],
        default=Venue.OKX.value,
    )
    parser.add_argument(
        "--symbol",
        default="BTC-USDT",
        help=f"Instrument, e.g. one of {', '.join(POPULAR_SYMBOLS)}",
    )
    parser.add_argument("--side", choices=[s.value for s in Side], default=Side.BUY.value)
    parser.add_argument(
        "--type",
        dest="order_type",
        choices=[t.value for t in OrderType],
        default=OrderType.MARKET.value,
    )
    parser.add_argument("--price", type=float, default=None, help="Limit price (limit orders only)")
    parser.add_argument("--quantity", type=float, required=True)
    parser.add_argument(
        "--timing",
        choices=[t.value for t in TimingHint],
        default=TimingHint.IMMEDIATE.value,
    )
    parser.add_argument("--snapshots", type=int, default=1, help="Number of snapshots to preview against")
    parser.add_argument("--depth", type=int, default=5, help="Book levels to print per side")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the synthetic feed")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Overrides DEPTHSIM_LOG_LEVEL",
    )
    return parser


def format_book(book: BookSnapshot, depth: int) -> str:
    """Render the top of both ladders as text, asks above bids."""
    bids, asks = top_of_book(book, depth)
    lines = [f"{'Price':>14} {'Size':>10} {'Total':>10}"]
    for level in reversed(asks):
        lines.append(f"{level.price:>14.2f} {level.size:>10.4f} {level.cumulative_size:>10.4f}  ask")
    lines.append(f"{'spread':>14} {book.spread:>10.2f} ({book.spread_pct:.3f}%)")
    for level in bids:
        lines.append(f"{level.price:>14.2f} {level.size:>10.4f} {level.cumulative_size:>10.4f}  bid")
    return "\n".join(lines)


def format_metrics(metrics: Optional[ExecutionMetrics]) -> str:
    if metrics is None:
        return "No preview: book has no liquidity on the consumed side"
    return "\n".join(
        [
            f"{'Fill':<22} {metrics.fill_percentage:>14.2f}%",
            f"{'Filled quantity':<22} {metrics.filled_quantity:>15.4f}",
            f"{'Average fill price':<22} {metrics.average_fill_price:>15.4f}",
            f"{'Total cost':<22} {metrics.total_cost:>15.2f}",
            f"{'Slippage':<22} {metrics.slippage_percent:>14.4f}%",
            f"{'Market impact (est.)':<22} {metrics.market_impact_estimate:>15.4f}",
            f"{'Est. fill time':<22} {metrics.estimated_fill_seconds:>14.2f}s",
        ]
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    log_level = args.log_level
    if log_level is None:
        try:
            log_level = AppConfig().log_level
        except ValidationError as e:
            print(f"Invalid configuration: {e}", file=sys.stderr)
            return 2
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    order = OrderRequest(
        side=args.side,
        order_type=args.order_type,
        quantity=args.quantity,
        limit_price=args.price,
        timing=args.timing,
        venue=args.venue,
        symbol=args.symbol,
    )

    feed = SyntheticBookFeed(
        symbol=args.symbol,
        venue=Venue(args.venue),
        config=FeedConfig(seed=args.seed),
    )
    session = SimulationSession()

    try:
        session.simulate_order(order)
    except InvalidOrderError as e:
        print(f"Invalid order: {e}", file=sys.stderr)
        return 2

    try:
        feed.connect()
        for i, book in enumerate(feed.snapshots(limit=args.snapshots)):
            metrics = session.update_book(book)
            print(f"\n=== {feed.venue.display_name} {book.symbol} snapshot {i + 1} @ {book.timestamp.isoformat()} ===")
            print(format_book(book, args.depth))
            print()
            print(format_metrics(metrics))
    except DepthsimError as e:
        logger.error(f"Simulation failed: {e}")
        return 1
    finally:
        feed.disconnect()

    return 0


if __name__ == "__main__":
    sys.exit(main())
