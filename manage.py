#!/usr/bin/env python3
"""
Atelier inventory management CLI.

Usage:
    python manage.py serve         Start the API server
    python manage.py low-stock     List items that need restocking
    python manage.py verify        Replay every item's ledger and compare stock
    python manage.py summary       Print headline inventory numbers
"""

import argparse
import asyncio
import sys

from src.config import configure_logging, get_settings


async def _load_ledger():
    """Restore a ledger from the stored snapshot and release the pool."""
    from src.application.services import restore_stock_ledger
    from src.core.services import StockLedger
    from src.infrastructure.storage.sqlite import close_pool

    ledger = StockLedger.from_settings(get_settings().ledger)
    try:
        await restore_stock_ledger(ledger=ledger)
    finally:
        await close_pool()
    return ledger


def cmd_serve(args: argparse.Namespace) -> None:
    import uvicorn

    settings = get_settings()
    host = args.host or settings.api.host
    port = args.port or settings.api.port
    print(f"Starting server on {host}:{port}...")
    uvicorn.run(
        "src.api.main:app",
        host=host,
        port=port,
        reload=args.reload,
    )


def cmd_low_stock(args: argparse.Namespace) -> None:
    ledger = asyncio.run(_load_ledger())
    items = ledger.query_low_stock()
    if not items:
        print("All items are above their minimum stock.")
        return

    print(f"{len(items)} item(s) need restocking:")
    for item in items:
        print(
            f"  {item.name:<30} {item.current_stock:>10g} {item.unit:<6} "
            f"(min {item.min_stock:g}) [{item.status.value}] @ {item.location}"
        )


def cmd_verify(args: argparse.Namespace) -> None:
    ledger = asyncio.run(_load_ledger())
    broken = [item for item in ledger.list_items() if not ledger.verify_item(item.id)]
    if broken:
        print(f"{len(broken)} of {len(ledger)} item(s) do not match their movement ledger:")
        for item in broken:
            print(f"  {item.id}  {item.name}")
        sys.exit(1)
    print(f"All {len(ledger)} item(s) match their movement ledger.")


def cmd_summary(args: argparse.Namespace) -> None:
    from src.core.services import summarize

    ledger = asyncio.run(_load_ledger())
    summary = summarize(ledger.list_items())
    print(f"Items:          {summary.total_items}")
    print(f"Low stock:      {summary.low_stock_count}")
    print(f"Out of stock:   {summary.out_of_stock_count}")
    print(f"Stock value:    {summary.total_value:,.2f}")
    for category, count in summary.by_category.items():
        print(f"  {category:<20} {count}")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Atelier inventory management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # serve
    p_serve = sub.add_parser("serve", help="Start the API server")
    p_serve.add_argument("--host", default=None, help="Bind host (default: from settings)")
    p_serve.add_argument("--port", type=int, default=None, help="Bind port (default: from settings)")
    p_serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    p_serve.set_defaults(func=cmd_serve)

    # low-stock
    p_low = sub.add_parser("low-stock", help="List items at or below minimum stock")
    p_low.set_defaults(func=cmd_low_stock)

    # verify
    p_verify = sub.add_parser("verify", help="Check stock against the movement ledger")
    p_verify.set_defaults(func=cmd_verify)

    # summary
    p_summary = sub.add_parser("summary", help="Print headline inventory numbers")
    p_summary.set_defaults(func=cmd_summary)

    args = parser.parse_args()
    configure_logging()
    args.func(args)


if __name__ == "__main__":
    main()
