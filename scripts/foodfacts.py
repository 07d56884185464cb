#!/usr/bin/env python3
"""
FoodFacts Viewer

Search the Open Food Facts catalog and inspect products.

Usage:
    foodfacts.py                    Launch interactive TUI
    foodfacts.py --search TERM      Print matching products and exit (no TUI)
    foodfacts.py --product CODE     Print one product's details and exit
    foodfacts.py ... --json         Print as JSON instead of text

Requirements:
    pip install textual requests
"""

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from foodview.config import Settings  # noqa: E402
from foodview.logging_setup import setup_logging  # noqa: E402
from foodview.off_provider import OpenFoodFactsProvider  # noqa: E402
from foodview.providers import CatalogError, CatalogProvider  # noqa: E402
from foodview.rendering import detail_lines, detail_title, product_label  # noqa: E402

logger = logging.getLogger("foodfacts")


def print_search(provider: CatalogProvider, term: str, as_json: bool = False) -> int:
    """Print one page of search results."""
    try:
        products = provider.search(term)
    except CatalogError as e:
        print(f"Search failed: {e}", file=sys.stderr)
        return 1

    if as_json:
        print(json.dumps([dataclasses.asdict(p) for p in products], indent=2))
        return 0

    if not products:
        print(f"No products found for '{term}'.")
        return 0

    print(f"Search Results for '{term}' ({len(products)}):")
    for product in products:
        code = product.code or "-"
        print(f"  {code:>14}  {product_label(product)}")
    return 0


def print_product(provider: CatalogProvider, code: str, as_json: bool = False) -> int:
    """Print a single product's details."""
    try:
        detail = provider.get_product(code)
    except CatalogError as e:
        print(f"Lookup failed: {e}", file=sys.stderr)
        return 1

    if as_json:
        print(json.dumps(dataclasses.asdict(detail), indent=2))
        return 0

    print(detail_title(detail))
    for line in detail_lines(detail):
        print(f"  {line}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="FoodFacts Viewer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--search",
        metavar="TERM",
        help="Print products matching TERM and exit (no TUI)",
    )
    mode.add_argument(
        "--product",
        metavar="CODE",
        help="Print details of the product with barcode CODE and exit",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="With --search/--product, print JSON",
    )
    parser.add_argument(
        "--log-level",
        help="Override LOG_LEVEL (DEBUG, INFO, WARNING, ...)",
    )

    args = parser.parse_args(argv)

    settings = Settings.from_env()
    if args.log_level:
        settings = dataclasses.replace(settings, log_level=args.log_level)

    if args.search is not None or args.product is not None:
        setup_logging(settings)
        provider = OpenFoodFactsProvider(settings)
        try:
            if args.search is not None:
                return print_search(provider, args.search, args.json)
            return print_product(provider, args.product, args.json)
        finally:
            provider.close()

    if args.json:
        parser.error("--json requires --search or --product")

    # Launch TUI
    setup_logging(settings, tui=True)
    try:
        from foodview.app import run
    except ImportError as e:
        print(f"TUI requires textual: {e}")
        print("Install with: pip install textual")
        return 1

    logger.debug("Launching TUI")
    run(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
