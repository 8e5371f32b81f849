"""A small café ordering menu."""

from __future__ import annotations

import sys
from typing import Dict, List, Optional, Tuple

WELCOME = "Welcome to CCD!"
INVALID = "INVALID OPTION!"

_MENU: Dict[str, Tuple[str, ...]] = {
    "c": ("Espresso Coffee", "Cappuccino coffee", "Latte Coffee"),
    "t": (
        "Plain Tea",
        "Assam Tea",
        "Ginger Tea",
        "Ginger Tea",
        "Cardamom Tea",
        "Masala Tea",
        "Lemon Tea",
        "Organic Darjeeling Tea",
    ),
    "s": ("Hot and Sour Soup", "Veg Corn Soup", "Tomato Soup", "Spicy Tomato Soup"),
    "b": ("Hot Chocolate Drink", "Badam Drink", "Badam-Pista Drink"),
}


class InvalidOrderError(ValueError):
    """Raised for an unknown category or an item number outside its menu."""


def order(category: str, number: int) -> str:
    """Return the name of item ``number`` (from 1) in menu ``category`` (c, t, s or b)."""
    items = _MENU.get(category.lower()) if len(category) == 1 else None
    if items is None or not 1 <= number <= len(items):
        raise InvalidOrderError(f"no item {number} in category {category!r}")
    return items[number - 1]


def _parse(text: str) -> Tuple[str, int]:
    text = text.strip()
    category, rest = text[:1], text[1:].split()
    if not category or not rest:
        raise InvalidOrderError("an order needs a category and a number")
    try:
        number = int(rest[0])
    except ValueError as exc:
        raise InvalidOrderError(f"not a number: {rest[0]!r}") from exc
    return category, number


def main(argv: Optional[List[str]] = None) -> int:
    """Read a category and an item number, from arguments or standard input, and serve it."""
    args = sys.argv[1:] if argv is None else argv
    text = " ".join(args) if args else sys.stdin.read()
    try:
        drink = order(*_parse(text))
    except InvalidOrderError:
        print(INVALID)
        return 1
    print(WELCOME)
    print(f"Enjoy your {drink}!")
    return 0


if __name__ == "__main__":
    sys.exit(main())