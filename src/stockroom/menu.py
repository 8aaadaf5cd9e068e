"""Interactive command loop over the inventory store.

The loop has a single state, awaiting a menu choice. Choices 1-3 dispatch to
the store and return to the menu; choice 4 ends the loop. Unparseable or
invalid input is reported and the menu is shown again. Console failures are
not handled here.
"""

from enum import Enum

import structlog
from protean.exceptions import ValidationError

from inventory.item.item import QUANTITY_MAX, QUANTITY_MIN
from inventory.store import InventoryStore, Outcome, StockResult
from inventory.utils.logging import add_context, clear_context
from stockroom.console import Console

logger = structlog.get_logger(__name__)

EXIT_SUCCESS = 0


class MenuChoice(Enum):
    ADD = 1
    UPDATE = 2
    LIST = 3
    EXIT = 4


MENU = (
    "1. Add an item",
    "2. Update an item",
    "3. List items",
    "4. Exit",
)

CHOICE_PROMPT = "Enter your choice: "
NAME_PROMPT = "Item name: "
QUANTITY_PROMPT = "Quantity: "

NOT_RECOGNIZED = "Choice not recognized"
BAD_QUANTITY = f"Quantity must be a whole number between {QUANTITY_MIN} and {QUANTITY_MAX}"


def parse_number(text):
    """Return ``text`` as a non-negative int if it is plain ASCII digits, else None."""
    text = text.strip()
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)


def parse_choice(text):
    """Return the MenuChoice for ``text``, or None if it names no menu entry."""
    number = parse_number(text)
    try:
        return MenuChoice(number)
    except ValueError:
        return None


def format_errors(exc: ValidationError) -> str:
    """Flatten a ValidationError's field messages into one line."""
    messages = exc.messages if isinstance(exc.messages, dict) else {"input": [str(exc.messages)]}
    return "; ".join(f"{field}: {', '.join(str(m) for m in errors)}" for field, errors in messages.items())


def render(result: StockResult) -> list[str]:
    """Turn a store outcome into console lines."""
    if result.outcome is Outcome.ADDED:
        name, quantity = result.items[0]
        return [f"Added item: {name}, quantity: {quantity}"]
    if result.outcome is Outcome.UPDATED:
        name, quantity = result.items[0]
        return [f"Updated item: {name}, quantity: {quantity}"]
    if result.outcome is Outcome.NOT_FOUND:
        return [f"No item named '{result.name}' in the inventory"]
    if result.outcome is Outcome.EMPTY:
        return ["There are no items in the inventory"]
    return [f"Item: {name}, quantity: {quantity}" for name, quantity in result.items]


class CommandLoop:
    """Reads menu choices from a console and applies them to an inventory store."""

    def __init__(self, console: Console, store: InventoryStore | None = None):
        self.console = console
        self.store = store if store is not None else InventoryStore()

    def run(self) -> int:
        """Loop until the exit choice is read, then return the exit status."""
        while True:
            self.show_menu()
            choice = parse_choice(self.console.prompt(CHOICE_PROMPT))

            if choice is None:
                self.console.write(NOT_RECOGNIZED)
                continue
            if choice is MenuChoice.EXIT:
                logger.info("Command loop finished")
                return EXIT_SUCCESS

            add_context(selector=choice.name)
            try:
                self.dispatch(choice)
            finally:
                clear_context()

    def show_menu(self) -> None:
        for line in MENU:
            self.console.write(line)

    def dispatch(self, choice: MenuChoice) -> None:
        if choice is MenuChoice.LIST:
            self.show(self.store.list())
            return

        entry = self.read_entry()
        if entry is None:
            return

        name, quantity = entry
        operation = self.store.add if choice is MenuChoice.ADD else self.store.update
        try:
            result = operation(name, quantity)
        except ValidationError as exc:
            logger.info("Rejected item input", item=name, quantity=quantity, errors=exc.messages)
            self.console.write(f"Invalid input: {format_errors(exc)}")
            return
        self.show(result)

    def read_entry(self) -> tuple[str, int] | None:
        """Prompt for an item name and quantity; None when the quantity is not a number."""
        name = self.console.prompt(NAME_PROMPT).strip()
        quantity = parse_number(self.console.prompt(QUANTITY_PROMPT))
        if quantity is None:
            self.console.write(BAD_QUANTITY)
            return None
        return name, quantity

    def show(self, result: StockResult) -> None:
        for line in render(result):
            self.console.write(line)
