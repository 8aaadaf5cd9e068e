"""Inventory store: the add/update/list facade over the Item aggregate.

Every operation returns a ``StockResult`` so callers can tell the outcomes
apart without catching exceptions. Invalid names or quantities still raise
``ValidationError``; those are input problems, not store outcomes.
"""

from dataclasses import dataclass
from enum import Enum

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from inventory.item.adjustment import UpdateItem
from inventory.item.item import Item, validate_name, validate_quantity
from inventory.item.stocking import AddItem

logger = structlog.get_logger(__name__)


class Outcome(Enum):
    ADDED = "Added"
    UPDATED = "Updated"
    NOT_FOUND = "Not_Found"
    LISTED = "Listed"
    EMPTY = "Empty"


@dataclass(frozen=True)
class StockResult:
    """Result of a store operation.

    ``items`` holds the ``(name, quantity)`` pairs the operation touched:
    the stored record for ADDED/UPDATED, every record for LISTED, and
    nothing for NOT_FOUND/EMPTY. ``name`` is the requested item, if any.
    """

    outcome: Outcome
    name: str | None = None
    items: tuple[tuple[str, int], ...] = ()


class InventoryStore:
    """Keyed collection of items, addressed by exact name.

    Must be used inside an active ``inventory`` domain context.
    """

    def add(self, name: str, quantity: int) -> StockResult:
        """Insert or fully replace the item stored under ``name``."""
        validate_name(name)
        validate_quantity(quantity)

        current_domain.process(AddItem(name=name, quantity=quantity), asynchronous=False)
        return StockResult(Outcome.ADDED, name=name, items=((name, quantity),))

    def update(self, name: str, quantity: int) -> StockResult:
        """Overwrite the quantity of an existing item, or report it as not found."""
        validate_name(name)
        validate_quantity(quantity)

        try:
            new_quantity = current_domain.process(UpdateItem(name=name, quantity=quantity), asynchronous=False)
        except ObjectNotFoundError:
            logger.info("Update skipped, item not stocked", item=name)
            return StockResult(Outcome.NOT_FOUND, name=name)
        return StockResult(Outcome.UPDATED, name=name, items=((name, new_quantity),))

    def list(self) -> StockResult:
        """Return every stocked item, or the EMPTY outcome when there are none."""
        items = current_domain.repository_for(Item).find_all()
        if not items:
            return StockResult(Outcome.EMPTY)
        return StockResult(Outcome.LISTED, items=tuple((item.name, item.quantity) for item in items))

    def get(self, name: str) -> tuple[str, int] | None:
        """Exact-name lookup; ``None`` when nothing is stocked under ``name``."""
        item = current_domain.repository_for(Item).find_by_name(name)
        if item is None:
            return None
        return item.name, item.quantity
