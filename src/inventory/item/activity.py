"""Stock activity log. Records every item change in the structured log."""

import structlog
from protean.utils.mixins import handle

from inventory.domain import inventory
from inventory.item.events import ItemAdded, ItemQuantityUpdated
from inventory.item.item import Item

logger = structlog.get_logger(__name__)


@inventory.event_handler(part_of=Item)
class StockActivityHandler:
    """Reacts to Item events by writing one log line per stock movement."""

    @handle(ItemAdded)
    def on_item_added(self, event: ItemAdded) -> None:
        logger.info(
            "Item replaced" if event.replaced else "Item added",
            item=event.name,
            quantity=event.quantity,
        )

    @handle(ItemQuantityUpdated)
    def on_item_quantity_updated(self, event: ItemQuantityUpdated) -> None:
        logger.info(
            "Item quantity updated",
            item=event.name,
            previous_quantity=event.previous_quantity,
            new_quantity=event.new_quantity,
        )
