"""Item quantity adjustment — command and handler."""

from protean import handle
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from inventory.domain import inventory
from inventory.item.item import QUANTITY_MAX, QUANTITY_MIN, Item


@inventory.command(part_of="Item")
class UpdateItem:
    """Overwrite the quantity of an item that is already stocked."""

    name = String(required=True, max_length=100)
    quantity = Integer(default=0, min_value=QUANTITY_MIN, max_value=QUANTITY_MAX)


@inventory.command_handler(part_of=Item)
class ItemAdjustmentHandler:
    @handle(UpdateItem)
    def update_item(self, command):
        # Raises ObjectNotFoundError when nothing is stocked under this name
        repo = current_domain.repository_for(Item)
        item = repo.get(command.name)
        item.update_quantity(command.quantity)
        repo.add(item)
        return item.quantity
