"""Item stocking — command and handler."""

from protean import handle
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from inventory.domain import inventory
from inventory.item.item import QUANTITY_MAX, QUANTITY_MIN, Item


@inventory.command(part_of="Item")
class AddItem:
    """Stock an item, replacing any existing record with the same name."""

    name = String(required=True, max_length=100)
    quantity = Integer(default=0, min_value=QUANTITY_MIN, max_value=QUANTITY_MAX)


@inventory.command_handler(part_of=Item)
class ItemStockingHandler:
    @handle(AddItem)
    def add_item(self, command):
        repo = current_domain.repository_for(Item)
        item = repo.find_by_name(command.name)
        if item is None:
            item = Item.stock(name=command.name, quantity=command.quantity)
        else:
            item.restock(command.quantity)
        repo.add(item)
        return item.name
