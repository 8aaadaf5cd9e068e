"""Domain events for the Item aggregate."""

from protean.fields import Boolean, DateTime, Integer, String

from inventory.domain import inventory


@inventory.event(part_of="Item")
class ItemAdded:
    """An item was stocked, either as a new record or replacing an existing one."""

    __version__ = 1

    name = String(required=True, max_length=100)
    quantity = Integer(default=0)
    replaced = Boolean(default=False)
    added_at = DateTime(required=True)


@inventory.event(part_of="Item")
class ItemQuantityUpdated:
    """The quantity on hand of an existing item was overwritten."""

    __version__ = 1

    name = String(required=True, max_length=100)
    previous_quantity = Integer(default=0)
    new_quantity = Integer(default=0)
    updated_at = DateTime(required=True)
