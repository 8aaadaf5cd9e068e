"""Item aggregate (CQRS), a named record of how many units are on hand.

The item name is the aggregate identifier, so the repository can never hold
a record under a key other than its own name. Quantities are bounded to a
single unsigned byte.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Integer, String

from inventory.domain import inventory
from inventory.item.events import ItemAdded, ItemQuantityUpdated

QUANTITY_MIN = 0
QUANTITY_MAX = 255


def validate_name(name):
    """Reject names that are missing or blank."""
    if name is None or not str(name).strip():
        raise ValidationError({"name": ["Item name must not be empty"]})


def validate_quantity(quantity):
    """Reject quantities outside the unsigned byte range."""
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError({"quantity": ["Quantity must be a whole number"]})
    if not QUANTITY_MIN <= quantity <= QUANTITY_MAX:
        raise ValidationError({"quantity": [f"Quantity must be between {QUANTITY_MIN} and {QUANTITY_MAX}"]})


@inventory.aggregate
class Item:
    """A stocked item, identified by its name."""

    name = String(identifier=True, max_length=100)
    quantity = Integer(default=0, min_value=QUANTITY_MIN, max_value=QUANTITY_MAX)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def stock(cls, name, quantity):
        """Create a new item record with the given quantity on hand."""
        validate_name(name)
        validate_quantity(quantity)

        now = datetime.now(UTC)
        item = cls(
            name=name,
            quantity=quantity,
            created_at=now,
            updated_at=now,
        )
        item.raise_(
            ItemAdded(
                name=name,
                quantity=quantity,
                replaced=False,
                added_at=now,
            )
        )
        return item

    def restock(self, quantity):
        """Replace this record's contents, as if it had been added afresh."""
        validate_quantity(quantity)

        self.quantity = quantity
        self.updated_at = datetime.now(UTC)
        self.raise_(
            ItemAdded(
                name=self.name,
                quantity=quantity,
                replaced=True,
                added_at=self.updated_at,
            )
        )

    def update_quantity(self, quantity):
        """Overwrite the quantity on hand. The name never changes."""
        validate_quantity(quantity)

        previous = self.quantity
        self.quantity = quantity
        self.updated_at = datetime.now(UTC)
        self.raise_(
            ItemQuantityUpdated(
                name=self.name,
                previous_quantity=previous,
                new_quantity=quantity,
                updated_at=self.updated_at,
            )
        )
