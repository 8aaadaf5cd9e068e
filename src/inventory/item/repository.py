"""Repository for the Item aggregate."""

from inventory.domain import inventory
from inventory.item.item import Item

PAGE_SIZE = 100


@inventory.repository(part_of=Item)
class ItemRepository:
    """Exact-name lookup and full listings on top of the standard CRUD operations."""

    def find_by_name(self, name: str) -> Item | None:
        """Find an Item by its exact name."""
        return self._dao.query.filter(name=name).all().first

    def find_all(self) -> list[Item]:
        """Return every stocked Item, ordered by name."""
        query = self._dao.query.order_by("name").limit(PAGE_SIZE)
        items = []
        while True:
            results = query.offset(len(items)).all()
            items.extend(results.items)
            if not results.items or len(items) >= results.total:
                return items
