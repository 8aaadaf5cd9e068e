"""Application tests for the AddItem command."""

import pytest
from inventory.item.item import Item
from inventory.item.stocking import AddItem
from protean import current_domain
from protean.exceptions import ValidationError


def _add_item(**overrides):
    defaults = {"name": "Apple", "quantity": 5}
    defaults.update(overrides)
    return current_domain.process(AddItem(**defaults), asynchronous=False)


class TestAddItemCommand:
    def test_add_via_command(self):
        name = _add_item()
        item = current_domain.repository_for(Item).get(name)
        assert item.name == "Apple"
        assert item.quantity == 5

    def test_handler_returns_item_name(self):
        assert _add_item(name="Pear") == "Pear"

    def test_add_existing_name_overwrites_record(self):
        _add_item(quantity=5)
        _add_item(quantity=9)
        item = current_domain.repository_for(Item).get("Apple")
        assert item.quantity == 9
        assert len(current_domain.repository_for(Item).find_all()) == 1

    def test_add_twice_with_same_values_is_idempotent(self):
        _add_item(quantity=5)
        _add_item(quantity=5)
        items = current_domain.repository_for(Item).find_all()
        assert [(i.name, i.quantity) for i in items] == [("Apple", 5)]

    def test_add_leaves_other_items_alone(self):
        _add_item(name="Apple", quantity=5)
        _add_item(name="Banana", quantity=3)
        _add_item(name="Apple", quantity=7)
        assert current_domain.repository_for(Item).get("Banana").quantity == 3

    def test_command_rejects_quantity_above_range(self):
        with pytest.raises(ValidationError) as exc_info:
            AddItem(name="Apple", quantity=256)
        assert "quantity" in exc_info.value.messages

    def test_command_requires_name(self):
        with pytest.raises(ValidationError) as exc_info:
            AddItem(quantity=1)
        assert "name" in exc_info.value.messages


class TestItemRepository:
    def test_find_by_name_returns_none_when_missing(self):
        assert current_domain.repository_for(Item).find_by_name("Ghost") is None

    def test_find_by_name_is_exact(self):
        _add_item(name="Apple")
        repo = current_domain.repository_for(Item)
        assert repo.find_by_name("Apple").quantity == 5
        assert repo.find_by_name("apple") is None
        assert repo.find_by_name("App") is None

    def test_find_all_returns_every_item(self):
        for index in range(120):
            _add_item(name=f"item-{index:03d}", quantity=index)
        items = current_domain.repository_for(Item).find_all()
        assert len(items) == 120
        assert {i.name for i in items} == {f"item-{index:03d}" for index in range(120)}
