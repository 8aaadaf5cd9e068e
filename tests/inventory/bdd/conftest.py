"""Shared BDD fixtures and step definitions for the Inventory domain."""

from inventory.store import InventoryStore, Outcome
from pytest_bdd import given, parsers, then


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("an empty inventory", target_fixture="store")
def _():
    return InventoryStore()


@given(parsers.cfparse('"{name}" is stocked with quantity {quantity:d}'), target_fixture="store")
def _(store, name, quantity):
    store.add(name, quantity)
    return store


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the inventory lists "{name}" with quantity {quantity:d}'))
def _(store, name, quantity):
    assert (name, quantity) in store.list().items


@then(parsers.cfparse('the inventory lists only "{name}"'))
def _(store, name):
    assert [item_name for item_name, _ in store.list().items] == [name]


@then("the inventory reports that it is empty")
def _(store):
    assert store.list().outcome is Outcome.EMPTY


@then(parsers.cfparse("the outcome is {outcome}"))
def _(result, outcome):
    assert result.outcome is Outcome[outcome]
