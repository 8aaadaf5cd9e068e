"""Inventory bounded context: named items and their quantities on hand.

Items are standard (not event sourced) aggregates held in the in-memory
provider, so the whole inventory lives for the duration of the process.
"""

from protean.domain import Domain

from inventory.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
inventory = Domain(name="inventory")
