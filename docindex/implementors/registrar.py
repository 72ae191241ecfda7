"""Implementor registrar — what a generated fragment does when it is loaded.

Two synchronous steps, then nothing:
1. build the ImplementorTable from the fragment's literal data
2. hand it to the aggregator hook, or park it in the pending slot

Exactly one of the two delivery side effects happens per evaluation.
"""

import logging
from typing import Optional

from .handoff import HandoffRegistry, get_handoff_registry
from .schemas import FragmentDefinition, ImplementorTable

logger = logging.getLogger(__name__)


def build_table(fragment: FragmentDefinition) -> ImplementorTable:
    """Assemble a fresh ImplementorTable from a fragment's literal data."""
    return {
        package: list(descriptors)
        for package, descriptors in fragment.implementors.items()
    }


def register_implementors(
    table: ImplementorTable, handoff: Optional[HandoffRegistry] = None
) -> bool:
    """Deliver a table to the aggregator hook, or queue it if there is none.

    Returns True if the hook was called, False if the table was queued.
    """
    if handoff is None:
        handoff = get_handoff_registry()

    if handoff.try_deliver(table):
        return True

    handoff.queue_pending(table)
    return False


def evaluate_fragment(
    fragment: FragmentDefinition, handoff: Optional[HandoffRegistry] = None
) -> ImplementorTable:
    """Build the fragment's table and deliver it. Returns the delivered table."""
    table = build_table(fragment)
    delivered = register_implementors(table, handoff)
    logger.debug(
        f"Evaluated fragment {fragment.trait_path}: "
        f"{'delivered' if delivered else 'queued'}"
    )
    return table
