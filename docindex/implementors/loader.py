"""Trait page loader — plays the host page for one trait.

The page loads a fragment and brings up its aggregator in whichever order
the scripts happen to run. Both orders end with the same section.
"""

import logging
from typing import Optional

from .aggregator import ImplementorsAggregator
from .catalog import FragmentCatalog, get_fragment_catalog
from .handoff import HandoffRegistry
from .registrar import evaluate_fragment
from .schemas import ImplementorsSection

logger = logging.getLogger(__name__)


class FragmentNotFoundError(LookupError):
    """No fragment definition exists for the requested trait."""


def load_trait_page(
    trait_path: str,
    *,
    current_package: Optional[str] = None,
    defer_aggregator: bool = False,
    catalog: Optional[FragmentCatalog] = None,
    handoff: Optional[HandoffRegistry] = None,
) -> ImplementorsSection:
    """Evaluate a trait's fragment against a fresh page aggregator.

    With defer_aggregator, the fragment runs first and its table waits in the
    pending slot until the aggregator attaches.

    The pending slot is page-wide: if the given handoff already holds a
    pending table, from this trait's fragment or any other, the aggregator
    picks it up on attach and it shows in this section. A hook already
    installed on the handoff is set aside while the page loads, so a deferred
    fragment still goes through the pending slot, and is put back afterwards.
    """
    if catalog is None:
        catalog = get_fragment_catalog()
    fragment = catalog.get(trait_path)
    if fragment is None:
        raise FragmentNotFoundError(
            f"Fragment '{trait_path}' not found. Available: {catalog.list_keys()}"
        )

    if handoff is None:
        handoff = HandoffRegistry()

    previous_hook = handoff.hook
    aggregator = ImplementorsAggregator(trait_path, current_package=current_package)
    try:
        if defer_aggregator:
            handoff.remove_hook()
            evaluate_fragment(fragment, handoff)
            aggregator.attach(handoff)
        else:
            aggregator.attach(handoff)
            evaluate_fragment(fragment, handoff)
    finally:
        aggregator.detach()
        if previous_hook is not None:
            handoff.install_hook(previous_hook)

    section = aggregator.section()
    logger.info(
        f"Loaded trait page {trait_path}: {len(section.entries)} implementors "
        f"from {len(section.packages)} packages"
    )
    return section
