"""Handoff registry — the page-wide hook and pending slot for implementor tables.

A fragment may be evaluated before the page has installed its aggregator.
The registry is a single-slot mailbox for that case:
- install_hook() is called by the aggregator when it comes up
- try_deliver() calls the hook if one is installed
- queue_pending() parks a table when there is no hook (last write wins)
- drain_pending() hands the parked table to whoever installs the hook
"""

import logging
from typing import Optional

from .schemas import AggregatorHook, ImplementorTable

logger = logging.getLogger(__name__)


class HandoffRegistry:
    """Owns the aggregator hook and the pending slot."""

    def __init__(self):
        self._hook: Optional[AggregatorHook] = None
        self._pending: Optional[ImplementorTable] = None

    @property
    def hook(self) -> Optional[AggregatorHook]:
        return self._hook

    @property
    def has_hook(self) -> bool:
        return self._hook is not None

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def install_hook(self, hook: AggregatorHook) -> None:
        """Install the aggregator hook, replacing any previous one."""
        self._hook = hook
        logger.debug(f"Installed aggregator hook: {hook!r}")

    def remove_hook(self) -> None:
        """Remove the aggregator hook."""
        self._hook = None
        logger.debug("Removed aggregator hook")

    def try_deliver(self, table: ImplementorTable) -> bool:
        """Pass the table to the hook if one is installed.

        The hook's return value is ignored and its exceptions propagate.
        Returns False, with no side effects, when there is no hook.
        """
        hook = self._hook
        if hook is None:
            return False
        hook(table)
        logger.debug(f"Delivered implementor table ({len(table)} packages)")
        return True

    def queue_pending(self, table: ImplementorTable) -> None:
        """Park a table in the pending slot, overwriting any previous one."""
        if self._pending is not None:
            logger.debug("Overwriting pending implementor table")
        self._pending = table
        logger.debug(f"Queued implementor table ({len(table)} packages)")

    def peek_pending(self) -> Optional[ImplementorTable]:
        """Return the pending table without clearing the slot."""
        return self._pending

    def drain_pending(self) -> Optional[ImplementorTable]:
        """Return the pending table and clear the slot."""
        table = self._pending
        self._pending = None
        if table is not None:
            logger.debug(f"Drained pending implementor table ({len(table)} packages)")
        return table

    def reset(self) -> None:
        """Back to the process-start state: no hook, nothing pending."""
        self._hook = None
        self._pending = None


# Global registry instance
_registry: Optional[HandoffRegistry] = None


def get_handoff_registry() -> HandoffRegistry:
    """Get the global handoff registry instance."""
    global _registry
    if _registry is None:
        _registry = HandoffRegistry()
    return _registry


def reset_handoff_registry() -> None:
    """Drop the global handoff registry (test helper)."""
    global _registry
    _registry = None
