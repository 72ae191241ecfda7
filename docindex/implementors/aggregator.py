"""Implementors aggregator — the page-side consumer of implementor tables.

A trait page creates one aggregator, attaches it to the handoff registry
(which also collects any table a fragment parked before the page was
ready), and reads back the Implementors section.

Tables for the same trait may arrive more than once. A later table replaces
a package's earlier list; the package keeps the position where it was first
seen.
"""

import logging
from typing import Optional

from .handoff import HandoffRegistry
from .schemas import ImplementorEntry, ImplementorsSection, ImplementorTable

logger = logging.getLogger(__name__)


class ImplementorsAggregator:
    """Collects implementor tables for one trait page."""

    def __init__(self, trait_path: str, current_package: Optional[str] = None):
        self.trait_path = trait_path
        self.current_package = current_package
        self._by_package: dict[str, list[str]] = {}
        self._handoff: Optional[HandoffRegistry] = None
        self.calls = 0

    def attach(self, handoff: HandoffRegistry) -> None:
        """Install as the page hook and pick up any pending table."""
        self._handoff = handoff
        handoff.install_hook(self.register_implementors)
        pending = handoff.drain_pending()
        if pending is not None:
            logger.debug(f"Picked up pending table for {self.trait_path}")
            self.register_implementors(pending)

    def detach(self) -> None:
        """Uninstall the hook, if it is still ours."""
        if self._handoff is None:
            return
        if self._handoff.hook == self.register_implementors:
            self._handoff.remove_hook()
        self._handoff = None

    def register_implementors(self, table: ImplementorTable) -> None:
        """Record one table. Skips the current package."""
        self.calls += 1
        for package, descriptors in table.items():
            if package == self.current_package:
                continue
            self._by_package[package] = list(descriptors)
        logger.debug(
            f"Recorded table #{self.calls} for {self.trait_path} "
            f"({len(table)} packages)"
        )

    def section(self) -> ImplementorsSection:
        """Build the Implementors section collected so far."""
        return ImplementorsSection(
            trait_path=self.trait_path,
            current_package=self.current_package,
            packages=list(self._by_package.keys()),
            entries=[
                ImplementorEntry(package=package, descriptor=descriptor)
                for package, descriptors in self._by_package.items()
                for descriptor in descriptors
            ],
            tables_received=self.calls,
        )
