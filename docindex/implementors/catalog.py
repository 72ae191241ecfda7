"""Fragment catalog — loads and serves generated fragment definitions.

Same shape as the other definition-file registries:
- One file per trait in definitions/ (JSON, or YAML for hand-written ones)
- Lazy loading with _loaded guard
- In-memory dict keyed by trait_path
- Global singleton via get_fragment_catalog()

The catalog is read-only; fragments are produced by the documentation
generator, never edited here.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

import yaml

from .schemas import FragmentDefinition, FragmentSummary

logger = logging.getLogger(__name__)

DEFINITIONS_DIR_ENV = "DOCINDEX_DEFINITIONS_DIR"


def default_definitions_dir() -> Path:
    """Definitions directory, overridable via DOCINDEX_DEFINITIONS_DIR."""
    override = os.environ.get(DEFINITIONS_DIR_ENV)
    if override:
        return Path(override)
    return Path(__file__).parent / "definitions"


class FragmentCatalog:
    """Catalog of fragment definitions loaded from definition files."""

    def __init__(self, definitions_dir: Optional[Path] = None):
        if definitions_dir is None:
            definitions_dir = default_definitions_dir()
        self.definitions_dir = definitions_dir
        self._fragments: dict[str, FragmentDefinition] = {}
        self._file_map: dict[str, Path] = {}
        self._loaded = False

    def _read(self, path: Path) -> Optional[dict]:
        with open(path, "r") as f:
            if path.suffix == ".json":
                return json.load(f)
            return yaml.safe_load(f)

    def load(self) -> None:
        """Load all fragment definitions from the definitions directory."""
        if self._loaded:
            return

        if not self.definitions_dir.exists():
            logger.warning(
                f"Fragment definitions directory not found: {self.definitions_dir}"
            )
            self._loaded = True
            return

        files = sorted(
            p
            for p in self.definitions_dir.iterdir()
            if p.suffix in (".json", ".yaml", ".yml")
        )
        for path in files:
            try:
                data = self._read(path)
                if data is None:
                    continue
                fragment = FragmentDefinition.model_validate(data)
                if fragment.trait_path in self._fragments:
                    logger.warning(
                        f"Duplicate fragment for {fragment.trait_path}: "
                        f"{path} replaces {self._file_map[fragment.trait_path]}"
                    )
                self._fragments[fragment.trait_path] = fragment
                self._file_map[fragment.trait_path] = path
                logger.debug(f"Loaded fragment: {fragment.trait_path}")
            except Exception as e:
                logger.error(f"Failed to load fragment from {path}: {e}")

        self._loaded = True
        logger.info(f"Loaded {len(self._fragments)} fragment definitions")

    def get(self, trait_path: str) -> Optional[FragmentDefinition]:
        """Get a fragment definition by trait path."""
        self.load()
        return self._fragments.get(trait_path)

    def list_all(self) -> list[FragmentDefinition]:
        """List all fragment definitions."""
        self.load()
        return list(self._fragments.values())

    def list_keys(self) -> list[str]:
        """List all trait paths."""
        self.load()
        return list(self._fragments.keys())

    def list_summaries(self) -> list[FragmentSummary]:
        """List fragment summaries, sorted by trait path."""
        self.load()
        return [
            FragmentSummary(
                trait_path=f.trait_path,
                trait_name=f.trait_name,
                package_count=len(f.implementors),
                implementor_count=sum(len(d) for d in f.implementors.values()),
                packages=list(f.implementors.keys()),
            )
            for f in sorted(self._fragments.values(), key=lambda f: f.trait_path)
        ]

    def count(self) -> int:
        """Get total number of fragments."""
        self.load()
        return len(self._fragments)

    def for_package(self, package: str) -> list[FragmentDefinition]:
        """Get fragments in which a package has at least one implementor."""
        self.load()
        return [
            f for f in self._fragments.values() if f.implementors.get(package)
        ]

    def reload(self) -> None:
        """Force reload all definitions."""
        self._loaded = False
        self._fragments.clear()
        self._file_map.clear()
        self.load()


# Global catalog instance
_catalog: Optional[FragmentCatalog] = None


def get_fragment_catalog() -> FragmentCatalog:
    """Get the global fragment catalog instance."""
    global _catalog
    if _catalog is None:
        _catalog = FragmentCatalog()
        _catalog.load()
    return _catalog
