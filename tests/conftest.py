"""Shared fixtures for implementors index tests."""

import json
from pathlib import Path

import pytest

from docindex.implementors.catalog import FragmentCatalog
from docindex.implementors.handoff import HandoffRegistry, reset_handoff_registry
from docindex.implementors.schemas import FragmentDefinition

DEFAULT_TRAIT = "core::default::Default"


@pytest.fixture(autouse=True)
def _fresh_global_handoff():
    reset_handoff_registry()
    yield
    reset_handoff_registry()


@pytest.fixture()
def handoff() -> HandoffRegistry:
    return HandoffRegistry()


@pytest.fixture()
def bundled_catalog() -> FragmentCatalog:
    return FragmentCatalog(
        Path(__file__).parent.parent / "docindex" / "implementors" / "definitions"
    )


@pytest.fixture()
def default_fragment(bundled_catalog) -> FragmentDefinition:
    fragment = bundled_catalog.get(DEFAULT_TRAIT)
    assert fragment is not None
    return fragment


@pytest.fixture()
def write_fragment(tmp_path: Path):
    """Fixture that returns a helper to write a fragment definition file."""

    def _write(data, filename: str = "fragment.json") -> Path:
        f = tmp_path / filename
        if isinstance(data, str):
            f.write_text(data)
        else:
            f.write_text(json.dumps(data))
        return tmp_path

    return _write


class Recorder:
    """No-op aggregator hook that remembers what it was called with."""

    def __init__(self):
        self.calls = []

    def __call__(self, table):
        self.calls.append(table)
