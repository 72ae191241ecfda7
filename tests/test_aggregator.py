from docindex.implementors.aggregator import ImplementorsAggregator
from docindex.implementors.registrar import register_implementors

from tests.conftest import Recorder


def test_attach_installs_hook(handoff):
    aggregator = ImplementorsAggregator("a::A")
    aggregator.attach(handoff)

    register_implementors({"x": ["impl A for X"]}, handoff)

    assert aggregator.calls == 1
    assert [e.descriptor for e in aggregator.section().entries] == ["impl A for X"]


def test_attach_drains_pending(handoff):
    register_implementors({"x": ["impl A for X"]}, handoff)
    aggregator = ImplementorsAggregator("a::A")

    aggregator.attach(handoff)

    assert not handoff.has_pending
    assert aggregator.calls == 1
    assert aggregator.section().packages == ["x"]


def test_attach_with_nothing_pending(handoff):
    aggregator = ImplementorsAggregator("a::A")
    aggregator.attach(handoff)

    section = aggregator.section()
    assert section.tables_received == 0
    assert section.entries == []


def test_current_package_is_skipped(handoff):
    aggregator = ImplementorsAggregator("a::A", current_package="mine")
    aggregator.attach(handoff)

    register_implementors({"mine": ["impl A for Mine"], "other": ["impl A for O"]}, handoff)

    section = aggregator.section()
    assert section.packages == ["other"]
    assert [e.package for e in section.entries] == ["other"]


def test_empty_packages_are_listed_without_entries(handoff):
    aggregator = ImplementorsAggregator("a::A")
    aggregator.attach(handoff)

    register_implementors({"libc": [], "rand": ["impl A for R"]}, handoff)

    section = aggregator.section()
    assert section.packages == ["libc", "rand"]
    assert [e.package for e in section.entries] == ["rand"]


def test_later_table_overwrites_package_but_keeps_position(handoff):
    aggregator = ImplementorsAggregator("a::A")
    aggregator.attach(handoff)

    register_implementors({"p": ["old p"], "q": ["q1"]}, handoff)
    register_implementors({"r": ["r1"], "p": ["new p1", "new p2"]}, handoff)

    section = aggregator.section()
    assert section.packages == ["p", "q", "r"]
    assert [e.descriptor for e in section.entries] == ["new p1", "new p2", "q1", "r1"]
    assert section.tables_received == 2


def test_recording_does_not_mutate_table(handoff):
    table = {"p": ["b", "a"], "mine": ["m"]}
    aggregator = ImplementorsAggregator("a::A", current_package="mine")
    aggregator.attach(handoff)

    register_implementors(table, handoff)

    assert table == {"p": ["b", "a"], "mine": ["m"]}


def test_detach_removes_own_hook_only(handoff):
    aggregator = ImplementorsAggregator("a::A")
    aggregator.attach(handoff)
    aggregator.detach()
    assert not handoff.has_hook

    aggregator.attach(handoff)
    other = Recorder()
    handoff.install_hook(other)
    aggregator.detach()
    assert handoff.hook is other


def test_detach_without_attach_is_harmless():
    ImplementorsAggregator("a::A").detach()
