"""
Strategy resolution against a plain-text source.
"""

from pathlib import Path

import pytest

from anchors.doc.anchor import (
    STRATEGY_TYPES, Between, DownTo, Full, HereDown, Named, Query, QueryAnchor, ThisLine,
)
from anchors.linker.resolve import RESOLVERS, resolve
from anchors.source.file import SourceFile
from anchors.source.query import QueryRegistry

TEXT = "l1\nl2\nl3\nl4\nl5\n"


@pytest.fixture
def source():
    return SourceFile(path=Path("/virtual/five.dat"), contents=TEXT)


@pytest.fixture
def queries():
    return QueryRegistry()


def test_every_strategy_has_a_resolver():
    assert set(RESOLVERS) == set(STRATEGY_TYPES)


@pytest.mark.parametrize("strategy, expected", [
    (Full(), TEXT),
    (ThisLine(2), "l2"),
    (HereDown(4), "l4\nl5"),
    (DownTo(2), "l1\nl2"),
    (Between(2, 3), "l2\nl3"),
    (Between(4, 99), "l4\nl5"),
    (HereDown(9), ""),
])
def test_line_strategies(source, queries, strategy, expected):
    assert resolve(strategy, source, queries) == expected


def test_this_line_out_of_range(source, queries):
    assert resolve(ThisLine(6), source, queries) is None
    assert resolve(ThisLine(0), source, queries) is None


def test_named_region(sample_regions_path, queries):
    source = SourceFile(path=sample_regions_path, contents=sample_regions_path.read_text(encoding="utf-8"))
    display = resolve(Named("display"), source, queries)
    assert display.splitlines() == [
        "    fn fmt(&self, f: &mut fmt::Formatter) -> fmt::Result {",
        '        write!(f, "({}, {})", self.x, self.y)',
        "    }",
    ]
    everything = resolve(Named("all"), source, queries)
    assert everything.startswith("use std::fmt;")
    assert "ANCHOR: display" in everything
    assert resolve(Named("missing"), source, queries) == ""


def test_query_without_tree_is_none(source, queries):
    assert resolve(Query(QueryAnchor("class", {"name": "Foo"})), source, queries) is None


def test_query_on_ruby(linker, sample_ruby_path, ruby_grammar):
    source = SourceFile.open(sample_ruby_path.resolve())
    text = resolve(Query(QueryAnchor("class", {"name": "Foo"})), source, linker.queries)
    lines = text.split("\n")
    assert lines[0] == "  # = Foo"
    assert lines[-1] == "  end"
    assert len(lines) == 13


def test_unknown_strategy(source, queries):
    with pytest.raises(TypeError):
        resolve(object(), source, queries)
