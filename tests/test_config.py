"""
Tests for anchors.yaml loading.
"""

import logging
import textwrap

import pytest

from anchors.config import build_linker, load_config, register_queries, register_templates
from anchors.errors import ConfigError
from anchors.linker.template import TemplateRegistry
from anchors.source.lang import Language
from anchors.source.query import QueryRegistry


def test_missing_file_is_empty(tmp_path):
    assert load_config(tmp_path / "anchors.yaml") == {}


def test_empty_file_is_empty(tmp_path, writer):
    assert load_config(writer(tmp_path / "anchors.yaml", "")) == {}


def test_non_mapping_root(tmp_path, writer):
    with pytest.raises(ConfigError):
        load_config(writer(tmp_path / "anchors.yaml", "- a\n- b\n"))


def test_invalid_yaml(tmp_path, writer):
    with pytest.raises(ConfigError):
        load_config(writer(tmp_path / "anchors.yaml", "queries: [unclosed\n"))


def test_build_linker_registers_everything(tmp_path, writer):
    cfg = writer(tmp_path / "anchors.yaml", textwrap.dedent("""
        queries:
          ruby:
            class: |
              ((class name: (constant) @name (#eq? @name "{{ name }}"))) @match
            module: (module) @m
          rust:
            fn: (function_item) @f
        templates:
          codeblock: "```{{ source.language }}\\n{{ contents }}\\n```"
    """))
    linker = build_linker(cfg)
    assert linker.queries.names(Language.RUBY) == ["class", "module"]
    assert linker.queries.names(Language.RUST) == ["fn"]
    assert linker.templates.names() == ["codeblock"]
    assert linker.templates.render("codeblock", {"source": {"language": "rb"}, "contents": "x"}) == "```rb\nx\n```"


def test_build_linker_without_config():
    linker = build_linker()
    assert linker.templates.names() == []


def test_bad_entries_are_skipped(caplog):
    cfg = {
        "queries": {
            "cobol": {"q": "(x)"},
            "ruby": {"ok": "(class) @c", "broken": "{{ oops", "number": 3},
            "rust": "not a table",
        },
        "templates": {"good": "{{ contents }}", "bad": "{% if %}", "other": ["x"]},
    }
    queries = QueryRegistry()
    templates = TemplateRegistry()
    with caplog.at_level(logging.WARNING, logger="anchors"):
        assert register_queries(queries, cfg) == 1
        assert register_templates(templates, cfg) == 1
    assert queries.names(Language.RUBY) == ["ok"]
    assert templates.names() == ["good"]
    messages = " ".join(r.getMessage() for r in caplog.records)
    assert "cobol" in messages
    assert "templates.bad" in messages


def test_tables_must_be_mappings():
    assert register_queries(QueryRegistry(), {"queries": ["x"]}) == 0
    assert register_templates(TemplateRegistry(), {}) == 0
