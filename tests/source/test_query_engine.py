"""
Structural query tests against real grammars.
"""

import pytest

from anchors.errors import QuerySyntaxError, TemplateParseError, TemplateRenderError
from anchors.source.file import SourceFile
from anchors.source.lang import Language
from anchors.source.query import QueryRegistry, QueryTemplate
from anchors.source.range import SourceRange


@pytest.fixture
def ruby_source(sample_ruby_path, ruby_grammar):
    return SourceFile.open(sample_ruby_path.resolve())


@pytest.fixture
def queries(linker):
    return linker.queries


class TestRubyQueries:

    def test_class_with_leading_comments(self, queries, ruby_source):
        found = queries.find("class", ruby_source, {"name": "Foo"})
        assert found == SourceRange(6, 18)

    def test_class_without_comments(self, queries, ruby_source):
        assert queries.find("class", ruby_source, {"name": "Bar"}) == SourceRange(20, 28)

    def test_no_match(self, queries, ruby_source):
        assert queries.find("class", ruby_source, {"name": "Rofl"}) is None

    def test_fetch_lines(self, queries, ruby_source):
        found = queries.find("class", ruby_source, {"name": "Bar"})
        text = found.fetch_lines(ruby_source.contents)
        assert text.splitlines()[0] == "  class Bar"
        assert text.splitlines()[-1] == "  end"

    def test_unregistered_query(self, queries, ruby_source):
        assert queries.find("module", ruby_source, {}) is None

    def test_bad_query_raises(self, ruby_source):
        registry = QueryRegistry()
        registry.register(Language.RUBY, "broken", "(class name: (((")
        with pytest.raises(QuerySyntaxError):
            registry.find("broken", ruby_source, {})


def test_fenced_code_block_end_is_inclusive(fixtures_dir):
    pytest.importorskip("tree_sitter_markdown")
    source = SourceFile.open((fixtures_dir / "sample_notes.md").resolve())
    registry = QueryRegistry()
    registry.register(Language.MARKDOWN, "code", "(fenced_code_block) @block")
    assert registry.find("code", source, {}) == SourceRange(3, 5)


def test_unknown_language_finds_nothing(tmp_path, writer, queries):
    source = SourceFile.open(writer(tmp_path / "a.dat", "class Foo\nend\n"))
    assert queries.find("class", source, {"name": "Foo"}) is None


def test_reregister_replaces():
    registry = QueryRegistry()
    registry.register(Language.RUBY, "q", "(a)")
    registry.register(Language.RUBY, "q", "(b)")
    assert registry.fetch(Language.RUBY, "q").text == "(b)"
    assert registry.names(Language.RUBY) == ["q"]
    assert registry.names(Language.RUST) == []


def test_template_errors():
    with pytest.raises(TemplateParseError):
        QueryTemplate(Language.RUBY, "bad", "{{ name ")
    query = QueryTemplate(Language.RUBY, "render", "{{ missing.attr }}")
    assert query.qualified_name == "ruby.render"
    with pytest.raises(TemplateRenderError):
        query.render({})


def test_missing_binding_renders_empty():
    query = QueryTemplate(Language.RUBY, "q", '(#eq? @name "{{ name }}")')
    assert query.render({}) == '(#eq? @name "")'


def test_binding_named_self(ruby_source):
    registry = QueryRegistry()
    registry.register(Language.RUBY, "cls", '((class name: (constant) @n (#eq? @n "{{ self }}"))) @m')
    assert registry.fetch(Language.RUBY, "cls").render({"self": "Bar"}) == \
        '((class name: (constant) @n (#eq? @n "Bar"))) @m'
    assert registry.find("cls", ruby_source, {"self": "Bar"}) == SourceRange(20, 28)
