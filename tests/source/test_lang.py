from pathlib import Path

import pytest

from anchors.source.lang import Language


@pytest.mark.parametrize("name, language", [
    ("a.rb", Language.RUBY),
    ("src/lib.rs", Language.RUST),
    ("Cargo.toml", Language.TOML),
    ("app.js", Language.JAVASCRIPT),
    ("mix.exs", Language.ELIXIR),
    ("lib/app.ex", Language.ELIXIR),
    ("package.json", Language.JSON),
    ("README.md", Language.MARKDOWN),
    ("notes.txt", Language.MARKDOWN),
    ("tool.py", Language.PYTHON),
    ("index.ts", Language.TYPESCRIPT),
    ("view.tsx", Language.TSX),
])
def test_from_path(name, language):
    assert Language.from_path(Path(name)) is language


@pytest.mark.parametrize("name", ["Makefile", "a.c", "archive.tar.gz", "x.RB"])
def test_unknown_extension(name):
    assert Language.from_path(name) is None


def test_from_name():
    assert Language.from_name("ruby") is Language.RUBY
    assert Language.from_name(" Markdown ") is Language.MARKDOWN
    assert Language.from_name("cobol") is None
