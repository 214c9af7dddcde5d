import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from anchors.linker import Linker
from anchors.source.lang import Language

FIXTURES = Path(__file__).parent / "fixtures"
REPO_ROOT = Path(__file__).resolve().parent.parent

RUBY_CLASS_QUERY = """
(
    (comment)*
    .
    (class name: (constant) @name (#eq? @name "{{name}}"))
) @match
"""


def write(p: Path, text: str) -> Path:
    """Write text to p, creating parent directories as needed."""
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def sample_ruby_path() -> Path:
    return FIXTURES / "sample_ruby_file.rb"


@pytest.fixture
def sample_doc_path() -> Path:
    return FIXTURES / "sample_doc.md"


@pytest.fixture
def sample_regions_path() -> Path:
    return FIXTURES / "sample_regions.rs"


@pytest.fixture
def ruby_grammar():
    """Skip when the Ruby grammar package is not installed."""
    return pytest.importorskip("tree_sitter_ruby")


@pytest.fixture
def linker() -> Linker:
    """Linker with a Ruby class query and a couple of templates."""
    lk = Linker()
    lk.queries.register(Language.RUBY, "class", RUBY_CLASS_QUERY)
    lk.templates.create("codeblock", "```{{ source.language }}\n{{ contents }}\n```")
    lk.templates.create("where", "{{ source.path }}@{{ strategy.kind }}")
    return lk


@pytest.fixture
def writer():
    """write() helper as a fixture."""
    return write


def run_cli(root: Path, *args: str) -> subprocess.CompletedProcess:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(REPO_ROOT), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "anchors.cli", *args],
        cwd=root, env=env, capture_output=True, text=True, encoding="utf-8"
    )


@pytest.fixture
def cli():
    """run_cli(root, *args) helper as a fixture."""
    return run_cli


@pytest.fixture
def jload():
    return json.loads
