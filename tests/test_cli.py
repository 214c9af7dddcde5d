import textwrap


def test_render_to_stdout(tmp_path, writer, cli):
    writer(tmp_path / "src.dat", "alpha\nbeta\n")
    writer(tmp_path / "doc.md", "x {{#aa src.dat:2}} y\n")
    cp = cli(tmp_path, "render", "doc.md")
    assert cp.returncode == 0, cp.stderr
    assert cp.stdout == "x beta y\n"


def test_render_with_config_and_output(tmp_path, writer, cli):
    writer(tmp_path / "anchors.yaml", textwrap.dedent("""
        templates:
          quote: "> {{ contents }}"
    """))
    writer(tmp_path / "src.dat", "alpha\n")
    writer(tmp_path / "doc.md", "{{#aa (quote) src.dat:1}}\n")
    cp = cli(tmp_path, "render", "doc.md", "-o", "out.md")
    assert cp.returncode == 0, cp.stderr
    assert (tmp_path / "out.md").read_text(encoding="utf-8") == "> alpha\n"


def test_render_syntax_error_exit_code(tmp_path, writer, cli):
    writer(tmp_path / "doc.md", "{{#aa src.dat:1:2:3}}\n")
    cp = cli(tmp_path, "render", "doc.md")
    assert cp.returncode == 2
    assert "src.dat:1:2:3" in cp.stderr


def test_render_missing_source_exit_code(tmp_path, writer, cli):
    writer(tmp_path / "doc.md", "{{#aa ghost.dat}}\n")
    cp = cli(tmp_path, "render", "doc.md")
    assert cp.returncode == 2
    assert "ghost.dat" in cp.stderr


def test_book_exit_codes(tmp_path, writer, cli):
    writer(tmp_path / "book" / "a.md", "ok\n")
    cp = cli(tmp_path, "book", "book", "site")
    assert cp.returncode == 0, cp.stderr
    assert (tmp_path / "site" / "a.md").exists()

    writer(tmp_path / "book" / "b.md", "{{#aa nope.dat}}\n")
    cp = cli(tmp_path, "book", "book", "site")
    assert cp.returncode == 1


def test_book_missing_source_dir(tmp_path, cli):
    cp = cli(tmp_path, "book", "nowhere", "site")
    assert cp.returncode == 2


def test_check_lists_anchors(tmp_path, writer, cli, jload):
    writer(tmp_path / "doc.md", "{{#aa (<) a.rb:3:1}} {{#aa b.rs#fn?name=main}}\n")
    cp = cli(tmp_path, "check", "doc.md")
    assert cp.returncode == 0, cp.stderr
    anchors = jload(cp.stdout)["anchors"]
    assert [a["strategy"] for a in anchors] == [
        {"kind": "between", "start": 1, "end": 3},
        {"kind": "query", "name": "fn", "bindings": {"name": "main"}},
    ]
    assert anchors[0]["decoration"] == {"kind": "left_shift"}
    assert anchors[0]["path"].endswith("a.rb")


def test_version(tmp_path, cli):
    cp = cli(tmp_path, "--version")
    assert cp.returncode == 0
    assert cp.stdout.startswith("anchors ")
