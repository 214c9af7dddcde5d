from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from importlib import metadata
from pathlib import Path
from typing import Any, Dict, List, Optional

from .book import link_book, link_document
from .config import DEFAULT_CFG_FILE, build_linker
from .doc.file import Document
from .errors import AnchorsUserError

DIST_NAME = "anchors-aweigh"


def _dist_version() -> str:
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return "0+unknown"


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose or os.environ.get("ANCHORS_DEBUG") else logging.INFO
    root = logging.getLogger("anchors")
    root.setLevel(level)
    if not root.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        root.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="anchors",
        description="Pull source file excerpts into markdown documents",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {_dist_version()}")
    p.add_argument("--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_config(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--config",
            type=Path,
            default=Path(DEFAULT_CFG_FILE),
            help=f"queries/templates file (default: ./{DEFAULT_CFG_FILE})",
        )

    sp_render = sub.add_parser("render", help="link one document and print the result")
    sp_render.add_argument("doc", type=Path, help="markdown document")
    sp_render.add_argument("-o", "--output", type=Path, help="write to file instead of stdout")
    add_config(sp_render)

    sp_book = sub.add_parser("book", help="link every markdown document under a directory")
    sp_book.add_argument("src", type=Path, help="source directory")
    sp_book.add_argument("out", type=Path, help="output directory")
    add_config(sp_book)

    sp_check = sub.add_parser("check", help="parse a document and list its anchors (JSON)")
    sp_check.add_argument("doc", type=Path, help="markdown document")

    return p


def _anchor_report(doc: Document) -> List[Dict[str, Any]]:
    return [
        {
            "path": str(anchor.link.path),
            "strategy": anchor.link.strategy.as_dict(),
            "decoration": anchor.decoration.as_dict(),
        }
        for anchor in doc.anchors()
    ]


def main(argv: Optional[list[str]] = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.verbose)

    try:
        if ns.cmd == "render":
            linker = build_linker(ns.config)
            doc_path = ns.doc.resolve()
            text = doc_path.read_text(encoding="utf-8")
            result = link_document(linker, doc_path, text)
            if ns.output:
                ns.output.write_text(result, encoding="utf-8")
            else:
                sys.stdout.write(result)
            return 0

        if ns.cmd == "book":
            linker = build_linker(ns.config)
            failed = link_book(linker, ns.src, ns.out)
            return 1 if failed else 0

        if ns.cmd == "check":
            doc = Document.from_path(ns.doc.resolve())
            sys.stdout.write(json.dumps({"anchors": _anchor_report(doc)}, ensure_ascii=False, indent=2) + "\n")
            return 0

    except AnchorsUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2
    except OSError as e:
        sys.stderr.write(f"{e}\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
