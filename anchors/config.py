"""
Configuration file: registered queries and decoration templates.

    queries:
      <language>:
        <name>: <query template>
    templates:
      <name>: <template>

Broken entries are logged and skipped; the rest of the file still loads.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigError, TemplateError
from .linker import Linker
from .source.lang import Language
from .source.query import QueryRegistry
from .linker.template import TemplateRegistry

logger = logging.getLogger(__name__)

DEFAULT_CFG_FILE = "anchors.yaml"

_yaml = YAML(typ="safe")


def load_config(path: Path) -> Dict[str, Any]:
    """
    Read the raw configuration mapping.

    • Missing file → empty mapping.
    • Unreadable file, invalid YAML or a non-mapping root → ConfigError.
    """
    if not path.exists():
        logger.debug("no config at %s", path)
        return {}

    try:
        raw = _yaml.load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, YAMLError) as e:
        raise ConfigError(f"cannot load {path}: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level, got {type(raw).__name__}")
    return raw


def _table(cfg: Mapping[str, Any], key: str) -> Dict[str, Any]:
    value = cfg.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        logger.error("[%s] is not a table", key)
        return {}
    return value


def register_queries(queries: QueryRegistry, cfg: Mapping[str, Any]) -> int:
    """Register every `queries.<language>.<name>` entry. Returns the count loaded."""
    loaded = 0
    for lang_name, table in _table(cfg, "queries").items():
        language = Language.from_name(str(lang_name))
        if language is None:
            logger.error("[queries.%s] is not supported", lang_name)
            continue
        if not isinstance(table, dict):
            logger.error("[queries.%s] is not a table", lang_name)
            continue
        for name, template in table.items():
            if not isinstance(template, str):
                logger.warning("[queries.%s.%s] is not a string", lang_name, name)
                continue
            try:
                queries.register(language, str(name), template)
            except TemplateError as e:
                logger.error("loading queries.%s.%s: %s", lang_name, name, e)
                continue
            loaded += 1
    return loaded


def register_templates(templates: TemplateRegistry, cfg: Mapping[str, Any]) -> int:
    """Register every `templates.<name>` entry. Returns the count loaded."""
    loaded = 0
    for name, template in _table(cfg, "templates").items():
        if not isinstance(template, str):
            logger.error("[templates.%s] is not a string", name)
            continue
        try:
            templates.create(str(name), template)
        except TemplateError as e:
            logger.error("[templates.%s] %s", name, e)
            continue
        loaded += 1
    return loaded


def build_linker(config_path: Optional[Path] = None) -> Linker:
    """Linker with both registries populated from the config file."""
    logger.debug("building linker")
    linker = Linker()
    if config_path is not None:
        cfg = load_config(config_path)
        n_queries = register_queries(linker.queries, cfg)
        n_templates = register_templates(linker.templates, cfg)
        logger.debug("loaded %d queries and %d templates from %s", n_queries, n_templates, config_path)
    logger.debug("linker built")
    return linker


__all__ = ["DEFAULT_CFG_FILE", "load_config", "register_queries", "register_templates", "build_linker"]
