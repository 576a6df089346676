"""
Environment-driven settings for the aegraph CLI.

  AEGRAPH_LOG_LEVEL          logging level name for stderr diagnostics (WARNING)
  AEGRAPH_ADD_SCHEMA_FIELDS  1/true/yes/on: add "kind" and "schema_version"
                             to emitted payloads (off)
  AEGRAPH_SCHEMA_VERSION     version string used for the above (1.0.0)

Read at call time, never cached, so tests can monkeypatch the environment.
Injected payload fields are optional; consumers must not require them.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

ENV_LOG_LEVEL = "AEGRAPH_LOG_LEVEL"
ENV_ADD_SCHEMA_FIELDS = "AEGRAPH_ADD_SCHEMA_FIELDS"
ENV_SCHEMA_VERSION = "AEGRAPH_SCHEMA_VERSION"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SCHEMA_VERSION = "1.0.0"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    add_schema_fields: bool = False
    schema_version: str = DEFAULT_SCHEMA_VERSION


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ

    level = env.get(ENV_LOG_LEVEL, "").strip().upper() or DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(level), int):
        level = DEFAULT_LOG_LEVEL

    return Settings(
        log_level=level,
        add_schema_fields=env.get(ENV_ADD_SCHEMA_FIELDS, "").strip().lower() in _TRUTHY,
        schema_version=env.get(ENV_SCHEMA_VERSION, "").strip() or DEFAULT_SCHEMA_VERSION,
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def with_schema_fields(payload: Dict[str, Any], *, kind: str, settings: Settings) -> Dict[str, Any]:
    """Copy of *payload* with kind/schema_version added when enabled. Never overwrites."""
    if not settings.add_schema_fields:
        return payload
    out = dict(payload)
    out.setdefault("kind", kind)
    out.setdefault("schema_version", settings.schema_version)
    return out
