# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regcodec/config/config_loader.py
"""
Configuration loading for regcodec.

Sources, lowest to highest priority:
  1) baked DEFAULT_CONFIG
  2) a JSON/YAML file (explicit path, or $REGCODEC_CONFIG)
  3) an `overrides` dict passed by the caller

Merge semantics: dicts deep-merge, lists and scalars are replaced.
"""
from __future__ import annotations

import copy
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from ..core.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "REGCODEC_CONFIG"

DEFAULT_CONFIG: Dict[str, Any] = {
    "codec": {
        # Replaces the NULs between REG_MULTI_SZ elements on decode.
        "multi_text_separator": "\n",
    },
    "logging": {
        "verbose": 0,
        "quiet": 0,
        "json": False,
        "log_file": None,
        "color": True,
    },
}


@dataclass(frozen=True)
class LoggingConfig:
    verbose: int = 0
    quiet: int = 0
    json: bool = False
    log_file: Optional[str] = None
    color: bool = True


@dataclass(frozen=True)
class CodecConfig:
    multi_text_separator: str = "\n"
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _deep_merge_dict(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, Mapping):
            out[k] = _deep_merge_dict(out[k], v)
        else:
            out[k] = v
    return out


def _read_structured_file(path: Path) -> Dict[str, Any]:
    """
    Read a JSON/YAML file into a dict.

    *.json is JSON, *.yml / *.yaml is YAML; anything else tries JSON first,
    then YAML.
    """
    try:
        raw = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ConfigError(msg=f"cannot read config file: {path}", cause=e, context={"path": str(path)}) from e

    sfx = path.suffix.lower()
    try:
        if sfx == ".json":
            parsed = json.loads(raw)
        elif sfx in (".yml", ".yaml"):
            parsed = yaml.safe_load(raw)
        else:
            try:
                parsed = json.loads(raw)
            except ValueError:
                parsed = yaml.safe_load(raw)
    except (ValueError, yaml.YAMLError) as e:
        raise ConfigError(msg=f"cannot parse config file: {path}", cause=e, context={"path": str(path)}) from e

    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ConfigError(msg="top-level config must be a mapping", context={"path": str(path)})
    return parsed


def _section(cfg: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    sec = cfg.get(name)
    if not isinstance(sec, Mapping):
        raise ConfigError(msg=f"config section {name!r} must be a mapping", context={"section": name})
    return sec


def _want_int(sec: Mapping[str, Any], key: str) -> int:
    v = sec.get(key)
    if isinstance(v, bool) or not isinstance(v, int) or v < 0:
        raise ConfigError(msg=f"logging.{key} must be a non-negative integer", context={key: v})
    return v


def _want_bool(sec: Mapping[str, Any], key: str) -> bool:
    v = sec.get(key)
    if not isinstance(v, bool):
        raise ConfigError(msg=f"logging.{key} must be true or false", context={key: v})
    return v


def _validate(cfg: Mapping[str, Any]) -> CodecConfig:
    codec = _section(cfg, "codec")
    sep = codec.get("multi_text_separator")
    if not isinstance(sep, str):
        raise ConfigError(msg="codec.multi_text_separator must be a string", context={"multi_text_separator": sep})

    lg = _section(cfg, "logging")
    log_file = lg.get("log_file")
    if log_file is not None and not isinstance(log_file, (str, os.PathLike)):
        raise ConfigError(msg="logging.log_file must be a path or null", context={"log_file": log_file})

    return CodecConfig(
        multi_text_separator=sep,
        logging=LoggingConfig(
            verbose=_want_int(lg, "verbose"),
            quiet=_want_int(lg, "quiet"),
            json=_want_bool(lg, "json"),
            log_file=str(log_file) if log_file is not None else None,
            color=_want_bool(lg, "color"),
        ),
    )


def load_config(
    path: Optional[Union[str, Path]] = None,
    *,
    overrides: Optional[Mapping[str, Any]] = None,
) -> CodecConfig:
    """
    Load, merge and validate the configuration.

    With no `path`, $REGCODEC_CONFIG is used if set; otherwise only the
    defaults (plus `overrides`) apply.
    """
    cfg: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)

    if path is None:
        env = os.environ.get(CONFIG_ENV_VAR, "").strip()
        path = env or None

    if path is not None:
        p = Path(path).expanduser()
        cfg = _deep_merge_dict(cfg, _read_structured_file(p))
        logger.debug("Loaded config file %s", p)

    if overrides:
        cfg = _deep_merge_dict(cfg, overrides)

    return _validate(cfg)
