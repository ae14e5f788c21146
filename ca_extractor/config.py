"""
Configuration loader for ca_extractor.

Loads settings (target_folder, base_url, timeout, etc.) from:
  - explicit path via --config, or
  - one of: .ca_extractor.toml, ca_extractor.toml,
            pyproject.toml ([tool.ca_extractor]).
Command-line flags take precedence over anything loaded here.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import toml

from ca_extractor.errors import ConfigError
from ca_extractor.utils.logger import get_logger
from ca_extractor.utils.settings import (
    DEFAULT_BASE_URL,
    DEFAULT_RETRIES,
    DEFAULT_TARGET_FOLDER,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
)

LOG = get_logger(__name__)

# Ordered search paths
_CONFIG_FILES = [
    ".ca_extractor.toml",
    "ca_extractor.toml",
    "pyproject.toml",
]

_TRUE_STRINGS = {"1", "true", "yes", "on"}


@dataclass
class Config:
    target_folder: str = DEFAULT_TARGET_FOLDER
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    retries: int = DEFAULT_RETRIES
    user_agent: str = DEFAULT_USER_AGENT
    strict_service_match: bool = False

    @classmethod
    def load(cls, path: Optional[str] = None) -> "Config":
        cfg_path = path or cls._find_config_file(os.getcwd())
        if not cfg_path:
            return cls()
        LOG.debug("Loading configuration from %s", cfg_path)
        try:
            raw = toml.load(cfg_path)
        except (OSError, toml.TomlDecodeError) as exc:
            raise ConfigError(cfg_path, str(exc)) from exc

        if os.path.basename(cfg_path) == "pyproject.toml":
            raw = raw.get("tool", {}).get("ca_extractor", {})
        else:
            raw = raw.get("tool", {}).get("ca_extractor", raw)
        return cls._from_dict(raw, cfg_path)

    @staticmethod
    def _find_config_file(start_dir: str) -> str:
        for fname in _CONFIG_FILES:
            candidate = os.path.join(start_dir, fname)
            if os.path.isfile(candidate):
                return candidate
        return ""

    @staticmethod
    def _as_bool(val: Any) -> bool:
        if isinstance(val, bool):
            return val
        return str(val).strip().lower() in _TRUE_STRINGS

    @classmethod
    def _from_dict(cls, raw: Dict[str, Any], source: str = "<dict>") -> "Config":
        def get(key, default=None):
            for k in raw:
                if k.lower().replace("-", "_") == key:
                    return raw[k]
            return default

        defaults = cls()
        try:
            return cls(
                target_folder=str(get("target_folder", defaults.target_folder)),
                base_url=str(get("base_url", defaults.base_url)),
                timeout=float(get("timeout", defaults.timeout)),
                retries=int(get("retries", defaults.retries)),
                user_agent=str(get("user_agent", defaults.user_agent)),
                strict_service_match=cls._as_bool(
                    get("strict_service_match", defaults.strict_service_match)
                ),
            )
        except (TypeError, ValueError) as exc:
            raise ConfigError(source, str(exc)) from exc
