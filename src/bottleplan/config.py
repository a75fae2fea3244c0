from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

logger = logging.getLogger(__name__)

# =========================== Config / Defaults ================================
ENV_PREFIX = "BOTTLEPLAN_"
CONF_FILE = Path(os.environ.get("BOTTLEPLAN_CONF", "/etc/bottleplan/bottleplan.conf"))  # KEY=VALUE
STATE_DIR = Path(os.environ.get("BOTTLEPLAN_STATE_DIR", "/var/lib/bottleplan"))
DEFAULT_CATALOG = STATE_DIR / "catalog.json"

CONF_KEYS = (
    "NO_INSTALLED_DEPENDENTS_CHECK",
    "NO_INSTALL_UPGRADE",
    "ASK",
    "DEVELOPER",
    "SIZE_OUTDATED_DEPENDENCIES",
    "CONFIRM_MAX_ATTEMPTS",
    "CATALOG",
    "SHOW_PROGRESS",
)

_TRUE_SET = {"1", "true", "yes", "on"}
_FALSE_SET = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class PlannerConfig:
    """Settings that used to be read from the process environment.

    A value of this type is handed to every component that needs one, so the
    closure and sizing code never consults global state.
    """

    no_installed_dependents_check: bool = False
    no_install_upgrade: bool = False
    ask: bool = False
    developer: bool = False
    size_outdated_dependencies: bool = False
    confirm_max_attempts: Optional[int] = None
    catalog: Path = DEFAULT_CATALOG
    show_progress: bool = True


def load_conf(path: Path) -> Dict[str, str]:
    if not path.exists():
        return {}
    out: Dict[str, str] = {}
    for ln in path.read_text(encoding="utf-8").splitlines():
        ln = ln.strip()
        if not ln or ln.startswith("#"):
            continue
        if "=" in ln:
            k, v = ln.split("=", 1)
            out[k.strip().upper()] = v.strip()
    return out


def _overlay_env(conf: Mapping[str, str], env: Mapping[str, str]) -> Dict[str, str]:
    merged = dict(conf)
    for key in CONF_KEYS:
        value = env.get(ENV_PREFIX + key)
        if value is not None:
            merged[key] = value
    return merged


def _get_bool(conf: Mapping[str, str], key: str, default: bool) -> bool:
    val = conf.get(key)
    if val is None or not val.strip():
        return default
    text = val.strip().lower()
    if text in _TRUE_SET:
        return True
    if text in _FALSE_SET:
        return False
    logger.warning("Ignoring %s=%r; expected one of yes/no, true/false, on/off, 1/0", key, val)
    return default


def _get_attempts(conf: Mapping[str, str]) -> Optional[int]:
    raw = (conf.get("CONFIRM_MAX_ATTEMPTS") or "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring CONFIRM_MAX_ATTEMPTS=%r; expected a positive integer", raw)
        return None
    if value < 1:
        logger.warning("Ignoring CONFIRM_MAX_ATTEMPTS=%r; expected a positive integer", raw)
        return None
    return value


def _get_path(conf: Mapping[str, str], key: str, default: Path) -> Path:
    text = (conf.get(key) or "").strip()
    if not text:
        return default
    return Path(os.path.expanduser(text))


def config_from_mapping(conf: Mapping[str, str]) -> PlannerConfig:
    return PlannerConfig(
        no_installed_dependents_check=_get_bool(conf, "NO_INSTALLED_DEPENDENTS_CHECK", False),
        no_install_upgrade=_get_bool(conf, "NO_INSTALL_UPGRADE", False),
        ask=_get_bool(conf, "ASK", False),
        developer=_get_bool(conf, "DEVELOPER", False),
        size_outdated_dependencies=_get_bool(conf, "SIZE_OUTDATED_DEPENDENCIES", False),
        confirm_max_attempts=_get_attempts(conf),
        catalog=_get_path(conf, "CATALOG", DEFAULT_CATALOG),
        show_progress=_get_bool(conf, "SHOW_PROGRESS", True),
    )


def load_config(
    path: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> PlannerConfig:
    """Read *path* (default :data:`CONF_FILE`) and apply ``BOTTLEPLAN_*`` overrides."""

    conf = load_conf(CONF_FILE if path is None else Path(path))
    return config_from_mapping(_overlay_env(conf, os.environ if env is None else env))


__all__ = [
    "CONF_FILE",
    "CONF_KEYS",
    "DEFAULT_CATALOG",
    "ENV_PREFIX",
    "PlannerConfig",
    "STATE_DIR",
    "config_from_mapping",
    "load_conf",
    "load_config",
]
