# File: beaver_core/core/bootstrap.py

"""
Process bootstrap.

Runs before the application is built:
  - reads ``.env`` (optional) and mirrors its pairs into ``os.environ``,
    leaving variables that are already set untouched
  - picks the active profile (``APP_PROFILE``, default ``local``)
  - layers ``.env.<profile>`` on top when it exists

Worker processes started by uvicorn inherit ``os.environ``, so everything
loaded here is visible to them as well.
"""

import logging
import os
from pathlib import Path
from typing import AbstractSet, Mapping, MutableMapping, Optional, Union

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

ENV_FILE_NAME = ".env"
PROFILE_KEY = "APP_PROFILE"
DEFAULT_PROFILE = "local"


def load_env_file(path: Path) -> dict[str, str]:
    """
    Read KEY=VALUE pairs from a dotenv file.

    A missing or unreadable file gives an empty dict. Values are kept
    verbatim (no ``${VAR}`` expansion) and bare keys without a value are
    dropped. When a key repeats, the last value wins.
    """
    path = Path(path)
    if not path.is_file():
        logger.debug("No env file at %s, skipping", path)
        return {}

    try:
        raw = dotenv_values(path, interpolate=False, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Ignoring unreadable env file %s: %s", path, exc)
        return {}

    values = {key: value for key, value in raw.items() if value is not None}
    logger.debug("Loaded %d entries from %s", len(values), path)
    return values


def apply_properties(
    values: Mapping[str, str],
    environ: Optional[MutableMapping[str, str]] = None,
    protected: AbstractSet[str] = frozenset(),
) -> None:
    """
    Copy every pair into the process environment.

    Keys in ``protected`` are left alone; everything else is replaced.
    """
    if environ is None:
        environ = os.environ

    for key, value in values.items():
        if key in protected:
            continue
        environ[key] = value


def resolve_active_profile(environ: Optional[Mapping[str, str]] = None) -> str:
    if environ is None:
        environ = os.environ

    profile = (environ.get(PROFILE_KEY) or "").strip()
    return profile or DEFAULT_PROFILE


def bootstrap(
    directory: Union[Path, str] = ".",
    environ: Optional[MutableMapping[str, str]] = None,
) -> str:
    """
    Load env files from ``directory`` into ``environ`` and return the
    active profile name.

    Variables already set in ``environ`` win over both files; among keys
    that only come from files, ``.env.<profile>`` wins over ``.env``.
    """
    if environ is None:
        environ = os.environ

    directory = Path(directory)
    preset = frozenset(environ)

    apply_properties(load_env_file(directory / ENV_FILE_NAME), environ, preset)

    profile = resolve_active_profile(environ)
    if "/" in profile or "\\" in profile or os.sep in profile:
        raise ValueError(f"Invalid profile name: {profile!r}")

    apply_properties(
        load_env_file(directory / f"{ENV_FILE_NAME}.{profile}"), environ, preset
    )

    # The overlay may not change the profile; pin the one already resolved.
    environ[PROFILE_KEY] = profile

    logger.info("Active profile: %s", profile)
    return profile
