"""Environment-driven configuration for layouts and the CLI.

Purpose
-------
Collect the few knobs the CLI and embedding applications read from the
environment, and optionally hydrate that environment from a nearby ``.env``.

Contents
--------
* :data:`DOTENV_ENV_VAR` – toggle enabling ``.env`` loading.
* :func:`should_use_dotenv` / :func:`enable_dotenv` – dotenv helpers.
* :class:`LayoutSettings` – charset and colour preferences.

System Role
-----------
Consulted by :mod:`lib_log_map.cli` before any command runs. Values passed
explicitly on the command line always win over the environment, and real
environment variables always win over ``.env`` entries.
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

DOTENV_ENV_VAR = "LIB_LOG_MAP_USE_DOTENV"
CHARSET_ENV_VAR = "LOG_MAP_CHARSET"
COLOR_ENV_VAR = "LOG_MAP_COLOR"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}

_DOTENV_STATE: dict[str, Path | None] = {"path": None}


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalised = value.strip().lower()
    if normalised in _TRUTHY:
        return True
    if normalised in _FALSY:
        return False
    raise ValueError(f"Expected a boolean flag, got {value!r}")


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is enabled.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    return _parse_bool(env_value, False)


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    The search walks upwards from ``search_from`` (defaults to the working
    directory). Returns the resolved path that was loaded, or ``None`` when
    no file exists. Repeated calls reuse the first result.
    """

    if _DOTENV_STATE["path"] is not None:
        return _DOTENV_STATE["path"]
    if search_from is not None:
        candidate = _find_upwards(search_from.resolve())
    else:
        found = find_dotenv(usecwd=True)
        candidate = Path(found).resolve() if found else None
    if candidate is None:
        return None
    load_dotenv(candidate, override=False)
    _DOTENV_STATE["path"] = candidate
    return candidate


def _find_upwards(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    _DOTENV_STATE["path"] = None


@dataclass(slots=True, frozen=True)
class LayoutSettings:
    """Preferences applied when the CLI renders events.

    Attributes
    ----------
    charset:
        Codec used for byte rendering; validated with :func:`codecs.lookup`.
    color:
        Whether console output is coloured.
    """

    charset: str = "utf-8"
    color: bool = True

    def __post_init__(self) -> None:
        try:
            codec = codecs.lookup(self.charset)
        except LookupError as exc:
            raise ValueError(f"Unknown charset: {self.charset!r}") from exc
        object.__setattr__(self, "charset", codec.name)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LayoutSettings":
        """Build settings from ``environ`` (defaults to :data:`os.environ`).

        Examples
        --------
        >>> LayoutSettings.from_env({"LOG_MAP_CHARSET": "latin-1", "LOG_MAP_COLOR": "off"})
        LayoutSettings(charset='iso8859-1', color=False)
        """

        env = os.environ if environ is None else environ
        charset = env.get(CHARSET_ENV_VAR, "").strip() or "utf-8"
        return cls(charset=charset, color=_parse_bool(env.get(COLOR_ENV_VAR), True))


__all__ = [
    "CHARSET_ENV_VAR",
    "COLOR_ENV_VAR",
    "DOTENV_ENV_VAR",
    "LayoutSettings",
    "enable_dotenv",
    "should_use_dotenv",
]
