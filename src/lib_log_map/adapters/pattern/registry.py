"""Lookup table from pattern token keys to converter factories.

Purpose
-------
Let the layout builder turn a token such as ``%K{user}`` into a converter
without knowing the concrete classes.

Contents
--------
* :func:`create_converter` – instantiate the converter registered for a key.
* :func:`converter_keys` – list every registered key.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from lib_log_map.domain.formatting_info import FormattingInfo

from .base import LogEventPatternConverter, Options
from .map_converter import MapPatternConverter
from .simple import LevelPatternConverter, LoggerPatternConverter, MessagePatternConverter

LOGGER = logging.getLogger(__name__)

ConverterFactory = Callable[[Options | None, FormattingInfo | None], LogEventPatternConverter]

_CONVERTERS: tuple[type[LogEventPatternConverter], ...] = (
    MapPatternConverter,
    LevelPatternConverter,
    LoggerPatternConverter,
    MessagePatternConverter,
)

_REGISTRY: dict[str, ConverterFactory] = {
    key: converter.new_instance  # type: ignore[attr-defined]
    for converter in _CONVERTERS
    for key in converter.CONVERTER_KEYS
}


def converter_keys() -> tuple[str, ...]:
    """Return the registered token keys in registration order.

    Examples
    --------
    >>> converter_keys()[:3]
    ('K', 'map', 'MAP')
    """

    return tuple(_REGISTRY)


def create_converter(
    key: str,
    options: Options | None = None,
    formatting_info: FormattingInfo | None = None,
) -> LogEventPatternConverter:
    """Instantiate the converter registered for ``key``.

    Keys are case-sensitive, so ``K`` and ``k`` may map to different
    converters.

    Raises
    ------
    ValueError
        If no converter is registered under ``key``.

    Examples
    --------
    >>> create_converter("K", ["user"]).name
    'MAP{user}'
    """

    try:
        factory = _REGISTRY[key]
    except KeyError as exc:
        raise ValueError(f"Unknown converter key: {key!r}") from exc
    converter = factory(options, formatting_info)
    LOGGER.debug("created converter %s for key %r", converter.name, key)
    return converter


__all__ = ["ConverterFactory", "converter_keys", "create_converter"]
