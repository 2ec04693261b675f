"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

import sys
from typing import Callable

name = "lib_log_map"
title = "Map pattern converter for structured log layouts"
version = "0.1.0"
author = "bitranox"
shell_command = "lib_log_map"


def print_info(writer: Callable[[str], object] | None = None) -> None:
    """Write the metadata banner through ``writer`` one line at a time.

    Examples
    --------
    >>> print_info()  # doctest: +ELLIPSIS
    Info for lib_log_map:
    ...
    """

    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    )
    if writer is None:
        writer = sys.stdout.write
    pad = max(len(label) for label, _ in fields)
    writer(f"Info for {name}:\n\n")
    for label, value in fields:
        writer(f"    {label:<{pad}} = {value}\n")
