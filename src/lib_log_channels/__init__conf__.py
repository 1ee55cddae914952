"""Static package metadata surfaced by the CLI banner."""

from __future__ import annotations

from typing import Callable

name = "lib_log_channels"
title = "Multi-channel file and console logging with shutdown escalation"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_log_channels"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_log_channels"


def print_info(writer: Callable[[str], object] = print) -> None:
    """Write the metadata banner through ``writer``.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0].startswith("Info for lib_log_channels")
    True
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:\n\n"]
    lines.extend(f"    {label.ljust(pad)} = {value}\n" for label, value in fields)
    writer("".join(lines))


__all__ = ["author", "author_email", "homepage", "name", "print_info", "shell_command", "title", "version"]
