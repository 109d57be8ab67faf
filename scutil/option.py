"""Matching of single command-line arguments against a table of options."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

UNKNOWN = "?"


@dataclass(frozen=True)
class Option:
    """An option known by a one-letter short form and an optional long name."""

    letter: str
    name: str | None = None

    def __post_init__(self) -> None:
        if len(self.letter) != 1:
            raise ValueError(f"option letter must be one character: {self.letter!r}")


def parse_option(options: Iterable[Option], arg: str) -> tuple[str, str | None]:
    """Match ``arg`` against ``options``.

    Short options look like ``-k`` or ``-k=value``; long options look like
    ``--key`` or ``--key=value``. Returns ``(letter, value)``. A matched option
    without a value yields an empty string as its value. An argument that is
    not recognised yields ``("?", None)``.
    """
    if not arg.startswith("-"):
        return UNKNOWN, None

    if not arg.startswith("--"):
        body = arg[1:]
        for option in options:
            if body[:1] == option.letter and body[1:2] in ("=", " ", ""):
                value = body[1:]
                if value.startswith("="):
                    value = value[1:]
                return option.letter, value
        return UNKNOWN, None

    name, _, value = arg[2:].partition("=")
    for option in options:
        if option.name is not None and option.name == name:
            return option.letter, value
    return UNKNOWN, None