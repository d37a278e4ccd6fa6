"""Command-line option parsing for the directory lister."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

USAGE = "usage: ls [-ABCFGHLOPRSTUWabcdefghiklmnopqrstuwx1] [file ...]"


class UsageError(Exception):
    """Raised for an option letter that is not recognised."""

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"ls: illegal option -- {option}\n{USAGE}")


@dataclass
class Options:
    """The switches that shape a listing."""

    recursive: bool = False
    long: bool = False
    all: bool = False
    reverse: bool = False
    time: bool = False
    access_time: bool = False
    one: bool = False
    no_sort: bool = False
    no_owner: bool = False
    colour: bool = False


_LETTERS: Dict[str, Tuple[str, ...]] = {
    "R": ("recursive",),
    "r": ("reverse",),
    "l": ("long",),
    "a": ("all",),
    "t": ("time",),
    "1": ("one",),
    "u": ("access_time",),
    "G": ("colour",),
    "g": ("no_owner",),
    "f": ("no_sort", "all"),
}


def parse_options(argv: Sequence[str]) -> Tuple[Options, List[str]]:
    """Split the arguments after the program name into options and operands.

    Every leading argument that starts with '-' is an option group. A lone
    '-' and '--' change nothing; arguments starting with '-' that follow '--'
    are still read as options. The first argument not starting with '-' and
    everything after it are operands.
    """
    options = Options()
    args = list(argv)
    consumed = 0
    for arg in args:
        if not arg.startswith("-"):
            break
        consumed += 1
        if arg == "--":
            continue
        for letter in arg[1:]:
            try:
                names = _LETTERS[letter]
            except KeyError:
                raise UsageError(letter) from None
            for name in names:
                setattr(options, name, True)
    return options, args[consumed:]