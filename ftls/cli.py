"""The directory lister command."""

from __future__ import annotations

import os
import sys
from typing import Iterable, List, Optional, Sequence, TextIO

from ftls.entry import Entry, error_message, load_entry, sort_entries
from ftls.listing import Widths, format_long, format_long_line, format_short
from ftls.options import Options, UsageError, parse_options


def _report(name: str, error: OSError, out: TextIO) -> None:
    message = error_message(name, error)
    if message is not None:
        out.write(message + "\n")


def _load_all(directory: str, names: Iterable[str], out: TextIO) -> List[Entry]:
    entries = []
    for name in names:
        try:
            entries.append(load_entry(directory, name))
        except OSError as err:
            _report(name, err, out)
    return entries


def _render(entries: List[Entry], options: Options) -> str:
    if not entries:
        return ""
    if options.long:
        return format_long(entries, options)
    return format_short(entries, options)


def list_directory(path: str, options: Options, out: Optional[TextIO] = None) -> None:
    """List the contents of the directory at path, recursing with -R."""
    out = sys.stdout if out is None else out
    try:
        names = [".", ".."] + os.listdir(path)
    except OSError as err:
        _report(path, err, out)
        return
    entries = sort_entries(_load_all(path, names, out), options)
    if options.reverse and not options.no_sort:
        entries.reverse()
    out.write(_render(entries, options))
    if not options.recursive:
        return
    for entry in entries:
        if not entry.is_dir() or entry.name in (".", ".."):
            continue
        if options.all or not entry.is_hidden():
            child = f"{path}/{entry.name}"
            out.write(f"\n{child}:\n")
            list_directory(child, options, out)


def list_operands(names: Sequence[str], options: Options, out: Optional[TextIO] = None) -> None:
    """List several operands: the files first, then each directory in turn."""
    out = sys.stdout if out is None else out
    entries = sort_entries(_load_all(".", names, out), options)
    for entry in entries:
        if entry.is_dir() or not (options.all or not entry.is_hidden()):
            continue
        if options.long:
            out.write(format_long_line(entry, options, Widths()))
        else:
            out.write(f"{entry.name}\n")
    out.write("\n")
    for entry in entries:
        if entry.is_dir():
            out.write(f"{entry.name}:\n")
            list_directory(entry.name, options, out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the lister on the arguments after the program name."""
    out = sys.stdout
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options, operands = parse_options(args)
    except UsageError as err:
        out.write(f"{err}\n")
        return 1
    if not operands:
        list_directory(".", options, out)
    elif len(operands) == 1:
        name = operands[0]
        try:
            entry = load_entry(".", name)
        except OSError as err:
            _report(name, err, out)
            return 0
        if entry.is_dir():
            list_directory(name, options, out)
        else:
            out.write(_render([entry], options))
    else:
        list_operands(operands, options, out)
    return 0