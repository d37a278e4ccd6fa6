"""Rendering entries as short and long listings."""

from __future__ import annotations

import os
import stat
import time
from dataclasses import dataclass
from typing import Iterable, List

from ftls.entry import Entry
from ftls.numbers import count_digits
from ftls.options import Options
from ftls.printer import sprintf

_TYPE_CHARS = (
    (stat.S_ISREG, "-"),
    (stat.S_ISDIR, "d"),
    (stat.S_ISCHR, "c"),
    (stat.S_ISBLK, "b"),
    (stat.S_ISFIFO, "p"),
    (stat.S_ISLNK, "l"),
    (stat.S_ISSOCK, "s"),
)

_PERMISSIONS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


@dataclass
class Widths:
    """Column widths of a long listing."""

    links: int = 0
    owner: int = 0
    size: int = 0
    group: int = 0


def _shown(entry: Entry, options: Options) -> bool:
    return options.all or not entry.is_hidden()


def mode_string(entry: Entry) -> str:
    """File type letter followed by the nine permission letters."""
    kind = next((ch for test, ch in _TYPE_CHARS if test(entry.mode)), "")
    perms = "".join(ch if entry.mode & bit else "-" for bit, ch in _PERMISSIONS)
    return kind + perms


def format_time(timestamp: int) -> str:
    """Month, day and time of day of a timestamp, in local time."""
    return time.ctime(timestamp)[4:16]


def total_blocks(entries: Iterable[Entry], options: Options) -> int:
    """Sum of the blocks of the entries that are shown."""
    return sum(entry.blocks for entry in entries if _shown(entry, options))


def compute_widths(entries: Iterable[Entry], options: Options) -> Widths:
    """Column widths; link and size columns consider only shown entries."""
    widths = Widths()
    for entry in entries:
        if _shown(entry, options):
            widths.links = max(widths.links, count_digits(entry.links))
            widths.size = max(widths.size, count_digits(entry.size))
        widths.owner = max(widths.owner, len(entry.owner))
        widths.group = max(widths.group, len(entry.group))
    return widths


def _link_target(entry: Entry) -> str:
    try:
        return os.readlink(entry.path)
    except OSError:
        return ""


def format_long_line(entry: Entry, options: Options, widths: Widths) -> str:
    """One line of a long listing, newline included."""
    owner = None if options.no_owner else entry.owner
    when = entry.atime if options.access_time else entry.mtime
    parts = [
        mode_string(entry),
        sprintf("%*d", widths.links + 1, entry.links),
        sprintf(" %*s %-*s", widths.owner, owner, widths.group + 1, entry.group),
        sprintf("%*lld ", widths.size, entry.size),
        format_time(when) + " ",
        entry.name,
    ]
    if entry.is_link():
        parts.append(" -> " + _link_target(entry))
    parts.append("\n")
    return "".join(parts)


def format_short(entries: Iterable[Entry], options: Options) -> str:
    """One name per line for every shown entry."""
    return "".join(f"{entry.name}\n" for entry in entries if _shown(entry, options))


def format_long(entries: Iterable[Entry], options: Options) -> str:
    """Long listing; a total line and aligned columns when there are several entries."""
    items: List[Entry] = list(entries)
    lines = []
    widths = Widths()
    if len(items) > 1:
        lines.append(f"total {total_blocks(items, options)}\n")
        widths = compute_widths(items, options)
    lines.extend(
        format_long_line(entry, options, widths)
        for entry in items
        if _shown(entry, options)
    )
    return "".join(lines)