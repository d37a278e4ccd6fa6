"""File entries: gathering their status and ordering them for display."""

from __future__ import annotations

import errno
import os
import stat
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from ftls.options import Options

try:
    import grp
    import pwd
except ImportError:  # pragma: no cover - platforms without user databases
    grp = None
    pwd = None


@dataclass
class Entry:
    """The status of one file as shown in a listing."""

    name: str
    path: str
    mode: int
    blocks: int = 0
    links: int = 1
    owner: str = ""
    group: str = ""
    atime: int = 0
    mtime: int = 0
    size: int = 0

    def is_dir(self) -> bool:
        """True for a directory."""
        return stat.S_ISDIR(self.mode)

    def is_link(self) -> bool:
        """True for a symbolic link."""
        return stat.S_ISLNK(self.mode)

    def is_hidden(self) -> bool:
        """True when the name starts with a dot."""
        return self.name.startswith(".")


def full_name(directory: str, name: str) -> str:
    """Path of name inside directory; names in '.' are left as they are."""
    if directory == ".":
        return name
    return f"{directory}/{name}"


def _owner_name(uid: int) -> str:
    if pwd is not None:
        try:
            return pwd.getpwuid(uid).pw_name
        except KeyError:
            pass
    return str(uid)


def _group_name(gid: int) -> str:
    if grp is not None:
        try:
            return grp.getgrgid(gid).gr_name
        except KeyError:
            pass
    return str(gid)


def load_entry(directory: str, name: str) -> Entry:
    """Entry for name inside directory, without following a final symlink.

    Raises OSError when the file cannot be examined.
    """
    path = full_name(directory, name)
    st = os.lstat(path)
    return Entry(
        name=name,
        path=path,
        mode=st.st_mode,
        blocks=getattr(st, "st_blocks", 0),
        links=st.st_nlink,
        owner=_owner_name(st.st_uid),
        group=_group_name(st.st_gid),
        atime=st.st_atime_ns // 1_000_000_000,
        mtime=st.st_mtime_ns // 1_000_000_000,
        size=st.st_size,
    )


def _name_key(entry: Entry) -> bytes:
    return os.fsencode(entry.name)


def _first_position(result: List[Entry], keep_going: Callable[[Entry], bool]) -> int:
    """Index after the head at which insertion stops advancing."""
    return next(
        (i for i in range(1, len(result)) if not keep_going(result[i])),
        len(result),
    )


def _insert_by_name(result: List[Entry], new: Entry) -> None:
    if not result:
        result.append(new)
        return
    key = _name_key(new)
    result.insert(_first_position(result, lambda e: _name_key(e) < key), new)


def _insert_by_time(result: List[Entry], new: Entry, when: Callable[[Entry], int]) -> None:
    if not result:
        result.append(new)
        return
    t = when(new)
    key = _name_key(new)
    pos = _first_position(result, lambda e: when(e) > t)
    pos += next(
        (
            i
            for i, e in enumerate(result[pos:])
            if not (when(e) == t and _name_key(e) < key)
        ),
        len(result) - pos,
    )
    result.insert(pos, new)
    head = result[0]
    if pos == 1 and (t > when(head) or (t == when(head) and key < _name_key(head))):
        result[0], result[1] = result[1], result[0]


def sort_entries(entries: Iterable[Entry], options: Options) -> List[Entry]:
    """Order entries as they are inserted one by one into the listing.

    With -t the newest come first (access time with -u), ties by name; with
    -f the original order is kept; otherwise names are ordered bytewise,
    except that the first entry given always keeps the first place. Reversal
    is left to the caller.
    """
    result: List[Entry] = []
    for entry in entries:
        if options.time and not options.no_sort:
            when = (lambda e: e.atime) if options.access_time else (lambda e: e.mtime)
            _insert_by_time(result, entry, when)
        elif options.no_sort:
            result.append(entry)
        else:
            _insert_by_name(result, entry)
    return result


def error_message(name: str, error: OSError) -> Optional[str]:
    """The diagnostic shown for a file that could not be read, if any."""
    if error.errno == errno.ENOENT:
        return f"ls: {name}: No such file or directory"
    if error.errno == errno.EACCES:
        return f"ls: {name}: Permission denied"
    return None