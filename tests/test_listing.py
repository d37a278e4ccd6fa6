import os
import stat
import time

import pytest

from ftls.entry import Entry, load_entry
from ftls.listing import (
    Widths,
    compute_widths,
    format_long,
    format_long_line,
    format_short,
    format_time,
    mode_string,
    total_blocks,
)
from ftls.options import Options


def make(name, mode=stat.S_IFREG | 0o644, **kw):
    defaults = dict(blocks=0, links=1, owner="alice", group="staff", atime=0, mtime=0, size=0)
    defaults.update(kw)
    return Entry(name=name, path=name, mode=mode, **defaults)


def test_mode_string_regular():
    assert mode_string(make("f", stat.S_IFREG | 0o644)) == "-rw-r--r--"


def test_mode_string_directory():
    assert mode_string(make("d", stat.S_IFDIR | 0o755)) == "drwxr-xr-x"


def test_mode_string_link_has_l():
    result = mode_string(make("l", stat.S_IFLNK | 0o777))
    assert result.startswith("l") and len(result) == 10


@pytest.fixture
def utc():
    old = os.environ.get("TZ")
    os.environ["TZ"] = "UTC"
    time.tzset()
    yield
    if old is None:
        del os.environ["TZ"]
    else:
        os.environ["TZ"] = old
    time.tzset()


def test_format_time_epoch(utc):
    assert format_time(0) == "Jan  1 00:00"


def test_format_time_length():
    assert len(format_time(1_600_000_000)) == 12


def test_total_blocks_hidden_filtered():
    entries = [make("a", blocks=8), make(".h", blocks=16), make("b", blocks=4)]
    assert total_blocks(entries, Options()) == 12
    assert total_blocks(entries, Options(all=True)) == 28


def test_compute_widths():
    entries = [
        make("a", links=10, size=12345, owner="bob", group="wheel"),
        make(".h", links=100, size=1234567, owner="alice", group="staff"),
    ]
    w = compute_widths(entries, Options())
    assert (w.links, w.size) == (2, 5)
    assert (w.owner, w.group) == (5, 5)
    w_all = compute_widths(entries, Options(all=True))
    assert (w_all.links, w_all.size) == (3, 7)


def test_format_long_line_layout():
    entry = make("file", links=1, size=42, mtime=1_600_000_000)
    line = format_long_line(entry, Options(), Widths(links=1, owner=5, size=2, group=5))
    expected = "-rw-r--r-- 1 alice staff 42 " + format_time(1_600_000_000) + " file\n"
    assert line == expected


def test_format_long_line_uses_access_time():
    entry = make("file", atime=1_000_000_000, mtime=1_600_000_000)
    line = format_long_line(entry, Options(access_time=True), Widths())
    assert format_time(1_000_000_000) in line


def test_format_long_line_without_owner():
    line = format_long_line(make("f"), Options(no_owner=True), Widths())
    assert "(null)" in line
    assert "alice" not in line


def test_format_long_line_symlink(tmp_path):
    (tmp_path / "target").write_text("x")
    os.symlink("target", tmp_path / "ln")
    entry = load_entry(str(tmp_path), "ln")
    line = format_long_line(entry, Options(), Widths())
    assert line.endswith(" ln -> target\n")


def test_format_short_filters_hidden():
    entries = [make("."), make("a"), make(".x"), make("b")]
    assert format_short(entries, Options()) == "a\nb\n"
    assert format_short(entries, Options(all=True)) == ".\na\n.x\nb\n"


def test_format_long_single_has_no_total():
    assert not format_long([make("a")], Options()).startswith("total")


def test_format_long_several_has_total():
    out = format_long([make("a", blocks=8), make("b", blocks=8)], Options())
    lines = out.splitlines()
    assert lines[0] == "total 16"
    assert len(lines) == 3