# ftls

`ftls` lists directory contents in the manner of the classic `ls` command.
It prints one name per line, or a long listing with permissions, link
count, owner, group, size and time. It can sort by time, reverse the order
and descend into subdirectories.

## Installation

```
pip install .
```

## Usage

```
ftls [-Rlartuf1gG] [file ...]
```

With no operands the current directory is listed. If the single operand is
a directory, its contents are listed. If it is any other kind of file, it is
listed on its own. With several operands, the files among them are listed
first, followed by an empty line. Each directory then follows under a
`name:` heading.

Every leading argument that starts with `-` is read as a group of option
letters, so `-la` is the same as `-l -a`. Options stop at the first argument
that does not start with `-`. A lone `-` or `--` is ignored. It does not end
the options.

| Option | Effect |
|--------|--------|
| `-l`   | long listing; with more than one entry it starts with a `total` block count and aligns the columns |
| `-a`   | include entries whose names start with `.` (including `.` and `..`) |
| `-R`   | list subdirectories recursively, each under a `path/name:` heading |
| `-r`   | reverse the sort order |
| `-t`   | sort by modification time, newest first, ties by name |
| `-u`   | with `-t`, sort by access time; with `-l`, show access time |
| `-f`   | do not sort (this also disables `-r`), and show all entries |
| `-g`   | with `-l`, print `(null)` in place of the owner name |
| `-G`   | accepted, no effect |
| `-1`   | accepted; output is always one entry per line |

Without `-t` or `-f`, names are sorted bytewise. The first entry read always
keeps first place, which in a directory listing is `.`.

An unknown option prints `ls: illegal option -- X` and a usage line, and the
command exits with status 1. A file that does not exist or cannot be read is
reported as `ls: NAME: No such file or directory` or
`ls: NAME: Permission denied`, and the listing carries on. Other errors are
skipped silently. All messages go to standard output.

Examples:

```
ftls
ftls -la /tmp
ftls -Rt src
ftls -lu notes.txt
```

## What it does not do

Output is always one entry per line. There is no multi-column layout, and
there is no colouring of names. The long format shows no year for old files
and no marker for extended attributes or ACLs. The time column is always
month, day and time of day.

## Library use

```python
import sys
from ftls.options import parse_options
from ftls.cli import list_directory, list_operands, main

options, operands = parse_options(["-la"])
list_directory(".", options, sys.stdout)

main(["-R", "docs"])   # returns the exit status
```

`ftls.entry` provides `load_entry`, `sort_entries` and the `Entry` class.
`ftls.listing` renders entries with `format_short`, `format_long`,
`format_long_line` and `mode_string`.

### Formatter

`ftls.printer` provides `sprintf`, `printf` and `fprintf`. They support the
conversions `c s d i u x X o p f %`, the flags `# 0 - + space`, `*` widths
and precisions, and the length modifiers `h hh l ll L`. Colour tags such as
`{red}`, `{green}`, `{yellow}`, `{blue}`, `{magnetic}`, `{cyan}`, `{white}`
and `{eoc}` become terminal escape codes. An unknown tag raises
`ftls.spec.UnknownColour`. Output stops at the first malformed
specification.

```python
from ftls.printer import sprintf

sprintf("%-5s|%05.1f|%#x", "ab", 3.14159, 255)   # 'ab   |003.1|0xff'
```

`fprintf` and `printf` return the number of characters written, not
counting colour escapes. They return 0 when a malformed specification cut
the output short.

### Helpers

- `ftls.chars`: ASCII classification and bytewise comparison.
- `ftls.numbers`: saturating integer parsing and base conversion.
- `ftls.strops`: searching, splitting, trimming and bounded copying.
- `ftls.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`.