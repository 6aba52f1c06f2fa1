# plainify

`plainify` finds and fixes text problems that are easy to miss by eye:

- UTF-8 byte order marks, and UTF-16 encoded files (found by BOM or by the
  pattern of null bytes)
- CRLF and mixed line endings
- typographic characters such as curly quotes, dashes, ellipses, arrows,
  bullets, box-drawing lines and non-breaking spaces, which are replaced with
  ASCII equivalents
- zero-width characters and bidirectional control characters (Trojan Source)
- stray C0 control characters such as form feed, vertical tab and BEL
  (tab, newline and carriage return are left alone)
- emoji in `.md` files, which are rewritten as `:shortcode:`
- any other non-ASCII character, which is reported but left alone

Files whose first 8 KB contain a null byte are treated as binary and skipped,
as are files with common binary extensions such as `.png`, `.zip`, `.pdf`,
`.pyc` and `.lock`.

## Installation

```
pip install .
```

No third-party packages are needed. Finding files automatically requires
`git` on the `PATH`.

## Command line

```
plainify [options] [path ...]
```

If no file paths are given, the files are listed with
`git ls-files --cached --others --exclude-standard` in the workspace. The
first directory given as an argument becomes the workspace if `--workspace`
is not set; without either, the current directory is used. Paths in the
output are relative to the workspace and use `/` as separator.

By default fixable issues are rewritten in place. Whatever cannot be fixed
(UTF-16 encoding, other non-ASCII characters) is reported.

| Option | Meaning |
| --- | --- |
| `--nofix`, `-n` | report issues without changing files |
| `--workspace DIR` | root for git discovery and relative paths |
| `--allow-utf8-bom` | do not flag or remove a UTF-8 BOM |
| `--exclude REGEX` | skip files whose relative path matches anywhere (repeatable) |
| `-q` | no progress output on stderr |
| `--version` | print the version and exit |

Each long option may also be written with a single dash, e.g. `-nofix`.

A single line of JSON is written to stdout:

```json
{"status":"fail","findings_count":1,"findings":[{"file":"doc.txt","line":1,"col":9,"message":"non-ASCII typographic character U+201C - use ASCII equivalent"}]}
```

`line` and `col` are left out when they are zero; columns are 1-based byte
offsets into the UTF-8 line. Only the first issue of each kind is reported per
line. Progress and findings in readable form go to stderr; files that cannot
be read or written produce a warning there and are skipped. The exit status is
0 when no issues are left, 1 when there are findings, and 2 on error (file
discovery failed, invalid `--exclude` pattern, bad arguments).

Examples:

```
plainify --nofix .
plainify --exclude '^vendor/' --exclude '\.pb\.go$'
plainify -q docs/README.md
```

## Library

- `plainify.findings`: `Config(fix=False, allow_utf8_bom=False)` and
  `Finding(file, line, col, message)` with `to_dict()`.
- `plainify.scanner`: `scan_file(abs_path, rel_path, config)` returns a list of
  findings and raises `ScanError` when the file cannot be opened, read or
  written. The individual checks are available too: `detect_utf16`,
  `is_binary`, `find_crlf`, `find_replacements`, `find_invisibles`,
  `find_stray_controls`, `find_non_ascii`, `apply_char_fixes` and
  `remove_stray_controls`.
- `plainify.emoji`: `replace_emoji(text)` and
  `find_emoji_findings(rel_path, content)`.
- `plainify.emoji_table`: `emoji_entries()` returns the known sequences as
  `EmojiEntry(seq, code)`, longest first.
- `plainify.cli`: `main(argv=None)` and helpers such as `discover_files`,
  `compile_excludes`, `is_excluded` and `format_finding`.

```python
from plainify.findings import Config
from plainify.scanner import scan_file
from plainify.emoji import replace_emoji

findings = scan_file("/repo/notes.txt", "notes.txt", Config(fix=False))
for finding in findings:
    print(finding.to_dict())

print(replace_emoji("ship it \U0001F680"))  # ship it :rocket:
```