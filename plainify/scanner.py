"""Detection and repair of encoding problems, line endings and odd characters."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator

from plainify.emoji import find_emoji_findings, replace_emoji
from plainify.findings import Config, Finding

_HEADER_SIZE = 8192
_UTF8_BOM = b"\xef\xbb\xbf"
_REPLACEMENT_CHAR = "\ufffd"

# Files with these extensions are always treated as binary and skipped.
_SKIP_EXTS = frozenset(
    {
        ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".ico", ".webp",
        ".woff", ".woff2", ".ttf", ".otf", ".eot",
        ".zip", ".tar", ".gz", ".bz2", ".xz", ".7z",
        ".pdf",
        ".exe", ".dll", ".so", ".dylib",
        ".o", ".a", ".pyc", ".pyo",
        ".class", ".jar", ".war",
        ".lock",
    }
)

# Common typographic characters and their ASCII equivalents.
_REPLACEMENTS: dict[str, str] = {
    "\u2014": "--",  # em-dash
    "\u2013": "--",  # en-dash
    "\u2192": "-->",  # rightwards arrow
    "\u2190": "<--",  # leftwards arrow
    "\u21D2": "=>",  # rightwards double arrow
    "\u2018": "'",  # left single quotation mark
    "\u2019": "'",  # right single quotation mark
    "\u201C": '"',  # left double quotation mark
    "\u201D": '"',  # right double quotation mark
    "\u00A0": " ",  # non-breaking space
    "\u2026": "...",  # horizontal ellipsis
    "\u2022": "-",  # bullet
    "\u2514": "+",  # box drawings light up and right
    "\u251C": "+",  # box drawings light vertical and right
    "\u2500": "-",  # box drawings light horizontal
    "\u2502": "|",  # box drawings light vertical
}

# Zero-width and bidirectional control characters; deleted in fix mode.
_INVISIBLES: dict[str, str] = {
    "\u00AD": "soft hyphen",
    "\u200B": "zero-width space",
    "\u200C": "zero-width non-joiner",
    "\u200D": "zero-width joiner",
    "\u200E": "left-to-right mark",
    "\u200F": "right-to-left mark",
    "\u202A": "left-to-right embedding",
    "\u202B": "right-to-left embedding",
    "\u202C": "pop directional formatting",
    "\u202D": "left-to-right override",
    "\u202E": "right-to-left override",
    "\u2066": "left-to-right isolate",
    "\u2067": "right-to-left isolate",
    "\u2068": "first strong isolate",
    "\u2069": "pop directional isolate",
    "\u061C": "arabic letter mark",
}

_STRAY_CONTROL_NAMES: dict[str, str] = {
    "\x01": "SOH", "\x02": "STX", "\x03": "ETX", "\x04": "EOT",
    "\x05": "ENQ", "\x06": "ACK", "\x07": "BEL", "\x08": "BS",
    "\x0b": "VT", "\x0c": "FF", "\x0e": "SO", "\x0f": "SI",
    "\x10": "DLE", "\x11": "DC1", "\x12": "DC2", "\x13": "DC3",
    "\x14": "DC4", "\x15": "NAK", "\x16": "SYN", "\x17": "ETB",
    "\x18": "CAN", "\x19": "EM", "\x1a": "SUB", "\x1b": "ESC",
    "\x1c": "FS", "\x1d": "GS", "\x1e": "RS", "\x1f": "US",
}

# Undecodable bytes are carried as surrogate escapes; they count as U+FFFD.
_ESCAPED_BYTES = range(0xDC80, 0xDD00)
_INVALID_TO_REPLACEMENT = {cp: _REPLACEMENT_CHAR for cp in _ESCAPED_BYTES}

_CHAR_FIX_TABLE: dict[int, str | None] = {
    **{ord(ch): repl for ch, repl in _REPLACEMENTS.items()},
    **{ord(ch): None for ch in _INVISIBLES},
    **_INVALID_TO_REPLACEMENT,
}

_STRAY_TABLE: dict[int, str | None] = {
    **{cp: None for cp in range(0x20) if chr(cp) not in "\t\n\r"},
    **_INVALID_TO_REPLACEMENT,
}


class ScanError(Exception):
    """Raised when a file cannot be opened, read or written."""


def is_bidi_control(ch: str) -> bool:
    """Return True if ``ch`` is a Unicode bidirectional control character."""
    cp = ord(ch)
    return cp in (0x200E, 0x200F, 0x061C) or 0x202A <= cp <= 0x202E or 0x2066 <= cp <= 0x2069


def is_stray_control(ch: str) -> bool:
    """Return True if ``ch`` is a C0 control other than tab, newline or carriage return."""
    if ch in "\t\n\r":
        return False
    return 0x00 <= ord(ch) <= 0x1F


def _extension(path: str) -> str:
    name = os.path.basename(path)
    dot = name.rfind(".")
    return name[dot:].lower() if dot >= 0 else ""


def _utf8_width(cp: int) -> int:
    if cp < 0x80:
        return 1
    if cp < 0x800:
        return 2
    if cp < 0x10000:
        return 3
    return 4


def _chars_with_byte_offsets(line: str) -> Iterator[tuple[int, str]]:
    """Yield (UTF-8 byte offset, character); undecodable bytes appear as U+FFFD."""
    offset = 0
    for ch in line:
        cp = ord(ch)
        if cp in _ESCAPED_BYTES:
            yield offset, _REPLACEMENT_CHAR
            offset += 1
        else:
            yield offset, ch
            offset += _utf8_width(cp)


def _first_per_line(
    rel_path: str, content: str, describe: Callable[[str], str | None]
) -> list[Finding]:
    """Report the first character on each line for which ``describe`` gives a message."""
    findings: list[Finding] = []
    for line_no, line in enumerate(content.split("\n"), start=1):
        for offset, ch in _chars_with_byte_offsets(line):
            message = describe(ch)
            if message is not None:
                findings.append(Finding(file=rel_path, line=line_no, col=offset + 1, message=message))
                break
    return findings


def detect_utf16(buf: bytes, rel_path: str) -> Finding | None:
    """Identify UTF-16 content by its BOM or by the pattern of null bytes."""
    if len(buf) < 2:
        return None
    if buf[:2] == b"\xff\xfe":
        return Finding(rel_path, 1, 1, "UTF-16 LE (BOM FF FE) - convert to UTF-8")
    if buf[:2] == b"\xfe\xff":
        return Finding(rel_path, 1, 1, "UTF-16 BE (BOM FE FF) - convert to UTF-8")
    if len(buf) >= 4:
        sample = buf[:64]
        null_even = sample[0::2].count(0)
        null_odd = sample[1::2].count(0)
        threshold = len(sample) // 4
        if null_odd >= threshold and null_even == 0:
            return Finding(
                rel_path, 1, 1, "UTF-16 LE (no BOM, null-byte heuristic) - convert to UTF-8"
            )
        if null_even >= threshold and null_odd == 0:
            return Finding(
                rel_path, 1, 1, "UTF-16 BE (no BOM, null-byte heuristic) - convert to UTF-8"
            )
    return None


def is_binary(buf: bytes) -> bool:
    """Return True if the first 8 KB of ``buf`` contain a null byte."""
    return 0 in buf[:_HEADER_SIZE]


def find_crlf(rel_path: str, content: str) -> list[Finding]:
    """Report CRLF or mixed line endings once per file."""
    if "\r\n" not in content:
        return []
    if "\n" in content.replace("\r\n", ""):
        return [Finding(rel_path, 1, 0, "mixed line endings (CRLF and LF) - convert to LF")]
    return [Finding(rel_path, 1, 0, "CRLF line endings - convert to LF")]


def apply_char_fixes(content: str) -> str:
    """Replace typographic characters with ASCII and delete invisible characters."""
    return content.translate(_CHAR_FIX_TABLE)


def remove_stray_controls(content: str) -> str:
    """Delete C0 control characters except tab, newline and carriage return."""
    return content.translate(_STRAY_TABLE)


def find_replacements(rel_path: str, content: str) -> list[Finding]:
    """Report the first typographic character on each line."""

    def describe(ch: str) -> str | None:
        if ch in _REPLACEMENTS:
            return f"non-ASCII typographic character U+{ord(ch):04X} - use ASCII equivalent"
        return None

    return _first_per_line(rel_path, content, describe)


def find_invisibles(rel_path: str, content: str) -> list[Finding]:
    """Report the first zero-width or bidirectional control character on each line."""

    def describe(ch: str) -> str | None:
        name = _INVISIBLES.get(ch)
        if name is None:
            return None
        if is_bidi_control(ch):
            return (
                f"bidirectional control character U+{ord(ch):04X} ({name}) "
                "- remove (Trojan Source risk)"
            )
        return f"zero-width character U+{ord(ch):04X} ({name}) - remove"

    return _first_per_line(rel_path, content, describe)


def find_stray_controls(rel_path: str, content: str) -> list[Finding]:
    """Report the first stray control character on each line."""

    def describe(ch: str) -> str | None:
        if not is_stray_control(ch):
            return None
        name = _STRAY_CONTROL_NAMES.get(ch, "")
        return f"stray control character 0x{ord(ch):02X} ({name}) - remove"

    return _first_per_line(rel_path, content, describe)


def find_non_ascii(rel_path: str, content: str) -> list[Finding]:
    """Report the first non-ASCII character on each line not covered by a more specific check."""

    def describe(ch: str) -> str | None:
        if ord(ch) <= 0x7F or ch in _REPLACEMENTS or ch in _INVISIBLES:
            return None
        return f"non-ASCII character U+{ord(ch):04X}"

    return _first_per_line(rel_path, content, describe)


def _scan_text(
    abs_path: str, rel_path: str, ext: str, content: str, has_bom: bool, config: Config
) -> list[Finding]:
    if config.fix:
        fixed = content
        if has_bom and not config.allow_utf8_bom:
            fixed = fixed.removeprefix("\ufeff")
        fixed = fixed.replace("\r\n", "\n")
        fixed = apply_char_fixes(fixed)
        fixed = remove_stray_controls(fixed)
        if ext == ".md":
            fixed = replace_emoji(fixed)
        if fixed != content:
            try:
                with open(abs_path, "wb") as handle:
                    handle.write(fixed.encode("utf-8", "surrogateescape"))
            except OSError as exc:
                raise ScanError(f"write {rel_path}: {exc}") from exc
            content = fixed
        return find_non_ascii(rel_path, content)

    findings: list[Finding] = []
    if has_bom and not config.allow_utf8_bom:
        findings.append(Finding(rel_path, 1, 1, "UTF-8 BOM (EF BB BF) - remove for portability"))
    findings += find_crlf(rel_path, content)
    findings += find_replacements(rel_path, content)
    findings += find_invisibles(rel_path, content)
    findings += find_stray_controls(rel_path, content)
    if ext == ".md":
        findings += find_emoji_findings(rel_path, content)
    findings += find_non_ascii(rel_path, content)
    return findings


def scan_file(abs_path: str, rel_path: str, config: Config) -> list[Finding]:
    """Scan one file, fixing it in place when ``config.fix`` is set.

    Binary files and known binary extensions are skipped. In fix mode only
    the issues that could not be fixed are returned.
    """
    ext = _extension(abs_path)
    if ext in _SKIP_EXTS:
        return []

    try:
        handle = open(abs_path, "rb")
    except OSError as exc:
        raise ScanError(f"open {rel_path}: {exc}") from exc

    with handle:
        try:
            header = handle.read(_HEADER_SIZE)
        except OSError as exc:
            raise ScanError(f"read {rel_path}: {exc}") from exc

        # UTF-16 contains null bytes, so it must be recognised before the binary check.
        utf16 = detect_utf16(header, rel_path)
        if utf16 is not None:
            return [utf16]
        if is_binary(header):
            return []

        try:
            data = header + handle.read()
        except OSError as exc:
            raise ScanError(f"read {rel_path}: {exc}") from exc

    has_bom = data.startswith(_UTF8_BOM)
    if has_bom and config.allow_utf8_bom:
        data = data[len(_UTF8_BOM):]
    content = data.decode("utf-8", "surrogateescape")
    return _scan_text(abs_path, rel_path, ext, content, has_bom, config)