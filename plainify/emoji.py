"""Detection and replacement of emoji with GitHub-style :shortcodes:."""

from __future__ import annotations

import re
from functools import lru_cache

from plainify.emoji_table import emoji_entries
from plainify.findings import Finding


@lru_cache(maxsize=None)
def _lookup() -> tuple[re.Pattern[str], dict[str, str]]:
    """Build the matching pattern (longest sequences first) and code lookup."""
    entries = emoji_entries()
    pattern = re.compile("|".join(re.escape(entry.seq) for entry in entries))
    codes = {entry.seq: entry.code for entry in entries}
    return pattern, codes


def _utf8_len(text: str) -> int:
    return len(text.encode("utf-8", "surrogateescape"))


def replace_emoji(text: str) -> str:
    """Replace every known emoji sequence in ``text`` with its :shortcode:."""
    pattern, codes = _lookup()
    return pattern.sub(lambda match: codes[match.group()], text)


def find_emoji_findings(rel_path: str, content: str) -> list[Finding]:
    """Return one finding per emoji occurrence in ``content``.

    Line numbers start at 1; columns are 1-based UTF-8 byte offsets.
    """
    pattern, codes = _lookup()
    findings: list[Finding] = []
    for line_no, line in enumerate(content.split("\n"), start=1):
        byte_pos = 0
        char_pos = 0
        for match in pattern.finditer(line):
            byte_pos += _utf8_len(line[char_pos:match.start()])
            char_pos = match.start()
            findings.append(
                Finding(
                    file=rel_path,
                    line=line_no,
                    col=byte_pos + 1,
                    message="emoji - use " + codes[match.group()],
                )
            )
        # Positions after the last match are not needed.
    return findings