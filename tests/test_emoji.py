import pytest

from plainify.emoji import find_emoji_findings, replace_emoji
from plainify.findings import Finding


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("hello", "hello"),
        ("\U0001F680", ":rocket:"),
        ("fix \U0001F41B and \u2728", "fix :bug: and :sparkles:"),
        ("\u2764\uFE0F you", ":heart: you"),
    ],
)
def test_replace_emoji_cases(text, expected):
    assert replace_emoji(text) == expected


def test_replace_emoji_bare_heart_without_selector():
    assert replace_emoji("I \u2764 it") == "I :heart: it"


def test_replace_emoji_keycap_sequence():
    assert replace_emoji("step 1\uFE0F\u20E3 then 1") == "step :one: then 1"


def test_replace_emoji_deploy_line():
    assert replace_emoji("Deploy \U0001F680 now\n") == "Deploy :rocket: now\n"


def test_replace_emoji_adjacent_emoji():
    assert replace_emoji("\U0001F525\U0001F525") == ":fire::fire:"


def test_find_emoji_in_heading():
    findings = find_emoji_findings("README.md", "# Hello \U0001F680 World\n")
    assert findings == [
        Finding(file="README.md", line=1, col=9, message="emoji - use :rocket:")
    ]


def test_find_emoji_column_counts_utf8_bytes():
    findings = find_emoji_findings("a.md", "\u00e9\U0001F680")
    assert [(f.line, f.col) for f in findings] == [(1, 3)]


def test_find_emoji_multiple_lines():
    content = "plain\n\U0001F41B bug\nnone\n\u2728"
    findings = find_emoji_findings("doc.md", content)
    assert [(f.line, f.col, f.message) for f in findings] == [
        (2, 1, "emoji - use :bug:"),
        (4, 1, "emoji - use :sparkles:"),
    ]


def test_find_emoji_none_in_plain_text():
    assert find_emoji_findings("doc.md", "just ascii\nand more\n") == []


def test_find_emoji_empty_content():
    assert find_emoji_findings("doc.md", "") == []


def test_no_findings_after_replacement():
    content = "ok \u2705 \U0001F389\n\u26A0\uFE0F careful\n"
    assert len(find_emoji_findings("x.md", content)) == 3
    assert find_emoji_findings("x.md", replace_emoji(content)) == []