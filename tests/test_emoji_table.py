from plainify.emoji_table import EmojiEntry, emoji_entries


def _lookup():
    return {entry.seq: entry.code for entry in emoji_entries()}


def test_sorted_by_utf8_length_descending():
    lengths = [len(entry.seq.encode("utf-8")) for entry in emoji_entries()]
    assert lengths == sorted(lengths, reverse=True)


def test_sequences_are_unique():
    seqs = [entry.seq for entry in emoji_entries()]
    assert len(seqs) == len(set(seqs))


def test_rocket_shortcode():
    assert _lookup()["\U0001F680"] == ":rocket:"


def test_known_shortcodes():
    table = _lookup()
    assert table["\U0001F41B"] == ":bug:"
    assert table["\u2728"] == ":sparkles:"
    assert table["0\uFE0F\u20E3"] == ":zero:"


def test_variation_selector_form_and_base_share_code():
    table = _lookup()
    assert table["\u2764\uFE0F"] == table["\u2764"] == ":heart:"


def test_variation_selector_form_precedes_base():
    seqs = [entry.seq for entry in emoji_entries()]
    assert seqs.index("\u2764\uFE0F") < seqs.index("\u2764")
    assert seqs.index("\u270C\uFE0F") < seqs.index("\u270C")


def test_all_codes_are_colon_delimited():
    for entry in emoji_entries():
        assert entry.code.startswith(":") and entry.code.endswith(":")
        assert len(entry.code) > 2


def test_no_empty_sequences():
    assert all(entry.seq for entry in emoji_entries())


def test_repeated_calls_return_same_entries():
    first = list(emoji_entries())
    second = list(emoji_entries())
    assert first == second
    assert EmojiEntry("\U0001F41B", ":bug:") in second


def test_entry_is_value_type():
    assert EmojiEntry("\U0001F680", ":rocket:") in emoji_entries()