import io

import pytest

from zhconvert.dict_entry import make_entry
from zhconvert.errors import InvalidTextDictionary
from zhconvert.lexicon import Lexicon, parse_entry, parse_lexicon


def test_parse_entry_single_value():
    entry = parse_entry("一丝不挂\t一絲不掛\n", 1)
    assert entry == make_entry("一丝不挂", "一絲不掛")


def test_parse_entry_multiple_values():
    entry = parse_entry("干\t幹 乾 干\r\n", 1)
    assert entry.values == ("幹", "乾", "干")


def test_parse_entry_blank_lines():
    assert parse_entry("", 1) is None
    assert parse_entry("\n", 1) is None
    assert parse_entry("\r\n", 1) is None


def test_parse_entry_without_tab_raises():
    with pytest.raises(InvalidTextDictionary) as info:
        parse_entry("no tab here\n", 5)
    assert info.value.line_num == 5
    assert "Tabular not found" in str(info.value)


def test_parse_entry_tab_kept_inside_value():
    entry = parse_entry("a\tb\tc\n", 1)
    assert entry.key == "a"
    assert entry.values == ("b\tc",)


def test_parse_lexicon_skips_bom_and_blank_lines():
    text = "\ufeff里面\t裡面\n\n太后\t太后\n"
    lexicon = parse_lexicon(io.StringIO(text))
    assert [e.key for e in lexicon] == ["里面", "太后"]
    assert len(lexicon) == 2


def test_parse_lexicon_from_bytes():
    data = "\ufeff清華\tTsinghua\n清\tTsing\n".encode("utf-8")
    lexicon = parse_lexicon(io.BytesIO(data))
    assert lexicon[0] == make_entry("清華", "Tsinghua")
    assert lexicon[1] == make_entry("清", "Tsing")


def test_parse_lexicon_reports_line_number():
    text = "a\tb\n\nbroken\n"
    with pytest.raises(InvalidTextDictionary) as info:
        parse_lexicon(io.StringIO(text))
    assert info.value.line_num == 3


def test_sort_and_is_sorted():
    lexicon = Lexicon([make_entry("c", "1"), make_entry("a", "2"), make_entry("b", "3")])
    assert not lexicon.is_sorted()
    lexicon.sort()
    assert lexicon.is_sorted()
    assert [e.key for e in lexicon] == ["a", "b", "c"]


def test_duplicates():
    lexicon = Lexicon([make_entry("a", "1"), make_entry("b", "2"), make_entry("b", "3")])
    assert not lexicon.is_unique()
    assert lexicon.find_duplicate() == "b"
    unique = Lexicon([make_entry("a", "1"), make_entry("b", "2")])
    assert unique.is_unique()
    assert unique.find_duplicate() is None


def test_add_and_index():
    lexicon = Lexicon()
    assert len(lexicon) == 0
    entry = make_entry("x", "y")
    lexicon.add(entry)
    assert lexicon[0] is entry
    assert lexicon[-1] is entry
    with pytest.raises(IndexError):
        lexicon[1]


def test_empty_lexicon_is_sorted_and_unique():
    lexicon = Lexicon()
    assert lexicon.is_sorted()
    assert lexicon.is_unique()