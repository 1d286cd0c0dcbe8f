import pytest

from zhconvert.dict_converter import (
    convert_dict,
    convert_dictionary,
    load_dictionary,
    save_dictionary,
)
from zhconvert.errors import FileNotFound, InvalidFormat
from zhconvert.trie_dict import TrieDict

TEXT = "清華\tTsinghua\n積羽沉舟\t羣輕折軸\n清\tTsing\n干\t幹 乾 干\n"


@pytest.fixture
def text_file(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text(TEXT, encoding="utf-8")
    return path


def _pairs(d):
    return [(e.key, e.values) for e in d.lexicon()]


def test_text_to_ocd2_round_trip(text_file, tmp_path):
    ocd2 = tmp_path / "dict.ocd2"
    convert_dictionary(text_file, ocd2, "text", "ocd2")
    original = load_dictionary("text", text_file)
    loaded = load_dictionary("ocd2", ocd2)
    assert _pairs(loaded) == _pairs(original)
    assert loaded.match_prefix("清華").default == "Tsinghua"
    assert loaded.match("干").values == ("幹", "乾", "干")


def test_ocd2_header(text_file, tmp_path):
    ocd2 = tmp_path / "dict.ocd2"
    convert_dictionary(text_file, ocd2, "text", "ocd2")
    assert ocd2.read_bytes().startswith(b"ZHCONVERT_TRIE_1")


def test_ocd2_back_to_text_is_sorted(text_file, tmp_path):
    ocd2 = tmp_path / "dict.ocd2"
    out = tmp_path / "out.txt"
    convert_dictionary(text_file, ocd2, "text", "ocd2")
    convert_dictionary(ocd2, out, "ocd2", "text")
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines == sorted(TEXT.splitlines(), key=lambda line: line.split("\t")[0])


def test_text_to_text_preserves_entries(text_file, tmp_path):
    out = tmp_path / "copy.txt"
    convert_dictionary(text_file, out, "text", "text")
    assert _pairs(load_dictionary("text", out)) == _pairs(load_dictionary("text", text_file))


def test_convert_dict_ocd2_is_trie(text_file):
    source = load_dictionary("text", text_file)
    converted = convert_dict("ocd2", source)
    assert isinstance(converted, TrieDict)
    assert converted.match("積羽沉舟").default == "羣輕折軸"
    assert converted.key_max_length() == source.key_max_length()


def test_save_dictionary_writes_text(text_file, tmp_path):
    out = tmp_path / "saved.txt"
    save_dictionary(convert_dict("text", load_dictionary("text", text_file)), out)
    assert "干\t幹 乾 干" in out.read_text(encoding="utf-8").splitlines()


def test_unknown_format_on_load(text_file):
    with pytest.raises(InvalidFormat, match="Unknown dictionary format: xml"):
        load_dictionary("xml", text_file)


def test_unknown_format_on_convert(text_file):
    with pytest.raises(InvalidFormat, match="Unknown dictionary format: ocd"):
        convert_dict("ocd", load_dictionary("text", text_file))


def test_missing_input(tmp_path):
    missing = tmp_path / "missing.txt"
    with pytest.raises(FileNotFound) as info:
        convert_dictionary(missing, tmp_path / "o.ocd2", "text", "ocd2")
    assert info.value.file_name == str(missing)


def test_loading_text_as_ocd2_fails(text_file):
    with pytest.raises(InvalidFormat):
        load_dictionary("ocd2", text_file)