import pytest

from zhconvert.conversion import Conversion, ConversionChain
from zhconvert.converter import Converter
from zhconvert.dict_entry import DictEntry
from zhconvert.dict_group import DictGroup
from zhconvert.lexicon import Lexicon
from zhconvert.segmentation import MaxMatchSegmentation
from zhconvert.trie_dict import TrieDict


@pytest.fixture
def dict_group():
    phrases = TrieDict.from_lexicon(
        Lexicon(
            [
                DictEntry("太后", ("太后",)),
                DictEntry("头发", ("頭髮",)),
                DictEntry("干燥", ("乾燥",)),
            ]
        )
    )
    characters = TrieDict.from_lexicon(
        Lexicon(
            [
                DictEntry("后", ("後", "后")),
                DictEntry("头", ("頭",)),
                DictEntry("发", ("發", "髮")),
                DictEntry("干", ("幹", "乾", "干")),
                DictEntry("里", ("裏", "里")),
            ]
        )
    )
    return DictGroup([phrases, characters])


@pytest.fixture
def converter(dict_group):
    variants = TrieDict.from_lexicon(Lexicon([DictEntry("裏", ("裡",))]))
    chain = ConversionChain([Conversion(dict_group), Conversion(variants)])
    return Converter("test", MaxMatchSegmentation(dict_group), chain)


def test_convert(converter):
    assert converter.convert("太后的头发干燥") == "太后的頭髮乾燥"


def test_convert_through_chain(converter):
    assert converter.convert("里面") == "裡面"


def test_convert_empty(converter):
    assert converter.convert("") == ""


def test_unmatched_text_unchanged(converter):
    assert converter.convert("plain text 123") == "plain text 123"


def test_name_is_kept(converter):
    assert converter.name == "test"


def test_segmentation_prevents_cross_boundary_matches(dict_group):
    phrase_dict = TrieDict.from_lexicon(Lexicon([DictEntry("ab", ("X",))]))
    segmenter = MaxMatchSegmentation(
        TrieDict.from_lexicon(Lexicon([DictEntry("a", ("a",)), DictEntry("b", ("b",))]))
    )
    converter = Converter("split", segmenter, ConversionChain([Conversion(phrase_dict)]))
    assert converter.convert("ab") == "ab"
    assert Conversion(phrase_dict).convert("ab") == "X"