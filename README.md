# zhconvert

`zhconvert` converts Chinese text between character variants by dictionary
lookup. Text is segmented by greedy maximal matching against a dictionary, then
passed through a chain of conversions, each of which replaces the longest
matching key at every position with that key's default value.

The package is pure Python and has no runtime dependencies. All lengths
(key lengths, the `length` argument of the matching methods) are counted in
characters.

## Building a converter

A `DictEntry` maps a key to zero or more values; its `default` property is the
first value, or the key itself when there is none.

```python
from zhconvert.dict_entry import make_entry
from zhconvert.lexicon import Lexicon
from zhconvert.trie_dict import TrieDict
from zhconvert.dict_group import DictGroup
from zhconvert.segmentation import MaxMatchSegmentation
from zhconvert.conversion import Conversion, ConversionChain
from zhconvert.converter import Converter

phrases = TrieDict.from_lexicon(Lexicon([
    make_entry("太后", ["太后"]),
    make_entry("头发", ["頭髮"]),
    make_entry("干燥", ["乾燥"]),
]))
characters = TrieDict.from_lexicon(Lexicon([
    make_entry("干", ["幹", "乾", "干"]),
    make_entry("头", ["頭"]),
    make_entry("发", ["發", "髮"]),
]))
dictionary = DictGroup([phrases, characters])

converter = Converter(
    "s2t",
    MaxMatchSegmentation(dictionary),
    ConversionChain([Conversion(dictionary)]),
)
print(converter.convert("太后的头发干燥"))  # 太后的頭髮乾燥
```

`MaxMatchSegmentation.segment` returns a list of strings: matched keys become
their own segments and runs of unmatched characters are gathered into one.
`ConversionChain.convert` takes such a list and runs each `Conversion` over
every segment in turn.

## Querying dictionaries

Every dictionary (`TrieDict`, `DictGroup`, or any subclass of
`zhconvert.dictionary.Dict`) offers:

- `match(word)` – the entry whose key equals `word`, or `None`;
- `match_prefix(word, length=None)` – the entry of the longest key that is a
  prefix of `word[:length]`;
- `match_all_prefixes(word, length=None)` – the entries of all such keys,
  longest first;
- `key_max_length()` and `lexicon()`.

```python
entry = dictionary.match_prefix("干燥剂")
print(entry.key, entry.default)  # 干燥 乾燥
print([e.key for e in dictionary.match_all_prefixes("干燥")])  # ['干燥', '干']
```

A `DictGroup` consults its dictionaries in order; the first one to answer
wins. In `match_all_prefixes` an earlier dictionary wins when two give a key of
the same length. `TrieDict` keeps one entry per key (the last one given wins)
and sorts entries by key.

## Text dictionaries

A text dictionary has one entry per line: the key, a tab, and values
separated by spaces. Empty lines are skipped and a leading UTF-8 byte-order
mark is ignored. `parse_lexicon` accepts text or binary streams, or any
iterable of lines.

```python
import io
from zhconvert.lexicon import parse_lexicon

lexicon = parse_lexicon(io.StringIO("干\t幹 乾 干\n发\t發 髮\n"))
lexicon.sort()
print(len(lexicon), lexicon.is_sorted(), lexicon.is_unique())  # 2 True True
```

A non-empty line without a tab raises
`zhconvert.errors.InvalidTextDictionary`, which carries `line_num`.
`Lexicon.find_duplicate()` returns the first key repeated by its neighbour.

## Binary formats and converting dictionary files

`TrieDict.save(stream)` and `TrieDict.load(stream)` write and read a binary
form of the dictionary: a header, the keys, and the value lists encoded by
`zhconvert.serialized_values.write_values` / `read_values`. `BinaryDict` reads
and writes a separate flat layout of a whole lexicon (64-bit sizes, key and
value buffers, offsets). Damaged or truncated input raises
`zhconvert.errors.InvalidFormat`.

`zhconvert.dict_converter` moves dictionaries between the `"text"` and
`"ocd2"` (the `TrieDict` binary form) formats:

```python
from zhconvert.dict_converter import convert_dictionary

convert_dictionary("STPhrases.txt", "STPhrases.ocd2", "text", "ocd2")
```

`load_dictionary`, `convert_dict` and `save_dictionary` expose the individual
steps. An unknown format name raises `InvalidFormat`; a missing input file
raises `zhconvert.errors.FileNotFound`.

## Phrase extraction

`PhraseExtract` finds likely words in a body of text using frequency,
cohesion (the minimum pointwise mutual information over the two-part splits of
a word) and the entropy of the characters next to it on either side.

```python
from zhconvert.phrase_extract import PhraseExtract

extractor = PhraseExtract()
extractor.word_min_length = 1
extractor.word_max_length = 3
extractor.set_full_text("四是四十是十十四是十四四十是四十")
extractor.calculate_frequency()
print(extractor.frequency("四"))  # 6
```

`extract(text)` runs every stage and returns the selected words. The stages
can also be run one by one (`extract_suffixes`, `calculate_frequency`,
`calculate_suffix_entropy`, `extract_prefixes`, `calculate_prefix_entropy`,
`extract_word_candidates`, `calculate_cohesions`, `select_words`); later
stages run the earlier ones they need. Candidates can be filtered by setting
`pre_calculation_filter` or `post_calculation_filter` to a function
`(extractor, word) -> bool` that returns `True` to reject a word. `reset()`
clears the text, all statistics and the filters.

## What the package does not do

There is no loader for JSON configuration files: converters are assembled in
code as shown above. There is no command-line tool, and no dictionary data is
shipped; dictionaries must be supplied as text or binary files, or built from
entries.