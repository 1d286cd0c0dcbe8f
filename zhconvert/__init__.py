"""Dictionary-driven conversion between Chinese character variants: dictionaries,
segmentation, conversion chains, dictionary file formats and phrase extraction."""

__version__ = "1.1.9"