"""Segmentation followed by a chain of conversions."""

from __future__ import annotations

from .conversion import ConversionChain
from .segmentation import Segmentation


class Converter:
    """Converts text by segmenting it and running a conversion chain."""

    def __init__(
        self,
        name: str,
        segmentation: Segmentation,
        conversion_chain: ConversionChain,
    ) -> None:
        self.name = name
        self.segmentation = segmentation
        self.conversion_chain = conversion_chain

    def convert(self, text: str) -> str:
        segments = self.segmentation.segment(text)
        return "".join(self.conversion_chain.convert(segments))