"""Building blocks for differential k-mer analysis: k-mer records, packing, statistics, and helpers."""

__version__ = "0.1.0"