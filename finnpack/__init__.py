"""FINN datatypes, bit-level packing helpers, a multi-dimensional view and configuration loading."""

__version__ = "0.1.0"