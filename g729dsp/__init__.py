"""Bit-exact fixed-point signal processing blocks of the G.729 speech codec."""

__version__ = "1.1.1"
__all__ = [
    "bitstream",
    "fixedpoint",
    "lsp",
    "params",
    "postfilter",
    "postprocessing",
    "preprocessing",
    "utils",
]