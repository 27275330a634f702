"""Packing of frame parameters into the transmitted bit stream.

A speech frame carries 15 parameters on 80 bits (10 bytes):

    index  name  bits
      0    L0     1
      1    L1     7
      2    L2     5
      3    L3     5
      4    P1     8
      5    P0     1
      6    C1    13
      7    S1     4
      8    GA1    3
      9    GB1    4
     10    P2     5
     11    C2    13
     12    S2     4
     13    GA2    3
     14    GB2    4

A comfort noise (SID) frame carries 4 parameters on 15 bits, padded to
2 bytes: L0 (1 bit), L1 (5 bits), L2 (4 bits) and the gain (5 bits).
Fields are written most significant bit first, in the order above.
"""

from .params import NB_PARAMETERS

PARAMETER_BITS = (1, 7, 5, 5, 8, 1, 13, 4, 3, 4, 5, 13, 4, 3, 4)
CNG_PARAMETER_BITS = (1, 5, 4, 5)

FRAME_BYTES = 10
CNG_FRAME_BYTES = 2


def _pack(parameters, widths, size):
    values = list(parameters)
    if len(values) < len(widths):
        raise ValueError(f"expected at least {len(widths)} parameters, got {len(values)}")
    acc = 0
    for value, width in zip(values, widths):
        acc = (acc << width) | (value & ((1 << width) - 1))
    acc <<= size * 8 - sum(widths)
    return acc.to_bytes(size, "big")


def parameters_to_bitstream(parameters):
    """Pack the 15 frame parameters into 10 bytes.

    Each parameter is truncated to its field width; values past the 15th
    are ignored.
    """
    return _pack(parameters, PARAMETER_BITS, FRAME_BYTES)


def cng_parameters_to_bitstream(parameters):
    """Pack the 4 comfort noise parameters into 2 bytes (15 bits used)."""
    return _pack(parameters, CNG_PARAMETER_BITS, CNG_FRAME_BYTES)


def bitstream_to_parameters(bitstream):
    """Unpack the first 10 bytes of a speech frame into its 15 parameters."""
    data = bytes(bitstream)
    if len(data) < FRAME_BYTES:
        raise ValueError(f"expected at least {FRAME_BYTES} bytes, got {len(data)}")
    acc = int.from_bytes(data[:FRAME_BYTES], "big")
    remaining = FRAME_BYTES * 8
    parameters = []
    for width in PARAMETER_BITS[:NB_PARAMETERS]:
        remaining -= width
        parameters.append((acc >> remaining) & ((1 << width) - 1))
    return parameters