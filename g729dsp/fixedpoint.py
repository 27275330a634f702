"""Fixed-point arithmetic helpers emulating 16 and 32 bit integer behaviour."""


def to_int16(value):
    """Wrap an integer to a signed 16 bit value."""
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def to_int32(value):
    """Wrap an integer to a signed 32 bit value."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def to_uint16(value):
    """Wrap an integer to an unsigned 16 bit value."""
    return value & 0xFFFF


def saturate(value, limit):
    """Clamp value to the two's complement range [-limit-1, limit]."""
    if value > limit:
        return limit
    if value < -limit - 1:
        return -limit - 1
    return value


def pshr(value, shift):
    """Arithmetic shift right by shift bits with rounding to nearest."""
    if shift <= 0:
        return value << -shift
    return (value + (1 << (shift - 1))) >> shift


def mult16_16_p15(a, b):
    """Multiply two Q15-scaled 16 bit values, rounding the result back by 15 bits."""
    return (a * b + 16384) >> 15


def mult16_32_q(a, b, q):
    """Multiply a 16 bit value by a 32 bit value and shift the product right by q."""
    return (a * b) >> q


def count_leading_zeros(x):
    """Leading zeros of a non-negative 32 bit value, sign bit excluded."""
    if x == 0:
        return 31
    zeros = 0
    while x < 0x40000000:
        zeros += 1
        x <<= 1
    return zeros


def unsigned_count_leading_zeros(x):
    """Leading zeros of an unsigned 32 bit value, most significant bit included."""
    x &= 0xFFFFFFFF
    if x == 0:
        return 32
    return 32 - x.bit_length()