"""General signal helpers shared by the encoder and decoder stages."""

from .fixedpoint import pshr, saturate, to_int16, to_int32, to_uint16
from .params import MAXINT16, NB_LSP_COEFF


def insertion_sort(values):
    """Return the values sorted in growing order."""
    result = list(values)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and result[j] > current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def min_in_array(values):
    """Return the smallest value, never above the 16 bit maximum."""
    return min([MAXINT16, *values])


def compute_parity(adaptive_codebook_index):
    """Parity bit over the 6 most significant bits of an 8 bit pitch index."""
    parity = 1
    bits = (adaptive_codebook_index & 0xFFFF) >> 2
    for _ in range(6):
        parity ^= bits & 1
        bits >>= 1
    return parity


def rearrange_coefficients(qlsp, gap):
    """Spread ordered Q13 coefficients so consecutive ones are about gap apart."""
    result = list(qlsp)
    if len(result) != NB_LSP_COEFF:
        raise ValueError(f"expected {NB_LSP_COEFF} coefficients, got {len(result)}")
    for i in range(1, NB_LSP_COEFF):
        total = to_int16(to_int16(result[i - 1] - result[i]) + gap)
        delta = int(total / 2)
        if delta > 0:
            result[i - 1] = to_int16(result[i - 1] - delta)
            result[i] = to_int16(result[i] + delta)
    return result


def synthesis_filter(input_signal, coefficients, memory):
    """Apply 1/A(z) to a Q0 signal.

    coefficients are the 10 Q12 filter coefficients and memory holds the
    10 previous output samples, oldest first. Returns the filtered samples.
    """
    if len(coefficients) != NB_LSP_COEFF:
        raise ValueError(f"expected {NB_LSP_COEFF} coefficients, got {len(coefficients)}")
    if len(memory) != NB_LSP_COEFF:
        raise ValueError(f"expected {NB_LSP_COEFF} memory samples, got {len(memory)}")
    history = list(memory)
    output = []
    for sample in input_signal:
        acc = sample << 12
        for coefficient, past in zip(coefficients, reversed(history[-NB_LSP_COEFF:])):
            acc -= coefficient * past
        value = saturate(pshr(acc, 12), MAXINT16)
        history.append(value)
        output.append(value)
    return output


def correlate_vectors(x, y):
    """Return c where c[i] is the sum of x[j]*y[j-i] for j from i to the end."""
    if len(x) != len(y):
        raise ValueError("vectors must have the same length")
    n = len(x)
    return [
        to_int32(sum(a * b for a, b in zip(x[i:], y[: n - i])))
        for i in range(n)
    ]


def pseudo_random(seed):
    """Next value of the 16 bit linear congruential generator; it is also the next seed."""
    return to_uint16(13849 + seed * 31821)