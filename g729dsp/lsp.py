"""Interpolation of quantised LSP vectors and their conversion to LP coefficients."""

from .fixedpoint import pshr, saturate, to_int16, to_int32
from .params import MAXINT32, NB_LSP_COEFF

_ONE_Q24 = 1 << 24


def _check_length(values, name):
    values = list(values)
    if len(values) != NB_LSP_COEFF:
        raise ValueError(f"{name}: expected {NB_LSP_COEFF} values, got {len(values)}")
    return values


def interpolate_qlsp(previous_qlsp, current_qlsp):
    """Return the rounded mean of two Q15 qLSP vectors (spec 3.2.5)."""
    previous = _check_length(previous_qlsp, "previous_qlsp")
    current = _check_length(current_qlsp, "current_qlsp")
    return [to_int16(pshr(p + c, 1)) for p, c in zip(previous, current)]


def _saturated_shl(value, shift):
    return saturate(value << shift, MAXINT32)


def _polynomial_coefficients(roots):
    """Coefficients f[0..5] in Q24 of the product polynomial built on five Q15 qLSP."""
    f = [_ONE_Q24, to_int32(roots[0] * -1024), 0, 0, 0, 0]
    for i in range(2, 6):
        q = roots[i - 1]
        f[i] = _saturated_shl(to_int32(f[i - 2] - pshr(q * f[i - 1], 15)), 1)
        for j in range(i - 1, 1, -1):
            f[j] = to_int32(f[j] + to_int32(f[j - 2] - pshr(q * f[j - 1], 14)))
        f[1] = to_int32(f[1] - _saturated_shl(q, 10))
    return f


def qlsp_to_lp(qlsp):
    """Convert 10 qLSP in Q15 into 10 LP coefficients in Q12 (spec 3.2.6)."""
    values = _check_length(qlsp, "qlsp")
    f1 = _polynomial_coefficients(values[0::2])
    f2 = _polynomial_coefficients(values[1::2])

    for i in range(5, 0, -1):
        f1[i] = to_int32(f1[i] + f1[i - 1])
        f2[i] = to_int32(f2[i] - f2[i - 1])

    lp = [0] * NB_LSP_COEFF
    for i in range(5):
        lp[i] = to_int16(pshr(to_int32(f1[i + 1] + f2[i + 1]), 13))
        lp[9 - i] = to_int16(pshr(to_int32(f1[i + 1] - f2[i + 1]), 13))
    return lp