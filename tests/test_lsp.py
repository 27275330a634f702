import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from g729dsp.lsp import interpolate_qlsp, qlsp_to_lp

INIT_LSP = [30000, 26000, 21000, 15000, 8000, 0, -8000, -15000, -21000, -26000]

int16 = st.integers(min_value=-32768, max_value=32767)
vectors = st.lists(int16, min_size=10, max_size=10)


def test_interpolate_identical_vectors_is_identity():
    assert interpolate_qlsp(INIT_LSP, INIT_LSP) == INIT_LSP


def test_interpolate_rounds_half_up():
    assert interpolate_qlsp([1] * 10, [2] * 10) == [2] * 10
    assert interpolate_qlsp([-1] * 10, [-2] * 10) == [-1] * 10


@given(vectors, vectors)
def test_interpolate_is_symmetric_and_between(a, b):
    result = interpolate_qlsp(a, b)
    assert result == interpolate_qlsp(b, a)
    for lo_hi, value in zip(zip(a, b), result):
        assert min(lo_hi) <= value <= max(lo_hi)


def test_interpolate_rejects_wrong_length():
    with pytest.raises(ValueError):
        interpolate_qlsp([0] * 9, [0] * 10)
    with pytest.raises(ValueError):
        interpolate_qlsp([0] * 10, [0] * 11)


def test_flat_spectrum_lsp_gives_near_zero_lp():
    # A(z) = 1 has its line spectral frequencies at k*pi/11, k = 1..10
    qlsp = [round(32767 * math.cos(k * math.pi / 11)) for k in range(1, 11)]
    lp = qlsp_to_lp(qlsp)
    assert len(lp) == 10
    assert all(abs(value) <= 16 for value in lp)


def test_mirrored_lsp_alternates_lp_signs():
    mirrored = [-value for value in reversed(INIT_LSP)]
    lp = qlsp_to_lp(INIT_LSP)
    lp_mirrored = qlsp_to_lp(mirrored)
    for i, (a, b) in enumerate(zip(lp, lp_mirrored)):
        expected = a if i % 2 == 1 else -a
        assert abs(b - expected) <= 2


def test_qlsp_to_lp_is_deterministic_and_in_range():
    lp = qlsp_to_lp(INIT_LSP)
    assert lp == qlsp_to_lp(list(INIT_LSP))
    assert all(-32768 <= value <= 32767 for value in lp)


def test_qlsp_to_lp_rejects_wrong_length():
    with pytest.raises(ValueError):
        qlsp_to_lp(INIT_LSP[:5])