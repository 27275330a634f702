import pytest
from hypothesis import given
from hypothesis import strategies as st

from g729dsp.params import CNG_DTX_RANDOM_SEED_INIT, GAP1, GAP2, MAXINT16
from g729dsp.utils import (
    compute_parity,
    correlate_vectors,
    insertion_sort,
    min_in_array,
    pseudo_random,
    rearrange_coefficients,
    synthesis_filter,
)

int16 = st.integers(min_value=-32768, max_value=32767)


@given(st.lists(int16))
def test_insertion_sort_orders(values):
    assert insertion_sort(values) == sorted(values)


def test_insertion_sort_leaves_input_untouched():
    values = [5, 3, 9, 1]
    insertion_sort(values)
    assert values == [5, 3, 9, 1]


@given(st.lists(int16, min_size=1))
def test_min_in_array(values):
    assert min_in_array(values) == min(values)


def test_min_in_array_empty_gives_max_int16():
    assert min_in_array([]) == MAXINT16


def test_compute_parity_of_zero():
    assert compute_parity(0) == 1


@given(st.integers(min_value=0, max_value=255))
def test_compute_parity_ignores_two_lsb(index):
    assert compute_parity(index) in (0, 1)
    assert compute_parity(index) == compute_parity(index ^ 0x3)


@given(st.integers(min_value=0, max_value=255), st.integers(min_value=2, max_value=7))
def test_compute_parity_flips_with_one_msb(index, bit):
    assert compute_parity(index) != compute_parity(index ^ (1 << bit))


def test_rearrange_keeps_spaced_coefficients():
    qlsp = [1000 * (i + 1) for i in range(10)]
    assert rearrange_coefficients(qlsp, GAP1) == qlsp


@pytest.mark.parametrize("gap", [GAP1, GAP2])
def test_rearrange_spreads_close_coefficients(gap):
    qlsp = [5000, 5001, 5001, 5002, 5003, 5003, 5004, 5005, 5005, 5006]
    result = rearrange_coefficients(qlsp, gap)
    assert sum(result) == sum(qlsp)
    assert result[9] - result[8] >= gap - 1
    assert result != qlsp


def test_rearrange_rejects_wrong_length():
    with pytest.raises(ValueError):
        rearrange_coefficients([1, 2, 3], GAP1)


@given(st.lists(int16, min_size=40, max_size=40), st.lists(int16, min_size=10, max_size=10))
def test_synthesis_filter_zero_coefficients_passes_input(signal, memory):
    assert synthesis_filter(signal, [0] * 10, memory) == signal


def test_synthesis_filter_integrator():
    coefficients = [-4096] + [0] * 9
    signal = [1] + [0] * 39
    assert synthesis_filter(signal, coefficients, [0] * 10) == [1] * 40


def test_synthesis_filter_saturates():
    coefficients = [-4096] + [0] * 9
    output = synthesis_filter([32767] * 40, coefficients, [0] * 10)
    assert output == [MAXINT16] * 40


def test_synthesis_filter_uses_memory():
    coefficients = [-4096] + [0] * 9
    output = synthesis_filter([0] * 40, coefficients, [0] * 9 + [7])
    assert output == [7] * 40


def test_synthesis_filter_rejects_bad_memory():
    with pytest.raises(ValueError):
        synthesis_filter([0] * 40, [0] * 10, [0] * 5)


@given(st.lists(int16, min_size=40, max_size=40))
def test_correlate_with_impulse(x):
    impulse = [1] + [0] * 39
    assert correlate_vectors(x, impulse) == x


@given(st.lists(st.integers(min_value=-1000, max_value=1000), min_size=40, max_size=40),
       st.lists(st.integers(min_value=-1000, max_value=1000), min_size=40, max_size=40))
def test_correlate_lag_zero_is_dot_product(x, y):
    result = correlate_vectors(x, y)
    assert len(result) == 40
    assert result[0] == sum(a * b for a, b in zip(x, y))
    assert result[39] == x[39] * y[0]


def test_correlate_rejects_length_mismatch():
    with pytest.raises(ValueError):
        correlate_vectors([1, 2], [1])


def test_pseudo_random_from_zero_is_increment():
    assert pseudo_random(0) == 13849


def test_pseudo_random_full_period():
    seed = CNG_DTX_RANDOM_SEED_INIT
    seen = set()
    for _ in range(65536):
        seed = pseudo_random(seed)
        assert 0 <= seed <= 0xFFFF
        seen.add(seed)
    assert len(seen) == 65536
    assert seed == CNG_DTX_RANDOM_SEED_INIT