# g729dsp

Fixed-point building blocks of the G.729 speech codec, reproducing the
codec's integer arithmetic bit for bit: wrapping and saturating 16/32-bit
operations, LSP interpolation and conversion to LP coefficients, the
encoder's high-pass pre-processing, the decoder's post-filter and
post-processing, and the packing of codec parameters into frames.

All signals are lists (or any iterable) of Python `int` values holding
16-bit samples in Q0; coefficients use the Q formats of the specification.
Functions return new lists rather than changing their arguments. Inputs of
the wrong length raise `ValueError`.

## Installation

```
pip install g729dsp
```

## Modules

- `g729dsp.params` — codec constants: `L_FRAME` (80), `L_SUBFRAME` (40),
  `NB_LSP_COEFF` (10), `NB_PARAMETERS` (15), `MAXIMUM_INT_PITCH_DELAY`,
  the post-filter weighting factors `GAMMA_N`, `GAMMA_D`, `GAMMA_T`, and
  integer limits such as `MAXINT16`.
- `g729dsp.fixedpoint` — `to_int16`, `to_int32`, `to_uint16` (wrap to a
  width), `saturate(value, limit)`, `pshr` (rounding right shift),
  `mult16_16_p15`, `mult16_32_q`, `count_leading_zeros` (sign bit
  excluded, 31 for zero) and `unsigned_count_leading_zeros` (32 for zero).
- `g729dsp.utils` — `insertion_sort`, `min_in_array` (never above
  `MAXINT16`), `compute_parity` (parity bit of a pitch index),
  `rearrange_coefficients(qlsp, gap)`, `synthesis_filter(input_signal,
  coefficients, memory)` (1/A(z) with 10 past output samples, oldest
  first), `correlate_vectors(x, y)` and `pseudo_random(seed)` (returns the
  next 16-bit value, which is also the next seed).
- `g729dsp.bitstream` — `parameters_to_bitstream` (15 parameters to 10
  bytes), `cng_parameters_to_bitstream` (4 comfort-noise parameters to 2
  bytes) and `bitstream_to_parameters` (10 bytes back to 15 parameters).
  Parameters are truncated to their field widths.
- `g729dsp.lsp` — `interpolate_qlsp(previous_qlsp, current_qlsp)` and
  `qlsp_to_lp(qlsp)` (10 Q15 qLSP to 10 Q12 LP coefficients).
- `g729dsp.preprocessing` — `PreProcessor`, the 140 Hz high-pass filter
  applied to 80-sample input frames; its output is half the input level.
- `g729dsp.postprocessing` — `PostProcessor`, high-pass filtering of
  40-sample decoded subframes with the output doubled.
- `g729dsp.postfilter` — `PostFilter`, the long-term, tilt compensation,
  short-term and adaptive gain control post-filter.

The three filter classes keep their memory between calls; `reset()`
returns them to their initial state.

## Example

Pack the 15 parameters of a voiced frame into its 10-byte form and back:

```python
from g729dsp.bitstream import parameters_to_bitstream, bitstream_to_parameters

params = [1, 100, 20, 17, 200, 1, 5000, 9, 5, 12, 21, 7000, 3, 6, 10]
frame = parameters_to_bitstream(params)
assert len(frame) == 10
assert bitstream_to_parameters(frame) == params
```

Filter the input of an encoder, one 80-sample frame at a time:

```python
from g729dsp.preprocessing import PreProcessor

pre = PreProcessor()
filtered = pre.process([1000] * 80)
pre.reset()
```

Convert quantized LSPs to LP coefficients:

```python
from g729dsp.lsp import interpolate_qlsp, qlsp_to_lp

previous = [30000, 26000, 21000, 15000, 8000, 0, -8000, -15000, -21000, -26000]
current = [29000, 25000, 20000, 14000, 7000, -1000, -9000, -16000, -22000, -27000]
lp = qlsp_to_lp(interpolate_qlsp(previous, current))  # 10 values in Q12
```

Post-filter a decoded subframe. `reconstructed_speech` holds 50 samples:
the last 10 of the previous subframe followed by the 40 of the current one;
`subframe_index` is 0 or 40 and the pitch delay must be at least 3:

```python
from g729dsp.postfilter import PostFilter

post = PostFilter()
out = post.filter(lp, [0] * 10 + [500] * 40, int_pitch_delay=60, subframe_index=0)
assert len(out) == 40
```

## What this package does not do

It provides the individual processing blocks only. There is no complete
encoder or decoder, no codebook search, gain quantization or LSP
quantization, no voice activity detection or comfort noise generation,
and no command-line tool for converting audio files.

## Running the tests

```
pip install "g729dsp[test]"
pytest
```