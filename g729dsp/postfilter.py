"""Decoder post filter: long term, tilt compensation, short term and gain control (spec A.4.2)."""

from math import isqrt

from .fixedpoint import (
    count_leading_zeros,
    mult16_16_p15,
    mult16_32_q,
    pshr,
    saturate,
    to_int16,
    to_int32,
    unsigned_count_leading_zeros,
)
from .params import (
    GAMMA_D,
    GAMMA_N,
    GAMMA_T,
    L_FRAME,
    L_SUBFRAME,
    MAXIMUM_INT_PITCH_DELAY,
    MAXINT16,
    MININT32,
    NB_LSP_COEFF,
)
from .utils import synthesis_filter

_UINT32_MASK = 0xFFFFFFFF
_ONE_Q12 = 4096
_IMPULSE_RESPONSE_LENGTH = 22
_RESIDUAL_BUFFER_LENGTH = MAXIMUM_INT_PITCH_DELAY + L_FRAME
_SPEECH_LENGTH = NB_LSP_COEFF + L_SUBFRAME


def _div_trunc(numerator, denominator):
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def _vshr32_unsigned(value, shift):
    """Shift an unsigned 32 bit value right, or left when shift is negative."""
    if shift > 0:
        return value >> shift
    return (value << -shift) & _UINT32_MASK


def _sqrt_q0q7(value):
    """Square root of a Q0 value, result in Q7."""
    if value <= 0:
        return 0
    return isqrt(value << 14)


class PostFilter:
    """Stateful post filter applied to each decoded subframe."""

    def __init__(self):
        self.reset()

    def reset(self):
        """Clear all filter memories and restore the unit adaptive gain."""
        self.residual_signal = [0] * _RESIDUAL_BUFFER_LENGTH
        self.scaled_residual_signal = [0] * _RESIDUAL_BUFFER_LENGTH
        self.long_term_memory = 0
        self.short_term_memory = [0] * NB_LSP_COEFF
        self.previous_adaptive_gain = _ONE_Q12

    def filter(self, lp_coefficients, reconstructed_speech, int_pitch_delay, subframe_index):
        """Post filter one subframe.

        lp_coefficients are the 10 Q12 LP coefficients of the subframe,
        reconstructed_speech holds 50 Q0 samples: the last 10 of the previous
        subframe followed by the 40 of the current one. subframe_index is 0
        or 40. Returns the 40 post filtered Q0 samples.
        """
        lp = list(lp_coefficients)
        speech = list(reconstructed_speech)
        if len(lp) != NB_LSP_COEFF:
            raise ValueError(f"expected {NB_LSP_COEFF} LP coefficients, got {len(lp)}")
        if len(speech) != _SPEECH_LENGTH:
            raise ValueError(f"expected {_SPEECH_LENGTH} speech samples, got {len(speech)}")
        if subframe_index not in (0, L_SUBFRAME):
            raise ValueError(f"subframe index must be 0 or {L_SUBFRAME}, got {subframe_index}")
        if int_pitch_delay < 3:
            raise ValueError(f"pitch delay must be at least 3, got {int_pitch_delay}")

        gamma_n = [mult16_16_p15(c, g) for c, g in zip(lp, GAMMA_N)]
        gamma_d = [mult16_16_p15(c, g) for c, g in zip(lp, GAMMA_D)]
        current = speech[NB_LSP_COEFF:]

        start = MAXIMUM_INT_PITCH_DELAY + subframe_index
        residual = self._compute_residual(speech, gamma_n, start)
        long_term = self._long_term_filter(residual, int_pitch_delay, start)
        tilted = self._tilt_compensation(long_term, gamma_n, gamma_d)

        short_term = synthesis_filter(tilted, gamma_d, self.short_term_memory)
        self.short_term_memory = short_term[-NB_LSP_COEFF:]

        output = self._adaptive_gain_control(current, short_term)

        if subframe_index > 0:
            self.residual_signal = self.residual_signal[L_FRAME:] + [0] * L_FRAME
            self.scaled_residual_signal = self.scaled_residual_signal[L_FRAME:] + [0] * L_FRAME
        return output

    def _compute_residual(self, speech, gamma_n, start):
        """Fill the residual buffers for the current subframe (eq79)."""
        residual = []
        for i in range(L_SUBFRAME):
            n = NB_LSP_COEFF + i
            acc = speech[n] << 12
            for j, coefficient in enumerate(gamma_n):
                acc += coefficient * speech[n - j - 1]
            value = saturate(pshr(to_int32(acc), 12), MAXINT16)
            self.residual_signal[start + i] = value
            self.scaled_residual_signal[start + i] = pshr(value, 2)
            residual.append(value)
        return residual

    def _long_term_filter(self, residual, int_pitch_delay, start):
        """Apply the long term post filter and return its 40 output samples."""
        scaled = self.scaled_residual_signal
        full = self.residual_signal
        delay = min(int_pitch_delay, MAXIMUM_INT_PITCH_DELAY - 3)

        correlation_max = MININT32
        best_delay = 0
        for k in range(delay - 3, delay + 4):
            correlation = to_int32(
                sum(scaled[start + j - k] * scaled[start + j] for j in range(L_SUBFRAME))
            )
            if correlation > correlation_max:
                correlation_max = correlation
                best_delay = k
        correlation_max = max(correlation_max, 0)

        residual_energy = to_int32(
            sum(scaled[start + i] ** 2 for i in range(L_SUBFRAME))
        )
        delayed_energy = to_int32(
            sum(scaled[start + i - best_delay] ** 2 for i in range(L_SUBFRAME))
        )

        correlation16 = residual_energy16 = delayed_energy16 = 0
        maximum = max(correlation_max, residual_energy, delayed_energy)
        if maximum > 0:
            leading_zeros = count_leading_zeros(maximum)
            shift = 16 - leading_zeros if leading_zeros < 16 else 0
            correlation16 = to_int16(correlation_max >> shift)
            residual_energy16 = to_int16(residual_energy >> shift)
            delayed_energy16 = to_int16(delayed_energy >> shift)

        disabled = (
            correlation16 * correlation16 < (residual_energy16 * delayed_energy16) >> 1
            or (correlation16 == 0 and delayed_energy16 == 0)
        )
        if disabled:
            return list(residual)

        if correlation_max > delayed_energy:
            g0, g1 = 21845, 10923
        else:
            g1 = to_int16(
                _div_trunc(correlation16 << 15, (delayed_energy16 << 1) + correlation16)
            )
            g0 = to_int16(32767 - g1)
        return [
            saturate(
                pshr(to_int32(g0 * full[start + i] + g1 * full[start + i - best_delay]), 15),
                MAXINT16,
            )
            for i in range(L_SUBFRAME)
        ]

    def _tilt_compensation(self, long_term, gamma_n, gamma_d):
        """Apply the tilt compensation filter (spec A.4.2.3)."""
        hf = [_ONE_Q12]
        for i in range(1, _IMPULSE_RESPONSE_LENGTH):
            acc = gamma_n[i - 1] << 12 if i <= NB_LSP_COEFF else 0
            for j in range(min(NB_LSP_COEFF, i)):
                acc -= gamma_d[j] * hf[i - j - 1]
            hf.append(saturate(pshr(to_int32(acc), 12), MAXINT16))

        rh1 = to_int32(sum(a * b for a, b in zip(hf, hf[1:])))
        previous = [self.long_term_memory, *long_term[:-1]]
        self.long_term_memory = long_term[-1]
        if rh1 < 0:
            return list(long_term)

        rh0 = to_int32(sum(h * h for h in hf))
        rh1 = mult16_32_q(GAMMA_T, rh1, 15)
        gain = saturate(_div_trunc(rh1, pshr(rh0, 12)), MAXINT16)
        return [
            to_int16(sample - ((gain * past) >> 12))
            for sample, past in zip(long_term, previous)
        ]

    def _adaptive_gain_control(self, current, short_term):
        """Scale the short term filter output to the speech level (spec A.4.2.4)."""
        filtered_sum = 0
        for sample in short_term:
            filtered_sum = (filtered_sum + ((sample * sample) >> 4)) & _UINT32_MASK

        if filtered_sum == 0:
            self.previous_adaptive_gain = 0
            return list(short_term)

        speech_sum = 0
        for sample in current:
            speech_sum = (speech_sum + ((sample * sample) >> 4)) & _UINT32_MASK

        if speech_sum == 0:
            gain_scaling = 0
        else:
            numerator_shift = unsigned_count_leading_zeros(speech_sum)
            speech_sum = (speech_sum << numerator_shift) & _UINT32_MASK
            scaled_filtered = to_int32(_vshr32_unsigned(filtered_sum, 10 - numerator_shift))
            if scaled_filtered == 0:
                fraction = speech_sum // filtered_sum
                fraction = _vshr32_unsigned(fraction, numerator_shift - 10)
            else:
                fraction = speech_sum // (scaled_filtered & _UINT32_MASK)
            gain_scaling = saturate(_sqrt_q0q7(to_int32(fraction)), MAXINT16)
            gain_scaling = mult16_16_p15(gain_scaling, 3277)

        gain = self.previous_adaptive_gain
        output = []
        for sample in short_term:
            gain = to_int16(gain_scaling + mult16_16_p15(gain, 29491))
            output.append(to_int16((gain * sample) >> 12))
        self.previous_adaptive_gain = gain
        return output