"""Encoder input high-pass filter with a 140 Hz cut-off frequency."""

from .fixedpoint import mult16_32_q, pshr, saturate, to_int16
from .params import L_FRAME, MAXINT28

# A1 is in Q1.12, the other coefficients in Q0.12
_A1 = 7807
_A2 = -3733
_B0 = 1899
_B1 = -3798
_B2 = 1899


class PreProcessor:
    """Stateful 2nd order high-pass filter applied to each input frame.

    The output is half the input level, as the standard requires.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        """Clear the filter memory."""
        self.output_y1 = 0
        self.output_y2 = 0
        self.input_x0 = 0
        self.input_x1 = 0

    def process(self, signal):
        """Filter 80 Q0 samples and return the 80 filtered Q0 samples."""
        samples = list(signal)
        if len(samples) != L_FRAME:
            raise ValueError(f"expected {L_FRAME} samples, got {len(samples)}")
        output = []
        for sample in samples:
            input_x2 = self.input_x1
            self.input_x1 = self.input_x0
            self.input_x0 = sample

            acc = mult16_32_q(_A1, self.output_y1, 12)
            acc += mult16_32_q(_A2, self.output_y2, 12)
            acc += self.input_x0 * _B0
            acc += self.input_x1 * _B1
            acc += input_x2 * _B2
            # keep the accumulator in Q15.12 so the Q0 extraction fits on 16 bits
            acc = saturate(acc, MAXINT28)

            output.append(to_int16(pshr(acc, 12)))
            self.output_y2 = self.output_y1
            self.output_y1 = acc
        return output