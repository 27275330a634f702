"""Decoder output high-pass filter with upscaling (spec 4.2.5)."""

from .fixedpoint import mult16_32_q, pshr, saturate
from .params import L_SUBFRAME, MAXINT16, MAXINT29

# Q13 coefficients of the 2nd order high-pass filter
_A1 = 15836
_A2 = -7667
_B0 = 7699
_B1 = -15398
_B2 = 7699


class PostProcessor:
    """Stateful high-pass filter applied to each reconstructed subframe.

    The output is doubled relative to the input, as the standard requires.
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
        """Filter 40 Q0 samples and return the 40 filtered Q0 samples."""
        samples = list(signal)
        if len(samples) != L_SUBFRAME:
            raise ValueError(f"expected {L_SUBFRAME} samples, got {len(samples)}")
        output = []
        for sample in samples:
            input_x2 = self.input_x1
            self.input_x1 = self.input_x0
            self.input_x0 = sample

            acc = mult16_32_q(_A1, self.output_y1, 13)
            acc += mult16_32_q(_A2, self.output_y2, 13)
            acc += self.input_x0 * _B0
            acc += self.input_x1 * _B1
            acc = saturate(acc + input_x2 * _B2, MAXINT29)

            output.append(saturate(pshr(acc, 12), MAXINT16))
            self.output_y2 = self.output_y1
            self.output_y1 = acc
        return output