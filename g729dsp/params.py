"""Codec-wide constants: frame sizes, LSP quantiser ranges and fixed-point factors."""

L_FRAME = 80
L_SUBFRAME = 40
L_LP_ANALYSIS_WINDOW = 240

# LSP quantiser index widths and ranges
L0_LENGTH = 1
L1_LENGTH = 7
L2_LENGTH = 5
L3_LENGTH = 5
L0_RANGE = 1 << L0_LENGTH
L1_RANGE = 1 << L1_LENGTH
L2_RANGE = 1 << L2_LENGTH
L3_RANGE = 1 << L3_LENGTH
NOISE_L1_RANGE = 32
NOISE_L2_RANGE = 16

MA_MAX_K = 4
NB_LSP_COEFF = 10

MAXIMUM_INT_PITCH_DELAY = 143
L_PAST_EXCITATION = 154

# minimum gaps between LSP coefficients, Q13
GAP1 = 10
GAP2 = 5

# quantised LSF stability limits, Q13
QLSF_MIN = 40
QLSF_MAX = 25681
MIN_QLSF_DISTANCE = 321

# pitch gain bounds, Q14
BOUNDED_PITCH_GAIN_MIN = 3277
BOUNDED_PITCH_GAIN_MAX = 13107

# post filter weighting factors, Q15, powers 1..10
GAMMA_N = (18022, 9912, 5452, 2998, 1649, 907, 499, 274, 151, 83)
GAMMA_D = (22938, 16056, 11239, 7868, 5507, 3855, 2699, 1889, 1322, 926)
GAMMA_T = 26214

# perceptual weighting for open-loop pitch search, Q15, 0.75^(1..10)
GAMMA_E = (24756, 18432, 13824, 10368, 7776, 5832, 4374, 3280, 2460, 1845)

NB_PARAMETERS = 15
NB_COMPUTED_VALUES_CHEBYSHEV_POLYNOMIAL = 51

# comfort noise generation
GAUSSIAN_EXCITATION_COEFF_FACTOR = 25905
COEFF_K = 24576

# voice activity detection
LOG2_240_Q16 = 518186
INV_LOG2_10_Q15 = 9864
NI = 32
N0 = 128

# discontinuous transmission
THRESHOLD3_IN_Q20 = 1176553
THRESHOLD1_IN_Q20 = 1260661
CNG_DTX_RANDOM_SEED_INIT = 11111

# integer limits
MAXINT16 = 32767
MININT16 = -32768
MAXINT28 = 0x07FFFFFF
MAXINT29 = 0x0FFFFFFF
MAXINT32 = 0x7FFFFFFF
MININT32 = -0x80000000