"""Central place for okcolor numeric constants."""

# Toe: Oklab lightness <-> display-referred lightness L_r
TOE_K1: float = 0.206
TOE_K2: float = 0.03
TOE_K3: float = (1.0 + TOE_K1) / (1.0 + TOE_K2)

# Fixed iteration counts (no convergence loop)
MAX_SATURATION_HALLEY_STEPS: int = 2
GAMUT_INTERSECTION_HALLEY_STEPS: int = 1

# Correction assigned to channels whose Halley step points the wrong way
HALLEY_SENTINEL: float = 1e6

# Tolerance for the a_**2 + b_**2 == 1 hue direction check (asserts only)
NORMALIZED_HUE_TOLERANCE: float = 1e-4

# Okhsl chroma interpolation
OKHSL_MID_SATURATION: float = 0.8
OKHSL_MID_CHROMA_SCALE: float = 0.9
OKHSL_C0_SLOPE_BLACK: float = 0.4
OKHSL_C0_SLOPE_WHITE: float = 0.8

# Okhsv base saturation of the gamut triangle mapping
OKHSV_S0: float = 0.5

# Slack above 1.0 allowed for saturation/value in range checks.
# Measured against this package's float64 cusp finder with two Halley steps.
MAX_SRGB_SATURATION_INACCURACY: float = 1e-6
