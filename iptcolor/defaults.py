"""Central place for iptcolor default settings."""

# Nonlinear channel mapping (LMS <-> LMS')
FORWARD_COMPRESS_EXPONENT: float = 0.43
REVERSE_COMPRESS_EXPONENT: float = 2.3256  # ~1 / 0.43

# Lane quantization
FORWARD_LANE_SCALE: float = 255.999  # RGB -> IPT encoding, truncated after scaling
RGB_OUTPUT_SCALE: float = 255.999    # linear RGB -> 8-bit channel output

# Gamut handling
GAMUT_TOLERANCE: float = 5e-4  # linear RGB slack; the gray axis reaches 1.000148 at I=1
LIMIT_STEPS: int = 32          # desaturation steps scanned by the gamut limiter

# HSL editing
NEAR_BLACK_INTENSITY: float = 0.001
NEAR_BLACK_WORD: int = 0x7F7F00    # from_hsl() black: intensity 0, neutral chroma, alpha ORed in
EDITED_BLACK_WORD: int = 0x808000  # to_edited() black, on the other side of neutral
HSL_EPSILON: float = 1e-10
SATURATION_EDGE: float = 0.495  # saturation() reports 0 when |I - 0.5| exceeds this

# Random editing
RANDOM_EDIT_ATTEMPTS: int = 50

# Contrast
INVERSE_LIGHTNESS_DISTANCE: int = 0x10000  # squared P/T byte distance that already contrasts

# Palette descriptions
DESCRIPTION_LIGHTNESS_STEP: float = 0.15
DESCRIPTION_SATURATION_STEPS: tuple[float, ...] = (0.1, 0.15, 0.2, 0.25)  # cumulative per -er/-est/-most level

# Gradients
DEFAULT_LUT_SIZE: int = 256
