#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 4096

EPS = 1e-12                        # Floating-point precision and division-by-zero safety

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
HUE_SECTOR = 60.0                  # Degrees per HSL sector
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL
PERCENT_TO_FACTOR = 100.0          # Divisor to convert percentage values to decimal factors
CUBE_ROOT_EXP = 1.0 / 3.0          # Cube root exponent for LMS non-linearity

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space
WCAG_TO_LINEAR_TH = 0.03928        # Linearization threshold quoted by WCAG 2.x relative luminance

# CIE L* Constants (Source: CIE 15:2004)
LAB_E = 0.008856                   # Luminance threshold between linear and cube-root segments
LAB_KAPPA = 903.3                  # Slope of the linear segment for low luminance values
LAB_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LAB_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LAB_L_THR = 8.0                    # L* value where the inverse switches segments

# OKLab: linear sRGB to LMS (Source: Ottosson 2020)
M_LRGB_TO_LMS = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

# OKLab: non-linear LMS' to Lab
M_LMS_TO_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

# OKLab: Lab to non-linear LMS'
M_OKLAB_TO_LMS = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

# OKLab: LMS to linear sRGB
M_LMS_TO_LRGB = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)

# Linear sRGB to linear Display P3 (both D65, Source: CSS Color 4)
M_LRGB_TO_LP3 = (
    (0.8224621209, 0.1775378791, 0.0),
    (0.0331941989, 0.9668058011, 0.0),
    (0.0170826307, 0.0723974407, 0.9105199286),
)

# Linear Display P3 to linear sRGB
M_LP3_TO_LRGB = (
    (1.2249401763, -0.2249401763, 0.0),
    (-0.0420569547, 1.0420569547, 0.0),
    (-0.0196375546, -0.0786360456, 1.0982736002),
)

# ==========================================
# Gamut Mapping
# ==========================================

GAMUT_SRGB = "srgb"
GAMUT_P3 = "p3"
GAMUTS = (GAMUT_SRGB, GAMUT_P3)
DEFAULT_GAMUT = GAMUT_P3

GAMUT_EPSILON = {                  # Channel tolerance for the in-gamut test
    GAMUT_SRGB: 0.0,
    GAMUT_P3: 0.01,                # Wider gamut absorbs floating-point boundary noise
}

CHROMA_STEP = 0.0005               # Fixed chroma decrement of the fixed-lightness mapper
MAX_CHROMA = 0.4                   # Practical OKLCH chroma ceiling
GAMUT_JND = 0.02                   # Just-noticeable deltaE OK for the free-lightness mapper
GAMUT_CHROMA_RESOLUTION = 0.0001   # Bisection resolution of the free-lightness mapper

ACHROMATIC_CHROMA = 0.02           # Below this chroma hue is locked to the base hue

# ==========================================
# Chroma Limit Model
# ==========================================

CHROMA_HUE_STEP = 30               # Hue bucket width in degrees
CHROMA_LIGHTNESS_STEP = 10         # Lightness bucket width in percent
CHROMA_REFERENCE_HUE = 240.0       # Blue reaches the largest chroma in the lattice
CHROMA_REFERENCE_LIGHTNESS = 0.6   # Typical UI lightness used for scale factors
COMPENSATION_MIN = 0.5             # Lower bound of the hue compensation multiplier
COMPENSATION_MAX = 1.0             # Upper bound of the hue compensation multiplier
COMPENSATION_STRENGTH = 0.9        # Blend factor toward the limit in apply_chroma_compensation
OPTIMAL_CHROMA_MARGIN = 0.95       # Safety margin for suggested chroma
EMPIRICAL_PRECISION = 0.001        # Default bisection precision for lattice validation

# ==========================================
# Contrast (WCAG 2.x)
# ==========================================

WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula
WCAG_MIN_RATIO = 1.0               # Lower bound of the WCAG ratio
WCAG_MAX_RATIO = 21.0              # Upper bound of the WCAG ratio (black on white)
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_LARGE = 4.5               # Enhanced contrast for large text (Level AAA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_UI_COMPONENT = 3.0            # Non-text contrast (SC 1.4.11)

# ==========================================
# Contrast (APCA 0.0.98G-4g)
# ==========================================

APCA_MAIN_TRC = 2.4                # Simple exponent APCA uses to estimate screen luminance
APCA_R_CO = 0.2126729              # Red coefficient for APCA luminance
APCA_G_CO = 0.7151522              # Green coefficient for APCA luminance
APCA_B_CO = 0.0721750              # Blue coefficient for APCA luminance
APCA_NORM_BG = 0.56                # Background exponent, dark text on light
APCA_NORM_TXT = 0.57               # Text exponent, dark text on light
APCA_REV_TXT = 0.62                # Text exponent, light text on dark
APCA_REV_BG = 0.65                 # Background exponent, light text on dark
APCA_BLK_THRS = 0.022              # Soft black clamp threshold
APCA_BLK_CLMP = 1.414              # Soft black clamp exponent
APCA_SCALE_BOW = 1.14              # Output scale, black on white
APCA_SCALE_WOB = 1.14              # Output scale, white on black
APCA_LO_CON_THRESH = 0.1           # Low-contrast clip threshold
APCA_LO_CON_OFFSET = 0.027         # Low-contrast offset
APCA_DELTA_Y_MIN = 0.0005          # Luminance difference treated as zero contrast
APCA_Y_MAX = 1.1                   # Luminances above this are rejected as invalid

APCA_BRONZE = 60.0                 # Large text minimum
APCA_SILVER = 75.0                 # Body text standard
APCA_GOLD = 90.0                   # Small or critical text

APCA_TARGETS = {                   # Lc targets for common use cases
    "body_text": 75.0,
    "large_text": 60.0,
    "small_text": 90.0,
    "placeholder": 45.0,
    "decorative": 30.0,
    "ui_elements": 45.0,
}

# ==========================================
# Backgrounds
# ==========================================

# Fixed OKLCH lightness of the references used by the three-way contrast report
REFERENCE_BLACK_L = 0.14
REFERENCE_WHITE_L = 1.0
REFERENCE_GRAY_L = 0.9

# OKLCH lightness of the keyword backgrounds understood by the APCA solver
KEYWORD_BACKGROUNDS = {
    "black": 0.0,
    "white": 1.0,
    "gray": 0.8,
}

# name: (hex, lightness in percent)
BACKGROUND_PRESETS = {
    "canvas-bg": ("#ffffff", 100.0),
    "canvas-bg-lv1": ("#f7f8ff", 98.0),
    "canvas-bg-lv2": ("#dcdde6", 90.0),
    "canvas-bg-lv2 (E)": ("#23242b", 26.0),
    "canvas-bg-lv1 (E)": ("#13141a", 20.0),
    "canvas-bg (E)": ("#07070d", 14.0),
}

DEFAULT_BACKGROUND = "canvas-bg"
FALLBACK_BACKGROUND_L = 1.0        # Lightness used when a background name is unknown
LIGHT_BACKGROUND_L = 0.5           # Backgrounds at or above this lightness are "light"

# ==========================================
# Solvers
# ==========================================

SOLVER_MIN_L = 0.01                # Lower lightness bound of the search bracket
SOLVER_MAX_L = 0.99                # Upper lightness bound of the search bracket
SOLVER_MAX_ITERATIONS = 30         # Iteration cap (also the only cancellation point)
SOLVER_MIN_BRACKET = 0.001         # Stop once the bracket is narrower than this
APCA_TOLERANCE = 1.5               # Acceptable Lc difference
WCAG_TOLERANCE = 0.1               # Acceptable ratio difference
LUMINANCE_TOLERANCE = 0.001        # Acceptable Y difference
DEFAULT_TARGET_LC = 75.0           # Default Lc for apca-target mode
DEFAULT_TARGET_RATIO = 4.5         # Default ratio for wcag-target mode

# ==========================================
# Opacity Blending
# ==========================================

BLEND_SRGB = "srgb"
BLEND_LINEAR = "linear"
BLEND_MODES = (BLEND_SRGB, BLEND_LINEAR)
DEFAULT_BLEND_MODE = BLEND_SRGB

OPACITY_MIN = 0.0
OPACITY_MAX = 100.0
OPACITY_MIN_BRACKET = 0.5          # Opacity solver stops once the bracket is this narrow
OPACITY_WCAG_TOLERANCE = 0.1
OPACITY_APCA_TOLERANCE = 1.0

# ==========================================
# Performance
# ==========================================

USE_LUT_GAMMA = True               # Interpolated gamma tables on the blending hot path
USE_COLOR_CACHE = True             # Memoize top-level color generation
LUT_PRECISION = 1024               # Table entries per gamma direction
GENERATION_CACHE_SIZE = 1000       # Entries kept before the oldest insertion is evicted
BATCH_WORKERS = 4                  # Default thread count for batch generation

# ==========================================
# Scales
# ==========================================

DEFAULT_LIGHTNESS_STEPS = [98, 96, 93, 90, 85, 80, 70, 60, 48, 40, 32, 26, 20, 17, 14]
DEFAULT_OPACITY_STEPS = [100, 90, 80, 70, 60, 50, 40, 30, 20, 15, 12, 10, 7, 5, 3, 0]

CURVE_POWER_MIN = 0.5              # Flattest allowed curve exponent
CURVE_POWER_MAX = 2.0              # Steepest allowed curve exponent
HUE_SHIFT_MAX = 180.0              # Largest hue curve rotation in degrees

# Grayscale profiles for complementary neutral scales (hue, chroma)
NEUTRAL_PROFILES = {
    "truegray": (0.0, 0.0),
    "warmgray": (40.0, 0.008),
    "coolgray": (220.0, 0.008),
    "bluegray": (240.0, 0.012),
    "plum": (280.0, 0.015),
}

CONTRAST_MODE_NAMES = (
    "standard",
    "fixed-lightness",
    "luminance-matched",
    "apca-target",
    "wcag-target",
)

# ==========================================
# CLI UI
# ==========================================

LOG_LEVELS = {
    "debug": 10,
    "info": 20,
    "success": 20,
    "warning": 30,
    "error": 40,
}
DEFAULT_LOG_LEVEL = "warning"

MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "debug": "\033[1;2;37m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

BOLD_WHITE = "\033[1;37m"
RESET = "\033[0m"
