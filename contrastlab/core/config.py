#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 1024


# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# Standard Scaling Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
PERCENT_MAX = 100.0                # Saturation / lightness scale
DEG_180 = 180.0                    # Half circle degrees
DEG_360 = 360.0                    # Full circle degrees
EXP_2 = 2                          # Square power
EXP_7 = 7                          # Power for CIEDE2000 chroma calculation

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB

# XYZ D65 Reference White (Source: ASTM E308-01 / CIE D65)
D65_X = 95.047                     # X coordinate for D65 illuminant (2-degree observer)
D65_Y = 100.0                      # Y coordinate (Luminance) for D65 illuminant
D65_Z = 108.883                    # Z coordinate for D65 illuminant
XYZ_SCALING = 100.0                # Linear RGB to XYZ percentage scale

# sRGB to XYZ Matrix (Source: sRGB D65, four-digit form)
M_SRGB_XYZ_X = (0.4124, 0.3576, 0.1805)  # Coefficients for X coordinate calculation
M_SRGB_XYZ_Y = (0.2126, 0.7152, 0.0722)  # Coefficients for Y (Luminance) calculation
M_SRGB_XYZ_Z = (0.0193, 0.1192, 0.9505)  # Coefficients for Z coordinate calculation

# CIELAB Constants (Source: CIE 15:2004)
LAB_E = 0.008856                   # Threshold for switching between linear and power functions
LAB_K = 7.787                      # Slope of the linear segment for low luminance values
LAB_OFFSET = 16.0 / 116.0          # Constant offset for normalization in XYZ to Lab conversion
LAB_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LAB_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LAB_A_MULT = 500.0                 # Multiplier for 'a*' (green-red) channel calculation
LAB_B_MULT = 200.0                 # Multiplier for 'b*' (blue-yellow) channel calculation
LAB_POW = 1.0 / 3.0                # Cube root exponent

# CIE94 Constants (Source: CIE 116-1995, graphic arts)
CIE94_K1 = 0.045                   # Chroma weighting coefficient for S_C
CIE94_K2 = 0.015                   # Hue weighting coefficient for S_H

# CIEDE2000 Constants (Source: Sharma, G., Wu, W., & Dalal, E. N. (2005))
POW7_25 = 6103515625.0             # Constant for chroma normalization (25^7)
G_FACTOR = 0.5                     # Axial adjustment factor for neutral gray
T_K1 = 0.17                        # First T-factor coefficient for hue weighting
T_K2 = 0.24                        # Second T-factor coefficient for hue weighting
T_K3 = 0.32                        # Third T-factor coefficient for hue weighting
T_K4 = 0.20                        # Fourth T-factor coefficient for hue weighting
T_OFFSET_1 = 30.0                  # Primary phase offset for hue angle T-factor
T_OFFSET_2 = 6.0                   # Secondary phase offset for hue angle T-factor
T_OFFSET_3 = 63.0                  # Tertiary phase offset for hue angle T-factor
T_MUL_3 = 3.0                      # Multiplier for tertiary hue angle calculation
T_MUL_4 = 4.0                      # Multiplier for quaternary hue angle calculation
L_OFFSET = 50.0                    # Lightness midpoint for S_L weighting function
S_L_K = 0.015                      # Lightness weighting coefficient for S_L
S_C_K = 0.045                      # Chroma weighting coefficient for S_C
S_H_K = 0.015                      # Hue weighting coefficient for S_H
S_L_DIV = 20.0                     # Divisor term for S_L weighting calculation
RT_D30 = 30.0                      # Degree factor for rotation term (R_T) calculation
RT_H_OFFSET = 275.0                # Hue offset for blue region in R_T calculation
RT_DIV = 25.0                      # Hue divisor for blue region in R_T calculation
K_FACTORS = (1.0, 1.0, 1.0)        # Parametric weighting factors (k_L, k_C, k_H)

# ==========================================
# WCAG Contrast
# ==========================================

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_A = 3.0                       # Level A, normal and large text
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_LARGE = 4.5               # Enhanced contrast for large text (Level AAA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_MIN_RATIO = 1.0               # Lower bound for WCAG calculation
WCAG_MAX_RATIO = 21.0              # Upper bound for WCAG calculation (Black on White)
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula
CONTRAST_CROSSOVER_LUMINANCE = 0.179  # Luminance where black and white give equal contrast

# (normal text, large text) per level
WCAG_REQUIREMENTS = {
    "A": (WCAG_A, WCAG_A),
    "AA": (WCAG_AA_NORMAL, WCAG_AA_LARGE),
    "AAA": (WCAG_AAA_NORMAL, WCAG_AAA_LARGE),
}

# ==========================================
# Adjustment & Distinction Constants
# ==========================================

# Contrast adjustment search
ADJUST_DEFAULT_TARGET = 4.5        # Default target ratio (AA normal text)
ADJUST_LIGHTNESS_STEP = 5          # HSL lightness units per iteration
ADJUST_MAX_ITERATIONS = 20         # Hard bound on the search loop
ADJUST_SATURATION_STEP = 10        # Saturation drop once lightness saturates
ADJUST_LIGHTNESS_CEIL = 95         # Lightening saturates at this lightness
ADJUST_LIGHTNESS_FLOOR = 5         # Darkening saturates at this lightness

# Distinction recommendations
DISTINCT_HUE_SHIFT = 30            # Degrees added to the hue of the replaced color
DISTINCT_SAT_MIN = 50              # Saturation below this gets boosted
DISTINCT_SAT_BOOST = 20            # Saturation boost amount
DISTINCT_LIGHT_LOW = 30            # Lower edge of the preferred lightness band
DISTINCT_LIGHT_HIGH = 70           # Upper edge of the preferred lightness band
DISTINCT_LIGHT_PUSH = 20           # Lightness push toward the band

# ==========================================
# Default Options
# ==========================================

DEFAULT_WCAG_LEVEL = "AA"
DEFAULT_LARGE_TEXT = False
DEFAULT_INCLUDE_RECOMMENDATIONS = True

DEFAULT_MINIMUM_DISTANCE = 25.0
DEFAULT_ALGORITHM = "CIEDE2000"
DEFAULT_GROUP_SIMILAR_COLORS = True

# Result messages
ERR_INVALID_FOREGROUND = "Invalid foreground color"
ERR_INVALID_BACKGROUND = "Invalid background color"
ERR_TOO_FEW_COLORS = "At least two valid colors are required"

# ==========================================
# CLI UI
# ==========================================

MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

STDOUT_LEVELS = ("info", "success")   # Log levels printed to stdout

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"

PREVIEW_LABEL_WIDTH = 18             # Column where swatches start
PREVIEW_BLOCK_WIDTH = 16             # Swatch width in cells

# ==========================================
# CLI Input Limits
# ==========================================

MIN_DISTANCE_MAX = 200.0             # Upper clamp for --minimum-distance
