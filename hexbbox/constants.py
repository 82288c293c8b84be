"""
Numeric constants shared by the bbox algebra and the estimators.

Values follow the H3 indexing library so results match its C core.
"""

from __future__ import annotations

import math

# ── Angles ────────────────────────────────────────────────────────
M_PI = math.pi
M_PI_2 = math.pi / 2.0
M_2PI = 2.0 * math.pi
M_PI_180 = math.pi / 180.0
M_180_PI = 180.0 / math.pi

# Almost-equal tolerance: 1e-9 degrees, expressed in radians.
EPSILON_DEG = 0.000000001
EPSILON_RAD = EPSILON_DEG * M_PI_180

# ── Indexing system ───────────────────────────────────────────────
# Finest H3 resolution; valid resolutions are 0..MAX_RES inclusive.
MAX_RES = 15

# Area of a regular hexagon of circumradius r is (3√3 / 2) · r².
HEXAGON_AREA_COEFF = 3.0 * math.sqrt(3.0) / 2.0
