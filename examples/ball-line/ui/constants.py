"""Layout constants and color definitions."""

# Timing
FPS = 60
TPS = 60
CYCLE_MS = 2500

# Layout dimensions
SCREEN_W = 760
SCREEN_H = 240
TAB_H = 32
STATUS_H = 36
PAGE_PADDING = 24

# Connector polygon resolution (samples per bezier curve)
CURVE_SEGMENTS = 16

# Colors
BG_COLOR = (20, 20, 30)
PAGE_BG = (245, 245, 250)
TAB_BG = (30, 30, 45)
TAB_ACTIVE_BG = (60, 60, 90)
TAB_BORDER = (50, 50, 70)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
RUNNING_COLOR = (100, 255, 100)
