# Session timing
DURATION_SEC = 30                  # session length (seconds)
TICK_MS = 1000                     # countdown step
REVEAL_DELAY_MS = 200              # delay between a tick and the visibility redraw

# High score
HIGH_SCORE_KEY = "HIGH_SCORE_KEY"

# Layout
TARGET_RADIUS = 50                 # px
BUTTON_WIDTH = 220
BUTTON_HEIGHT = 64
DIALOG_WIDTH = 420
DIALOG_HEIGHT = 260

# Colors
BG_COLOR = (250, 250, 252)
HUD_COLOR = (28, 27, 31)
TARGET_COLOR = (156, 39, 176)      # 0xFF9C27B0
BUTTON_COLOR = (103, 80, 164)
BUTTON_TEXT_COLOR = (255, 255, 255)
DIALOG_COLOR = (236, 230, 240)
SCRIM_COLOR = (0, 0, 0, 110)

# Fonts
HUD_FONT_SIZE = 40
TIME_FONT_SIZE = 32
TITLE_FONT_SIZE = 40
BODY_FONT_SIZE = 26
