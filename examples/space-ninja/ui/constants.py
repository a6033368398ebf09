"""Layout constants and color definitions."""

# Timing
FPS = 60
TPS = 60

# Layout dimensions (match GameConfig defaults)
SCREEN_W = 1200
SCREEN_H = 800
NINJA_SIZE = 64
STICK_CORNER = 7

# Background
BG_TOP = (26, 26, 46)
BG_MID = (22, 33, 62)
BG_BOTTOM = (185, 155, 183)
STAR_COUNT = 100
GLOW_COLOR = (81, 237, 200)

# Text
TEXT_COLOR = (255, 255, 255)
TEXT_DIM = (200, 200, 200)
GRADE_COLOR = (255, 255, 0)
TITLE_RED = (228, 35, 52)

# Overlays (RGBA)
START_OVERLAY = (0, 0, 0, 204)
GAME_OVER_OVERLAY = (0, 0, 0, 230)

# Stick decoration per style tag
STYLE_ACCENTS: dict[int, tuple[int, int, int]] = {
    0: (255, 255, 255),  # bubbles
    1: (255, 255, 0),    # triangles
    2: (0, 255, 255),    # blocks
}
DECOR_COUNT = {0: 12, 1: 10, 2: 8}

# Pulse effects: peak horizontal scale, duration in seconds
PULSE_STICK = (1.1, 0.2)
PULSE_NINJA = (1.2, 0.2)
PULSE_SCORE = (1.3, 0.2)
