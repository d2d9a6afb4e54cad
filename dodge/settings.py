# dodge settings — every tuning value lives here

# --- window / layout ---
WIDTH, HEIGHT = 800, 560
FPS = 60
TOOLBAR_HEIGHT = 48
MIN_WINDOW_W, MIN_WINDOW_H = 240, 160
PIXEL_RATIO = 1.0  # device pixels per layout pixel

# --- player ---
PLAYER_WIDTH, PLAYER_HEIGHT = 34, 34
PLAYER_SPEED = 340  # px/s
PLAYER_CLAMP_MARGIN = 4  # kept from each side edge while moving
PLAYER_START_MARGIN = 8  # minimum x when recentred
PLAYER_FLOOR_GAP = 8  # gap between player and bottom edge

# --- obstacles ---
OBSTACLE_SIZE_MIN, OBSTACLE_SIZE_RANGE = 28, 30  # size in [28, 58)
OBSTACLE_SPEED_BASE, OBSTACLE_SPEED_RANGE = 160, 200  # px/s
OBSTACLE_SPEED_PER_SEC = 10  # extra px/s per second survived
PRUNE_MARGIN = 50  # px below the area before an obstacle is dropped

# --- difficulty curve ---
SPAWN_INTERVAL_START = 0.8  # seconds between spawns at t=0
SPAWN_INTERVAL_FLOOR = 0.25
SPAWN_INTERVAL_RAMP = 25.0  # seconds of play per 1.0s of interval removed

# --- colors ---
BG_COLOR = (255, 255, 255)
PLAYER_COLOR = (0x25, 0x63, 0xEB)
OBSTACLE_COLOR = (0xEF, 0x44, 0x44)
SCRIM_COLOR = (0, 0, 0)
SCRIM_ALPHA = 115  # ~0.45
OVERLAY_TEXT_COLOR = (255, 255, 255)
TOOLBAR_COLOR = (243, 244, 246)
BUTTON_COLOR = (37, 99, 235)
BUTTON_TEXT_COLOR = (255, 255, 255)
READOUT_COLOR = (17, 24, 39)

# --- text ---
FONT_PATH = None  # None -> pygame's bundled default font
OVERLAY_FONT_SIZE = 26
TOOLBAR_FONT_SIZE = 22

# --- diagnostics ---
VERBOSE = False
