WIDTH = 800
HEIGHT = 600
FPS = 60
VSYNC = False
MUTE = False
# Print per-click switch diagnostics and draw the per-train status lines
DEBUG = False
HIGH_SCORE_PATH = "highscore.json"
HIGH_SCORE_KEY = "highScore"

# Layout
TRACK_Y_POSITIONS = (100, 250, 400, 550)
# (x, source track, target track)
SWITCH_LAYOUT = (
    (200, 0, 1),
    (400, 1, 2),
    (600, 1, 3),  # before the stop
)
SWITCH_TOLERANCE = 5  # x distance at which a passing train takes the switch
SWITCH_LENGTH = 50
SWITCH_LINE_WIDTH = 7
# Click hit-box half extents around a switch
SWITCH_HIT_X = SWITCH_LENGTH * 1.5
SWITCH_HIT_Y = 50

STOP_TRACK = 1
STOP_X = 700
STOP_DURATION_MS = 2000
STOP_RESUME_NUDGE = 10

# Trains
TRAIN_WIDTH = 40
TRAIN_HEIGHT = 20
CAR_GAP = 5
TRAIN_SPAWN_X = -40
MIN_CARS = 1
MAX_CARS = 3
RED_TRAIN_CHANCE = 0.3
COLLISION_LANE_TOLERANCE = 10

# Difficulty
INITIAL_TRAIN_SPEED = 1.0
SPEED_STEP = 0.15
SPEED_STEP_SCORE = 10
INITIAL_SPAWN_INTERVAL_MS = 2500
SPAWN_INTERVAL_STEP_MS = 75
SPAWN_INTERVAL_STEP_SCORE = 5
MIN_SPAWN_INTERVAL_MS = 500
MIN_TRAIN_SPACING = 150
SPACING_SPEED_SCALE = 100

# Colours (RGB 0..1 for GL, RGBA 0..255 for text)
BACKGROUND_COLOR = (1.0, 1.0, 1.0, 1.0)
TRACK_COLOR = (0.25, 0.25, 0.25)
TRACK_LINE_WIDTH = 5
SWITCH_COLOR = (0.647, 0.165, 0.165)
SWITCH_ACTIVE_COLOR = (0.0, 1.0, 0.0)
HITBOX_COLOR = (1.0, 1.0, 0.0, 0.2)
STOP_COLOR = (1.0, 0.0, 0.0)
WINDOW_COLOR = (0.663, 0.663, 0.663)
TEXT_COLOR = (0, 0, 0, 255)
OVERLAY_TEXT_COLOR = (255, 255, 255, 255)
OVERLAY_OPACITY = 0.5

# Restart button (top centre)
RESTART_BUTTON_RECT = (WIDTH // 2 - 50, 10, 100, 32)
RESTART_BUTTON_COLOR = (0.85, 0.85, 0.85)

# Audio
AUDIO_SAMPLE_RATE = 44100
