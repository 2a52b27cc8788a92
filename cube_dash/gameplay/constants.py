"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# MAZE
# =============================================================================
MAZE_ROWS = 30                # cells
MAZE_COLS = 40                # cells
MIN_MAZE_SIZE = 3             # smallest grid that still has a spawn pocket
CORRIDOR_CHANCE = 0.7         # chance each lattice room opens right / down
SPAWN_POCKET = ((1, 1), (2, 1), (1, 2))  # (x, y) cells forced to PATH

# =============================================================================
# PLAYER (all distances in cell-units, timing in frames)
# =============================================================================
PLAYER_START = (1.0, 1.0)
PLAYER_STEP = 0.1             # cells per frame, per held axis
PLAYER_MARGIN = 0.4           # half-width of the collision square
START_LIVES = 3
START_LEVEL = 1

# =============================================================================
# ENEMIES
# =============================================================================
ENEMY_STEP = 0.05             # cells per frame
ENEMY_INITIAL_TIMER = 30.0    # first decision in [0, 30)
ENEMY_TIMER_BASE = 20.0       # later decisions in [20, 40)
ENEMY_TIMER_SPREAD = 20.0
ENEMY_CHASE_CHANCE = 0.3
ENEMY_MIN_SPAWN_DISTANCE = 5  # Manhattan distance from the player start

# =============================================================================
# SPAWNING
# =============================================================================
COINS_BASE = 15
COINS_PER_LEVEL = 5
POWER_UPS_BASE = 2
ENEMIES_BASE = 2
MAX_SPAWN_ATTEMPTS = 10000    # draws per item before giving up
MAX_MAZE_ATTEMPTS = 10        # maze regenerations before giving up

# =============================================================================
# COLLISIONS AND SCORING
# =============================================================================
PICKUP_RANGE = 0.5            # per-axis proximity for coins and power-ups
ENEMY_CONTACT_RANGE = 0.6     # per-axis proximity for enemies
COIN_SCORE = 10
POWER_UP_SCORE = 50
ENEMY_SCORE = 100
POWER_UP_DURATION = 300       # frames (5 seconds at 60fps)

# =============================================================================
# DRAWING (pixels)
# =============================================================================
TILE_SIZE = 20
PLAYER_SIZE = 18
PLAYER_OFFSET = 1
ENEMY_SIZE = 16
ENEMY_OFFSET = 2
COIN_SIZE = 8
COIN_OFFSET = 6
POWER_UP_SIZE = 12
POWER_UP_OFFSET = 4

COLOR_WALL = (68, 68, 68)
COLOR_COIN = (255, 215, 0)
COLOR_POWER_UP = (0, 255, 0)
COLOR_ENEMY = (255, 68, 68)
COLOR_ENEMY_FRIGHTENED = (0, 136, 255)
COLOR_PLAYER = (0, 170, 255)
COLOR_PLAYER_EMPOWERED = (255, 255, 0)
COLOR_OVERLAY = (0, 0, 0, 178)
COLOR_TEXT = (255, 255, 255)

TITLE_FONT_SIZE = 48
SUBTITLE_FONT_SIZE = 24
SUBTITLE_GAP = 50

# =============================================================================
# LOGICAL KEYS (polled from the input source)
# =============================================================================
KEY_MOVE_LEFT = "MoveLeft"
KEY_MOVE_RIGHT = "MoveRight"
KEY_MOVE_UP = "MoveUp"
KEY_MOVE_DOWN = "MoveDown"
KEY_START = "Start"
