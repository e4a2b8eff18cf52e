"""
constants.py: Centralized configuration for game, scoring and network settings.
"""

# -------- Game Identifiers --------
FLAPPY_GAME_ID = "flappy-gator"
PAC_GAME_ID = "pac-gator"          # Maze game shares the score service
DEFAULT_PLAYER_NAME = "Player"

# -------- Canvas Config --------
CANVAS_WIDTH = 400
CANVAS_HEIGHT = 600
TARGET_FPS = 60
MAX_FRAME_DELTA = 3.0              # Frames; caps catch-up after a stall

# -------- Physics Config (Pixels / Frame) --------
GRAVITY = 0.6                      # Added to velocity every frame
FLAP_STRENGTH = -10.0              # Velocity after a flap (overwrite)
TERMINAL_VELOCITY = 12.0           # Max downward velocity from gravity
ROTATION_FACTOR = 3.0              # Degrees of tilt per px/frame of velocity
MAX_ROTATION = 45.0

# -------- Gator Config --------
GATOR_X = 100                      # Fixed gator X position
GATOR_SIZE = 40
FLAP_ANIMATION_FRAMES = 6          # ~100ms at 60fps

# -------- Collision Config --------
GATOR_HITBOX_RADIUS = 15           # Smaller than the sprite on purpose

# -------- Pipe Config --------
PIPE_WIDTH = 60
PIPE_GAP = 150
PIPE_SPEED = 2.0                   # Horizontal speed (pixels/frame)
PIPE_SPAWN_INTERVAL = 120          # Frames (2 seconds at 60fps)
MIN_GAP_Y = 100                    # Gap center bounds
GAP_Y_BOTTOM_MARGIN = 250          # max gap center = canvas height - margin

# -------- Scoring Config --------
POINTS_PER_PIPE = 1

# -------- State Machine --------
STATE_HISTORY_LENGTH = 10

# -------- Network Config --------
DEFAULT_API_URL = "http://localhost:4567"
API_URL_ENV = "FLAPPY_API_URL"
REQUEST_TIMEOUT = 2.0              # seconds

# -------- Audio Config --------
DEFAULT_VOLUME = 0.3
SOUND_VOLUMES = {
    "flap": 0.5,
    "score": 0.4,
    "collision": 0.7,
}

# -------- Colors --------
BACKGROUND_COLOR = (135, 206, 235)
PIPE_COLOR = (92, 181, 77)
PIPE_EDGE_COLOR = (60, 130, 50)
GATOR_COLOR = (46, 139, 87)
GATOR_BELLY_COLOR = (189, 220, 140)
GROUND_COLOR = (222, 184, 135)
TEXT_COLOR = (255, 255, 255)
OVERLAY_COLOR = (0, 0, 0, 128)
