"""
Constants for Motion Lab

Screen geometry, policy thresholds, keymap and palette shared by all modes.
The numeric policy values are fixed; the game tuning values are only
defaults for AppConfig.
"""

import numpy as np

# Logical screen (landscape device display)
SCREEN_WIDTH = 240
SCREEN_HEIGHT = 135
CENTER_X = 120
CENTER_Y = 67

# Raw line protocol scale factors (MotionCal "Raw:" counts)
G_PER_COUNT = np.float32(0.0001220703125)  # 1/8192 - accelerometer
DEG_PER_SEC_PER_COUNT = np.float32(0.0625)  # 1/16 - gyroscope

# Projection
CAMERA_DEPTH = 4.0
ZOOM_MIN = 0.0
ZOOM_MAX = 200.0
ZOOM_DEFAULT = 90.0
ZOOM_RESET = 100.0
ZOOM_STEP = 2.0

# Splash
SPLASH_DURATION_MS = 2000

# Serial IMU
SERIAL_RECONNECT_S = 1.0

# G-force peak tracking
PEAK_THRESHOLD_G = 1.5
PEAK_DECAY_MS = 3000
PREFS_NAMESPACE = "motion-lab"
PREFS_KEY_HIGH_G = "highG"

# Tilt game
GAME_SPEED = 4.0
GAME_GOAL_RADIUS = 12.0
GAME_BALL_START = (120.0, 67.0)
GAME_BOUNDS = (10.0, 10.0, 230.0, 125.0)  # min_x, min_y, max_x, max_y
GAME_GOAL_ORIGIN = (20, 20)
GAME_GOAL_SPAN = (200, 100)
GAME_FLASH_MS = 150

# Graph
GRAPH_CAPACITY = 240
GRAPH_PIXELS_PER_G = 40.0

# Level
LEVEL_RADIUS = 60
LEVEL_BUBBLE_RADIUS = 12

# Keys
KEY_BACKSPACE = "BACKSPACE"
KEY_DELETE = "DELETE"
EXIT_KEYS = (KEY_BACKSPACE, KEY_DELETE)
ZOOM_IN_KEYS = ("+", "=")
ZOOM_OUT_KEYS = ("-", "_")
ZOOM_RESET_KEY = "0"
PEAK_RESET_KEY = "r"

# RGB palette
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
YELLOW = (255, 255, 0)
DARKGREY = (128, 128, 128)
FOOTER_GREY = (40, 40, 40)
GRID_BLUE = (0, 100, 200)
RAW_RULE_GREEN = (0, 100, 0)
ICE_BLUE = (180, 220, 255)
ICE_TEXT = (0, 50, 150)
ICE_HOLE = (0, 0, 100)
