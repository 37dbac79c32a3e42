# Window geometry for the graphical frontend.
WINDOW_WIDTH = 640
WINDOW_HEIGHT = 640
WINDOW_TITLE = "Skirmish"

# Grid footprint relative to the window (percentage of width/height).
GRID_MAX_WIDTH_PCT = 0.90
GRID_MAX_HEIGHT_PCT = 0.80
# Space under the grid reserved for the status line.
BOTTOM_MARGIN = 60
MIN_TILE_SIZE = 20

# Default player sheet when nobody is prompted (window mode, scripted runs).
DEFAULT_PLAYER_NAME = "Player"
DEFAULT_PLAYER_HEALTH = 100
DEFAULT_PLAYER_ARMOR = 0
DEFAULT_PLAYER_DAMAGE = 1
