"""
game_settings.py
----------------
Centralized constants for all game systems.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 960
    HEIGHT: int = 420
    FPS: int = 60
    CAPTION: str = "Corgi Run"


# ===========================================================
# Ground
# ===========================================================

class Ground:
    """Terrain strip at the bottom of the field."""
    HEIGHT: int = 60
    Y: int = Display.HEIGHT - HEIGHT


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Physics constants and frame timing."""
    GRAVITY: float = 1800.0
    JUMP_POWER: float = 750.0
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Player
# ===========================================================

class PlayerConfig:
    """Player geometry and jump pool."""
    X: float = 150.0
    BASE_WIDTH: float = 110.0
    BASE_HEIGHT: float = 90.0
    SLIDE_SCALE: float = 0.5
    MAX_JUMPS: int = 2
    MAX_LIVES: int = 3
    HITBOX_INSET: float = 10.0


# ===========================================================
# Difficulty
# ===========================================================

class Difficulty:
    """Scroll speed progression."""
    INITIAL_SPEED: float = 260.0
    SPEED_INCREASE_PER_SEC: float = 15.0


# ===========================================================
# Spawning
# ===========================================================

class Spawn:
    """Obstacle spawner timing and placement."""
    INTERVAL_MIN: float = 1.2
    INTERVAL_MAX: float = 2.0
    HEART_CHANCE: float = 0.18
    X_OFFSET: float = 40.0
    HEART_RISE_MIN: float = 30.0
    HEART_RISE_MAX: float = 110.0


# ===========================================================
# Scoring
# ===========================================================

class Scoring:
    """Score rewards and history limits."""
    PASS_REWARD: int = 100
    HISTORY_LIMIT: int = 10


# ===========================================================
# Dust Trail
# ===========================================================

class Dust:
    """Cosmetic dust particles kicked up while running."""
    EMIT_INTERVAL: float = 0.04
    OFFSET_X: float = 20.0
    OFFSET_Y: float = 5.0
    SPEED_FACTOR: float = 0.6
    VY_MIN: float = -30.0
    VY_MAX: float = -10.0
    RADIUS_MIN: float = 2.0
    RADIUS_MAX: float = 4.0
    START_ALPHA: float = 0.6
    FADE_RATE: float = 0.9
    GRAVITY: float = 220.0


# ===========================================================
# Bounds & Margins
# ===========================================================

class Bounds:
    """Margin values for entity lifecycle management."""
    OBSTACLE_CLEANUP_X: float = -50.0


# ===========================================================
# Colors
# ===========================================================

class Colors:
    """Palette used by the shape renderer and HUD."""
    SKY_TOP = (191, 233, 255)
    SKY_BOTTOM = (230, 247, 255)
    GRASS_TOP = (183, 228, 160)
    GRASS_BOTTOM = (138, 203, 111)
    DUST = (120, 80, 40)

    CORGI_BODY = (232, 150, 60)
    CORGI_BELLY = (255, 240, 220)
    CORGI_EYE = (30, 30, 30)

    LOG = (139, 94, 52)
    LOG_RING = (196, 148, 98)
    BIRD = (70, 90, 140)
    BIRD_BEAK = (250, 190, 40)
    HEART = (230, 60, 90)

    TEXT = (40, 40, 40)
    PANEL = (255, 255, 255, 210)


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    SHOW_FPS: bool = False
    HITBOX_VISIBLE: bool = False
    HITBOX_LINE_WIDTH: int = 2
