"""Simulation tuning constants.

All physics values are per tick (one display refresh), not per second.
"""

# Background / compositing
BACKGROUND_COLOR = (15, 23, 42)
FADE_ALPHA = 0.2  # opacity of the per-tick background overlay

# Ambient field
AMBIENT_DOT_COUNT = 150
AMBIENT_SIZE_MIN = 0.5
AMBIENT_SIZE_MAX = 2.0
AMBIENT_DRIFT_MAX = 0.2  # per-axis drift magnitude
AMBIENT_FADE_MIN = 0.005
AMBIENT_FADE_MAX = 0.02

# Projectiles
PROJECTILE_BASE_SPEED = 2.0
PROJECTILE_ACCELERATION = 1.05  # speed multiplier per tick, uncapped
PROJECTILE_TRAIL_LENGTH = 3
PROJECTILE_BRIGHTNESS_MIN = 50
PROJECTILE_BRIGHTNESS_MAX = 70
LAUNCH_CHANCE = 0.05  # per-tick launch probability while celebrating
LAUNCH_MARGIN_X = 100  # targets keep this far from the side edges
LAUNCH_MIN_Y = 50  # highest target row (distance from top)

# Sparks
SPARK_BURST_COUNT = 50
SPARK_SPEED_MIN = 1
SPARK_SPEED_MAX = 10
SPARK_FRICTION = 0.95
SPARK_GRAVITY = 1.0  # additive downward pixel offset per tick
SPARK_BRIGHTNESS_MIN = 50
SPARK_BRIGHTNESS_MAX = 80
SPARK_DECAY_MIN = 0.015
SPARK_DECAY_MAX = 0.03
SPARK_RADIUS = 2

# Interaction
INTENSIFY_BURST = 8  # projectiles launched by one intensify action
INTENSIFY_STAGGER_TICKS = 6  # ~100 ms at 60 Hz
REVEAL_DELAY_SECONDS = 0.8  # countdown -> celebration hand-over
GREETING_LINE_STAGGER = 0.3  # seconds between revealed greeting lines

__all__ = [name for name in globals().keys() if name.isupper()]
