"""
Simulation tuning knobs.
"""

# Environment
WORLD_W, WORLD_H = 800, 600
SCALE_FACTOR = 1.0  # simulation units -> pixels

# Population controls
INITIAL_LIFE_FORMS = 10
INITIAL_FOOD_SOURCES = 50
MAX_LIFE_FORMS = 200
MAX_FOOD_SOURCES = 100

# Collision radii (also used for drawing)
LIFE_FORM_RADIUS = 8.0
FOOD_RADIUS = 3.0

# Energy + life
MAX_ENERGY = 100.0
REPRODUCTION_THRESHOLD = 80.0
ENERGY_LOSS_PER_STEP = 0.05
ENERGY_GAIN_FROM_FOOD = 20.0

# Movement
MAX_SPEED = 1.5  # simulation units per tick
WANDER_CHANCE = 0.01  # per tick, only while no food exists

# Food field
FOOD_RESPAWN_CHANCE = 0.8

# Mutation
MUTATION_RANGE = 0.2
SPEED_FACTOR_RANGE = (0.5, 2.0)
CHILD_SPAWN_JITTER = 5.0

# Runtime pacing
FPS = 100  # ~10 ms per frame
STATS_EVERY_TICKS = 100
