# ==================================================
#   SIMULATION CONSTANTS
# ==================================================

# --- window / arena ---
WIDTH, HEIGHT = 720, 720
WORLD_SIZE = 700  # diameter of the circular arena
FPS = 60
LOG_LEVEL = "INFO"
STATS_EVERY = 300  # ticks between stats log lines

# --- physics ---
FRICTION = 0.85
JITTER_FORCE = 0.1  # random force range per axis, symmetric
EPSILON = 1e-6

# --- energy / reproduction ---
ENERGY_CONSUMPTION_RATE = 1 / 10
MUTATION_RATE = 0.05

# --- predation ---
EAT_THRESHOLD_MIN = 0.9
EAT_THRESHOLD_MAX = 1.0
PREDATION_DIFFERENCE = 0.25  # gene difference a predator needs to eat
GENE_LENGTH = 12

# --- variants ---
LIFE_SIZE = 3
FORAGER_MASS = 0.5
RESOURCE_MASS = 0.5
DECORATIVE_MASS_SCALE = 1 / 100
COLONY_DEFAULT_SIZE = 10
COLONY_SIZE_FACTOR = 6

# --- terrain ---
GRAVITY = 0.0
TERRAIN_FRICTION = 1.0
IMMOBILIZED_WIDTH = 20

# --- initial population ---
NUM_FORAGERS = 60
NUM_RESOURCES = 120
NUM_DECORATIVES = 10
NUM_COLONIES = 4
COLONY_MEMBERS = 5
FORAGER_SIZE = 4
FORAGER_ENERGY = 20
RESOURCE_SIZE = 3
RESOURCE_ENERGY = 8
DECORATIVE_SIZE = 14

# --- colors ---
BACKGROUND = (250, 248, 255)
ARENA_BORDER = (207, 196, 251)
DECORATIVE_COLOR = (86, 51, 245)
STARVING_COLOR = (255, 0, 0)
GRAVITY_COLOR = (120, 100, 220)
HUD_COLOR = (40, 30, 70)
INFO_BG = (245, 240, 255)
INFO_TEXT = (30, 20, 60)
PAUSE_OVERLAY = (0, 0, 0, 90)
