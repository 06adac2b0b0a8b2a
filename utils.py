# ==================================================
#   UTILITY FUNCTIONS
# ==================================================
import random
from config import WORLD_SIZE


def clamp(x, lo, hi):
    """Clamp value between lo and hi."""
    return max(lo, min(hi, x))


def random_between(high, low=0.0):
    """Uniform random number in [low, high)."""
    return low + (high - low) * random.random()


def rand_point(radius=WORLD_SIZE / 2, margin=20):
    """Random (x, y) inside the circular arena centered at (radius, radius)."""
    reach = max(radius - margin, 0.0)
    while True:
        x = random.uniform(-reach, reach)
        y = random.uniform(-reach, reach)
        if x * x + y * y <= reach * reach:
            return radius + x, radius + y
