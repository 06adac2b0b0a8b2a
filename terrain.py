# ==================================================
#   TERRAIN (force field + friction under the arena)
# ==================================================
from config import TERRAIN_FRICTION
from utils import clamp
from physics import Force


class Terrain:
    """Flat ground: no force, no extra friction."""
    def __init__(self, size):
        self.size = size

    def friction_at(self, position):
        return 1.0  # 0 stops everything, 1 frictionless

    def force_at(self, position):
        return Force.zero()


class GravityTerrain(Terrain):
    """Ground pulled toward `gravity_center`, sticky near the edges."""
    def __init__(self, size, gravity_center, gravity, friction=TERRAIN_FRICTION,
                 immobilized_width=0):
        super().__init__(size)
        self.gravity_center = gravity_center
        self.gravity = gravity
        self.friction = friction
        self.immobilized_width = immobilized_width

    def friction_at(self, position):
        w = self.immobilized_width
        if w > 0:
            if position.x < w:
                return clamp(position.x / w, 0.0, 1.0)
            if position.x > self.size - w:
                return clamp((self.size - position.x) / w, 0.0, 1.0)
            if position.y < w:
                return clamp(position.y / w, 0.0, 1.0)
            if position.y > self.size - w:
                return clamp((self.size - position.y) / w, 0.0, 1.0)
        return self.friction

    def force_at(self, position):
        if self.gravity_center is None or self.gravity == 0:
            return Force.zero()
        # floored so nothing falls into a singularity at the center
        distance = max(self.gravity_center.dist(position), abs(self.gravity) / 10)
        magnitude = self.gravity / (distance * distance)
        return Force(self.gravity_center.sub(position).sized(magnitude))
