# ==================================================
#   VECTORS, FORCES AND BOUNDED MOTION
# ==================================================
import math
from dataclasses import dataclass
from config import EPSILON, FRICTION


@dataclass(frozen=True)
class Vector:
    """Immutable 2D point / direction."""
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0)

    def add(self, other):
        return Vector(self.x + other.x, self.y + other.y)

    def sub(self, other):
        return Vector(self.x - other.x, self.y - other.y)

    def mult(self, k):
        return Vector(self.x * k, self.y * k)

    @property
    def size(self):
        """Magnitude."""
        return math.hypot(self.x, self.y)

    def dist(self, other):
        return math.hypot(self.x - other.x, self.y - other.y)

    def sized(self, magnitude):
        """Same direction, given magnitude. The zero vector stays zero."""
        length = self.size
        if length == 0:
            return Vector.zero()
        return self.mult(magnitude / length)


@dataclass(frozen=True)
class Force:
    """A force acting on a single life for one tick."""
    vector: Vector

    @classmethod
    def zero(cls):
        return cls(Vector.zero())

    def add(self, other):
        return Force(self.vector.add(other.vector))

    def acceleration_to(self, mass):
        return self.vector.mult(1 / max(mass, EPSILON))

    def consumed_energy_with(self, mass):
        """Kinetic cost of the acceleration this force gives to `mass`."""
        acceleration = self.acceleration_to(mass).size
        return 0.5 * mass * acceleration * acceleration


def bounded_update(position, velocity, force, mass, life_size, container_size,
                   center=Vector.zero(), friction=FRICTION):
    """Move one step inside a circular container.

    The tentative position is `position + velocity`. If it leaves the circle of
    radius `(container_size - life_size) / 2` around `center` it is clamped onto
    that circle and the velocity drops to zero. Otherwise the velocity is damped
    by `friction` and the force's acceleration is added.

    Returns (new_position, new_velocity).
    """
    acceleration = force.acceleration_to(mass)
    next_position = position.add(velocity)
    radius = max((container_size - life_size) / 2, 0.0)
    offset = next_position.sub(center)
    if offset.size > radius:
        return center.add(offset.sized(radius)), Vector.zero()
    return next_position, velocity.mult(friction).add(acceleration)
