# ==================================================
#   WORLD ENTITIES
# ==================================================
from config import LIFE_SIZE, DECORATIVE_MASS_SCALE, RESOURCE_MASS
from physics import Vector, Force
from gene import Gene


class Life:
    """Anything living in the arena: position, velocity, mass and size.

    Every variant answers the same contract:
      next()    -> (Force, offspring list) for this tick
      eat(x)    -> lives released by the prey, to re-admit into the population
      eaten()   -> lives this one releases once consumed
    """
    can_hunt = False  # may start predation in the tick driver

    def __init__(self, position, size=LIFE_SIZE, mass=None):
        if size < 0:
            raise ValueError("size must be >= 0, got %r" % size)
        self.position = position
        self.velocity = Vector.zero()
        self.size = size
        radius = size / 2
        self.mass = radius * radius if mass is None else mass

    @property
    def is_alive(self):
        return True

    @property
    def is_depleted(self):
        """Whether an evicting scope should drop this life."""
        return False

    @property
    def energy(self):
        return 0.0

    @property
    def gene(self):
        return Gene.empty()

    def next(self):
        return Force.zero(), []

    def eat(self, other):
        return []

    def eaten(self):
        return []

    def is_colliding_with(self, other):
        """Circles of diameter `size` overlap."""
        return self.position.dist(other.position) < (self.size + other.size) / 2

    def __repr__(self):
        return "%s(x=%.1f, y=%.1f, size=%.1f, energy=%.2f)" % (
            type(self).__name__, self.position.x, self.position.y, self.size, self.energy)


class Decorative(Life):
    """Passive scenery. Drifts, never eats, never leaves."""
    def __init__(self, position, size):
        super().__init__(position, size)
        self.mass *= DECORATIVE_MASS_SCALE


class Resource(Life):
    """Immobile food with a fixed gene and energy."""
    def __init__(self, position, gene, size, energy):
        if energy < 0:
            raise ValueError("energy must be >= 0, got %r" % energy)
        super().__init__(position, size, mass=RESOURCE_MASS)
        self._gene = gene
        self._energy = energy

    @property
    def gene(self):
        return self._gene

    @property
    def energy(self):
        return self._energy

    @property
    def is_alive(self):
        # never acts on its own, only gets eaten
        return False

    @property
    def is_depleted(self):
        return self._energy <= 0

    def eaten(self):
        self._energy = 0.0
        return []
