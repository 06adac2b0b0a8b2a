# ==================================================
#   COLONY (lives inside a life)
# ==================================================
import logging
import math
from config import JITTER_FORCE, COLONY_DEFAULT_SIZE, COLONY_SIZE_FACTOR
from utils import random_between
from physics import Vector, Force, bounded_update
from gene import Gene
from entities import Life
from simulation import step_lives

logger = logging.getLogger("lifegame.colony")


class Colony(Life):
    """Composite life running its own population inside its walls.

    Member positions are relative to the colony's center. Seen from outside a
    colony is one life: its size grows with its members, its gene is the
    first member's and it is alive while any member is.
    """
    can_hunt = True

    def __init__(self, position, lives):
        self.contained_lives = list(lives)
        # fixed at construction, absorbed prey does not add to it
        mass = sum(life.mass for life in self.contained_lives)
        super().__init__(position, COLONY_DEFAULT_SIZE, mass=mass)
        self._gene = Gene.empty()
        self._refresh()

    @property
    def gene(self):
        return self._gene

    @property
    def is_alive(self):
        return any(life.is_alive for life in self.contained_lives)

    @property
    def is_depleted(self):
        return not self.is_alive

    @property
    def total_energy(self):
        """Energy held by every member, nested colonies included."""
        return sum(getattr(life, "total_energy", life.energy) for life in self.contained_lives)

    def next(self):
        if not self.is_alive:
            return Force.zero(), self.eaten()

        self.contained_lives = step_lives(self.contained_lives, self._move_member)
        self._refresh()

        vx = random_between(JITTER_FORCE, -JITTER_FORCE)
        vy = random_between(JITTER_FORCE, -JITTER_FORCE)
        return Force(Vector(vx, vy)), []

    def eat(self, other):
        other.position = other.position.sub(self.position)
        self._move_member(other, Force.zero())
        self.contained_lives.append(other)
        self._refresh()
        return []

    def eaten(self):
        """Release every member into the parent's coordinates."""
        released = self.contained_lives
        for life in released:
            life.position = life.position.add(self.position)
        self.contained_lives = []
        self._refresh()
        logger.debug("colony at (%.1f, %.1f) released %d lives",
                     self.position.x, self.position.y, len(released))
        return released

    def _move_member(self, life, force):
        life.position, life.velocity = bounded_update(
            life.position, life.velocity, force, life.mass, life.size, self.size)

    def _refresh(self):
        self.size = self._calculate_size()
        self._gene = self._calculate_gene()

    def _calculate_size(self):
        if not self.contained_lives:
            return COLONY_DEFAULT_SIZE
        square = sum(life.size * life.size for life in self.contained_lives)
        return math.sqrt(square * COLONY_SIZE_FACTOR)

    def _calculate_gene(self):
        if not self.contained_lives:
            return Gene.empty()
        return self.contained_lives[0].gene.copy()
