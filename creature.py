# ==================================================
#   FORAGER CLASS
# ==================================================
import logging
from config import (FORAGER_MASS, JITTER_FORCE, ENERGY_CONSUMPTION_RATE,
                    MUTATION_RATE)
from utils import random_between
from physics import Vector, Force
from entities import Life

logger = logging.getLogger("lifegame.creature")


class Forager(Life):
    """Mobile, energy-driven life that hunts and splits.

    Alive while `energy > 0`. Each tick it jitters around, pays for the move
    with energy and, when it has more than twice its reproduction cost
    (`size ** 2`), splits into two halves of what is left after paying it.
    """
    can_hunt = True

    def __init__(self, position, gene, size, energy, mutation_rate=MUTATION_RATE):
        if energy < 0:
            raise ValueError("energy must be >= 0, got %r" % energy)
        if not 0 <= mutation_rate <= 1:
            raise ValueError("mutation_rate must be within [0, 1], got %r" % mutation_rate)
        super().__init__(position, size, mass=FORAGER_MASS)
        self._gene = gene
        self._energy = energy
        self.mutation_rate = mutation_rate

    @property
    def gene(self):
        return self._gene

    @property
    def energy(self):
        return self._energy

    @property
    def is_alive(self):
        return self._energy > 0

    @property
    def is_depleted(self):
        return not self.is_alive

    @property
    def reproduction_cost(self):
        return self.size * self.size

    def next(self):
        if not self.is_alive:
            return Force.zero(), []

        vx = random_between(JITTER_FORCE, -JITTER_FORCE)
        vy = random_between(JITTER_FORCE, -JITTER_FORCE)
        force = Force(Vector(vx, vy))
        cost = force.consumed_energy_with(self.mass) * ENERGY_CONSUMPTION_RATE
        self._energy = max(self._energy - cost, 0.0)

        return force, self.reproduce()

    def reproduce(self):
        """Split off one offspring if energy allows. Returns [] or [offspring]."""
        cost = self.reproduction_cost
        if self._energy <= cost * 2:
            return []

        energy_after = (self._energy - cost) / 2
        self._energy = energy_after

        position = self.position.add(self.velocity.sized(self.size * -2))
        if random_between(1) < self.mutation_rate:
            gene = self._gene.mutated()
        else:
            gene = self._gene.copy()
        offspring = Forager(position, gene, self.size, energy_after, self.mutation_rate)
        offspring.velocity = self.velocity.sized(-1)
        logger.debug("%r split off %r", self, offspring)
        return [offspring]

    def eat(self, other):
        self._energy += other.energy
        return other.eaten()

    def eaten(self):
        self._energy = 0.0
        return []
