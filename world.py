# ==================================================
#   WORLD (top-level population)
# ==================================================
import logging
import random
from config import *
from utils import rand_point
from physics import Vector, bounded_update
from gene import Gene
from entities import Decorative, Resource
from creature import Forager
from colony import Colony
from simulation import step_lives
from terrain import Terrain

logger = logging.getLogger("lifegame.world")


class World:
    """Circular arena of diameter `size` centered at (size / 2, size / 2)."""
    def __init__(self, size=WORLD_SIZE, terrain=None, lives=None):
        self.size = size
        self.center = Vector(size / 2, size / 2)
        self.terrain = terrain if terrain is not None else Terrain(size)
        self.lives = list(lives) if lives else []
        self.t = 0

    def add(self, life):
        self.lives.append(life)

    def tick(self):
        self.lives = step_lives(self.lives, self.move, evict_dead=True)
        self.t += 1

    def move(self, life, force):
        """Free motion: the life's own force plus the terrain's."""
        force = force.add(self.terrain.force_at(life.position))
        friction = FRICTION * self.terrain.friction_at(life.position)
        life.position, life.velocity = bounded_update(
            life.position, life.velocity, force, life.mass, life.size,
            self.size, center=self.center, friction=friction)

    def stats(self):
        counts = {"foragers": 0, "resources": 0, "decoratives": 0, "colonies": 0}
        energy = 0.0
        for life in self.lives:
            if isinstance(life, Forager):
                counts["foragers"] += 1
            elif isinstance(life, Resource):
                counts["resources"] += 1
            elif isinstance(life, Colony):
                counts["colonies"] += 1
                energy += life.total_energy
                continue
            else:
                counts["decoratives"] += 1
            energy += life.energy
        counts["energy"] = energy
        counts["t"] = self.t
        return counts


def seed_world(world, foragers=NUM_FORAGERS, resources=NUM_RESOURCES,
               decoratives=NUM_DECORATIVES, colonies=NUM_COLONIES,
               mutation_rate=MUTATION_RATE):
    """Scatter the initial population over the arena."""
    radius = world.size / 2

    def point():
        return Vector(*rand_point(radius))

    for _ in range(decoratives):
        world.add(Decorative(point(), DECORATIVE_SIZE))
    for _ in range(resources):
        world.add(Resource(point(), Gene.random(), RESOURCE_SIZE, RESOURCE_ENERGY))
    for _ in range(foragers):
        world.add(Forager(point(), Gene.random(), FORAGER_SIZE, FORAGER_ENERGY, mutation_rate))
    for _ in range(colonies):
        members = []
        for _ in range(COLONY_MEMBERS):
            offset = Vector(random.uniform(-1, 1), random.uniform(-1, 1)).mult(FORAGER_SIZE)
            members.append(Forager(offset, Gene.random(), FORAGER_SIZE, FORAGER_ENERGY, mutation_rate))
        world.add(Colony(point(), members))

    logger.info("seeded world: %d decoratives, %d resources, %d foragers, %d colonies",
                decoratives, resources, foragers, colonies)
    return world
