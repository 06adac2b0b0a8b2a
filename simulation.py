# ==================================================
#   TICK DRIVER (shared by the world and every colony)
# ==================================================
import logging
from config import EAT_THRESHOLD_MIN, EAT_THRESHOLD_MAX
from utils import random_between

logger = logging.getLogger("lifegame.simulation")


def draw_eat_threshold():
    """Appetite of one predator for one tick."""
    return random_between(EAT_THRESHOLD_MAX, EAT_THRESHOLD_MIN)


def step_lives(lives, move, evict_dead=False):
    """Advance one population by a tick and return the new population.

    Lives act in index order and see what earlier ones already did this tick.
    Each live one asks for its force and offspring, gets moved by
    `move(life, force)` and, if it hunts, eats the first later life it touches
    and whose gene it can eat (one threshold per predator per tick). Eaten lives
    neither act nor get eaten again. Eaten lives are dropped, then, when
    `evict_dead`, the depleted ones found dead at the start of their turn (a
    dead colony gets one last `next()` to release its members). Lives dying
    during their own turn stay until the next tick. Offspring and released
    lives go at the end.
    """
    spawned = []
    killed = set()
    evicted = set()

    for i in range(len(lives)):
        life = lives[i]
        if id(life) in killed:
            continue
        if not life.is_alive:
            if evict_dead and life.is_depleted:
                _, remains = life.next()
                spawned.extend(remains)
                evicted.add(id(life))
            continue

        force, offspring = life.next()
        move(life, force)
        spawned.extend(offspring)

        if not life.can_hunt:
            continue
        threshold = draw_eat_threshold()
        for j in range(i + 1, len(lives)):
            prey = lives[j]
            if id(prey) in killed:
                continue
            if not life.is_colliding_with(prey):
                continue
            if life.gene.can_eat(prey.gene, threshold):
                logger.debug("%r eats %r", life, prey)
                spawned.extend(life.eat(prey))
                killed.add(id(prey))
                break

    survivors = []
    for life in lives:
        if id(life) in killed:
            continue
        if id(life) in evicted:
            logger.debug("evicting %r", life)
            continue
        survivors.append(life)
    survivors.extend(spawned)
    return survivors
