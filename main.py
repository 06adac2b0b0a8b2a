# ==================================================
#   LIFE GAME - MAIN
# ==================================================
import argparse
import logging
import random
import sys
from config import *
from physics import Vector
from terrain import Terrain, GravityTerrain
from world import World, seed_world

logger = logging.getLogger("lifegame.main")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Predation and reproduction of simple lives in a circular arena",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for determinism")
    parser.add_argument("--size", type=float, default=WORLD_SIZE, help="Arena diameter")
    parser.add_argument("--foragers", type=int, default=NUM_FORAGERS)
    parser.add_argument("--resources", type=int, default=NUM_RESOURCES)
    parser.add_argument("--decoratives", type=int, default=NUM_DECORATIVES)
    parser.add_argument("--colonies", type=int, default=NUM_COLONIES)
    parser.add_argument("--mutation-rate", type=float, default=MUTATION_RATE)
    parser.add_argument("--gravity", type=float, default=GRAVITY,
                        help="Pull toward the arena center, 0 disables it")
    parser.add_argument("--immobilized-width", type=float, default=IMMOBILIZED_WIDTH,
                        help="Width of the sticky band along the edges")
    parser.add_argument("--headless", action="store_true", help="Run without a window")
    parser.add_argument("--ticks", type=int, default=1000, help="Ticks to run when headless")
    parser.add_argument("--log-level", default=LOG_LEVEL)
    args = parser.parse_args(argv)
    if not 0 <= args.mutation_rate <= 1:
        parser.error("--mutation-rate must be within [0, 1]")
    return args


def build_world(args):
    if args.gravity or args.immobilized_width:
        center = Vector(args.size / 2, args.size / 2)
        terrain = GravityTerrain(args.size, center, args.gravity,
                                 immobilized_width=args.immobilized_width)
    else:
        terrain = Terrain(args.size)
    world = World(args.size, terrain)
    return seed_world(world, args.foragers, args.resources, args.decoratives,
                      args.colonies, args.mutation_rate)


def run_headless(world, ticks):
    for _ in range(ticks):
        world.tick()
        if world.t % STATS_EVERY == 0:
            logger.info("stats: %s", world.stats())
    logger.info("finished: %s", world.stats())
    return world


def run_window(world):
    """Main game loop."""
    import pygame
    from renderer import draw_arena, draw_life, draw_hud, draw_life_info, draw_pause_overlay

    pygame.init()
    pygame.display.set_caption("Life Game")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("Segoe UI", 18)

    running = True
    paused = False
    selected = None

    while running:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            if event.type == pygame.MOUSEBUTTONDOWN:
                mx, my = pygame.mouse.get_pos()
                if event.button == 1:  # Left click - select life
                    selected = None
                    mouse = Vector(mx, my)
                    for life in world.lives:
                        if life.position.dist(mouse) <= life.size / 2 + 4:
                            selected = life
                            break
                elif event.button == 3:  # Right click - pause
                    paused = not paused
            if event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = not paused

        if not paused:
            world.tick()
            if world.t % STATS_EVERY == 0:
                logger.info("stats: %s", world.stats())
            if selected is not None and selected not in world.lives:
                selected = None

        draw_arena(screen, world)
        for life in world.lives:
            draw_life(screen, life)
        draw_hud(screen, font, world)
        draw_life_info(screen, font, selected)
        if paused:
            draw_pause_overlay(screen, font)

        pygame.display.flip()

    pygame.quit()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if args.seed is not None:
        random.seed(args.seed)

    world = build_world(args)
    if args.headless:
        run_headless(world, args.ticks)
    else:
        run_window(world)
    return 0


if __name__ == "__main__":
    sys.exit(main())
