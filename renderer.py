# ==================================================
#   RENDERING FUNCTIONS
# ==================================================
import pygame
from config import (WIDTH, HEIGHT, BACKGROUND, ARENA_BORDER, DECORATIVE_COLOR,
                    STARVING_COLOR, GRAVITY_COLOR, HUD_COLOR, INFO_BG, INFO_TEXT,
                    PAUSE_OVERLAY)
from physics import Vector
from entities import Decorative, Resource
from creature import Forager
from colony import Colony
from terrain import GravityTerrain


def draw_arena(surf, world):
    """Background, sticky edge band and the arena wall."""
    surf.fill(BACKGROUND)
    terrain = world.terrain
    if isinstance(terrain, GravityTerrain):
        if terrain.immobilized_width > 0:
            pygame.draw.rect(surf, ARENA_BORDER, (0, 0, world.size, world.size),
                             int(terrain.immobilized_width))
        if terrain.gravity_center is not None and terrain.gravity != 0:
            c = terrain.gravity_center
            pygame.draw.circle(surf, GRAVITY_COLOR, (int(c.x), int(c.y)), 4)
    pygame.draw.circle(surf, ARENA_BORDER, (int(world.center.x), int(world.center.y)),
                       int(world.size / 2), 1)


def draw_life(surf, life, anchor=Vector.zero()):
    """Draw one life; colonies draw their members relative to themselves."""
    x = int(life.position.x + anchor.x)
    y = int(life.position.y + anchor.y)
    r = max(int(life.size / 2), 1)

    if isinstance(life, Colony):
        local_anchor = anchor.add(life.position)
        for member in life.contained_lives:
            draw_life(surf, member, local_anchor)
        shell = pygame.Surface((r * 2 + 2, r * 2 + 2), pygame.SRCALPHA)
        pygame.draw.circle(shell, (*life.gene.color, 0x20), (r + 1, r + 1), r)
        pygame.draw.circle(shell, (0x20, 0x20, 0x20, 0x80), (r + 1, r + 1), r, 1)
        surf.blit(shell, (x - r - 1, y - r - 1))
    elif isinstance(life, Forager):
        if life.is_alive:
            color = STARVING_COLOR if life.energy < 1 else life.gene.color
            pygame.draw.circle(surf, color, (x, y), r)
        else:
            pygame.draw.circle(surf, life.gene.color, (x, y), r, 1)
    elif isinstance(life, Resource):
        pygame.draw.rect(surf, life.gene.color, (x - r, y - r, r * 2, r * 2))
    elif isinstance(life, Decorative):
        _draw_trail(surf, life, x, y, life.size, 6)
    else:
        pygame.draw.circle(surf, DECORATIVE_COLOR, (x, y), r, 1)


def _draw_trail(surf, life, x, y, diameter, circles):
    """Shrinking circles trailing behind a drifting decoration."""
    for _ in range(circles):
        pygame.draw.circle(surf, DECORATIVE_COLOR, (int(x), int(y)), max(int(diameter / 2), 1), 1)
        x -= life.velocity.x * 2.5
        y -= life.velocity.y * 2.5
        diameter *= 0.6


def draw_hud(surf, font, world):
    """Draw HUD with statistics."""
    stats = world.stats()
    hud_lines = [
        f"Tick: {stats['t']}",
        f"Foragers: {stats['foragers']}   Colonies: {stats['colonies']}",
        f"Resources: {stats['resources']}",
        f"Energy: {stats['energy']:.1f}",
        "Space/R-click: pause   Esc/Q: quit",
    ]
    for i, text in enumerate(hud_lines):
        surf.blit(font.render(text, True, HUD_COLOR), (WIDTH - 300, 10 + i * 20))


def draw_life_info(surf, font, life):
    """Draw info panel for the selected life."""
    if life is None:
        return

    bx, by = int(life.position.x + life.size + 20), int(life.position.y - 50)
    info_lines = [
        type(life).__name__,
        f"Energy: {getattr(life, 'total_energy', life.energy):.1f}",
        f"Size: {life.size:.1f}  Mass: {life.mass:.2f}",
    ]
    if isinstance(life, Colony):
        info_lines.append(f"Members: {len(life.contained_lives)}")
    pad = 6
    w = 160
    h = len(info_lines) * 18 + pad * 2
    panel = pygame.Surface((w, h))
    panel.fill(INFO_BG)
    pygame.draw.rect(panel, (0, 0, 0), panel.get_rect(), 1)
    for i, text in enumerate(info_lines):
        panel.blit(font.render(text, True, INFO_TEXT), (pad, pad + i * 18))
    surf.blit(panel, (bx, by))


def draw_pause_overlay(surf, font):
    """Draw pause overlay."""
    overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    overlay.fill(PAUSE_OVERLAY)
    surf.blit(overlay, (0, 0))
    pause_text = font.render("PAUSED - Right-click or Space to Resume", True, (255, 255, 255))
    surf.blit(pause_text, pause_text.get_rect(center=(WIDTH // 2, HEIGHT // 2)))
