"""
particle_life module: render/renderer.py

Pygame rendering of the simulation state (read-only).
"""

from __future__ import annotations
from typing import Iterable

import pygame

import config
from organism.lifeform import LifeForm
from render import colors
from world.food import Food
from world.world import SimulationState


def to_screen(x: float, y: float) -> tuple[int, int]:
    return (round(x * config.SCALE_FACTOR), round(y * config.SCALE_FACTOR))


def draw_food(screen: pygame.Surface, foods: Iterable[Food]) -> None:
    r = int(config.FOOD_RADIUS)
    for f in foods:
        if f.present:
            pygame.draw.circle(screen, colors.FOOD, to_screen(f.x, f.y), r)


def draw_life_form(screen: pygame.Surface, lf: LifeForm) -> None:
    if not lf.alive:
        return

    r = int(config.LIFE_FORM_RADIUS)
    px, py = to_screen(lf.x, lf.y)
    pygame.draw.circle(screen, lf.color, (px, py), r)

    # energy bar above the body
    frac = lf.energy_fraction
    width = int(r * 2 * max(0.0, min(1.0, frac)))
    if width > 0:
        bar = pygame.Rect(px - r, py - r - 5, width, 3)
        pygame.draw.rect(screen, colors.energy_bar_color(frac), bar)


def draw_hud(screen: pygame.Surface, stats: dict) -> None:
    font = pygame.font.Font(None, 22)

    lines = [
        f"Tick: {stats.get('tick', 0)}",
        f"Life forms: {stats.get('population', 0)}  Food: {stats.get('food', 0)}",
        f"Births: {stats.get('births', 0)}  Deaths: {stats.get('deaths', 0)}",
        f"Avg energy: {stats.get('avg_energy', 0.0):.1f}  Avg speed: {stats.get('avg_speed', 0.0):.2f}",
    ]

    y = 8
    for line in lines:
        txt = font.render(line, True, colors.HUD_TEXT)
        screen.blit(txt, (10, y))
        y += 18


def draw_state(screen: pygame.Surface, state: SimulationState, stats: dict | None = None) -> None:
    screen.fill(colors.BG)
    draw_food(screen, state.foods)
    for lf in state.life_forms:
        draw_life_form(screen, lf)
    if stats is not None:
        draw_hud(screen, stats)
