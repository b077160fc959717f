"""
Continuous live simulation: life forms seek food, reproduce with a mutating
speed trait, and starve in real time.
"""

from __future__ import annotations
import argparse
import logging
import random
import sys
from typing import List, Optional

import pygame

import config
from render.renderer import draw_state
from world.spawner import Spawner
from world.stepper import Stepper, TickStats
from world.world import SimulationState

logger = logging.getLogger("particle_life")


def build_simulation(seed: Optional[int] = None) -> Stepper:
    rng = random.Random(seed)
    state = SimulationState.create(config.WORLD_W, config.WORLD_H)
    spawner = Spawner(state, rng)
    spawner.seed_initial()
    return Stepper(state, rng, spawner=spawner)


def hud_stats(stepper: Stepper) -> dict:
    state = stepper.state
    return {
        "tick": stepper.tick,
        "population": state.life_form_count,
        "food": state.food_count,
        "births": stepper.births,
        "deaths": stepper.deaths,
        "avg_energy": state.mean_energy(),
        "avg_speed": state.mean_speed_factor(),
    }


def log_stats(stepper: Stepper) -> None:
    s = hud_stats(stepper)
    logger.info(
        "tick=%d life_forms=%d food=%d births=%d deaths=%d avg_energy=%.2f avg_speed=%.3f",
        s["tick"], s["population"], s["food"], s["births"], s["deaths"], s["avg_energy"], s["avg_speed"],
    )


def run_headless(stepper: Stepper, ticks: int) -> List[TickStats]:
    history: List[TickStats] = []
    for _ in range(ticks):
        history.append(stepper.step())
        if stepper.tick % config.STATS_EVERY_TICKS == 0:
            log_stats(stepper)
    return history


def run_window(stepper: Stepper) -> None:
    pygame.init()
    screen = pygame.display.set_mode((config.WORLD_W, config.WORLD_H))
    pygame.display.set_caption("Artificial Life Simulator")
    clock = pygame.time.Clock()

    logger.info("Press ESC or close the window to quit.")

    running = True
    try:
        while running:
            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    running = False
                elif e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE:
                    running = False

            stepper.step()
            if stepper.tick % config.STATS_EVERY_TICKS == 0:
                log_stats(stepper)

            draw_state(screen, stepper.state, hud_stats(stepper))
            pygame.display.flip()
            clock.tick(config.FPS)
    finally:
        pygame.quit()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Real-time 2D particle-life simulation.")
    ap.add_argument("--seed", type=int, default=None, help="seed for a reproducible run")
    ap.add_argument("--headless", type=int, default=None, metavar="TICKS",
                    help="run TICKS ticks without a window and log statistics")
    ap.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        stepper = build_simulation(args.seed)
    except MemoryError:
        logger.exception("could not allocate simulation state")
        return 1

    logger.info(
        "Artificial Life Simulator: life forms=%d food=%d seed=%s",
        stepper.state.life_form_count, stepper.state.food_count, args.seed,
    )

    if args.headless is not None:
        run_headless(stepper, args.headless)
    else:
        run_window(stepper)

    log_stats(stepper)
    logger.info("Simulation ended.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
