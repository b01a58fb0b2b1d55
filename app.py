"""Application entry loop.

Opens the window, polls events once per frame, routes them to the
active scene and ticks the shared firework simulation at the display
cadence. Window resizes are forwarded to the simulation without
resetting existing particles.
"""

from __future__ import annotations

import pygame

from fireworks.audio_service import AudioService
from fireworks.constants import BACKGROUND_COLOR
from fireworks.input_router import InputRouter
from fireworks.logger import get_logger
from fireworks.rng_service import RNGService
from fireworks.settings import settings
from fireworks.simulation import FireworkSimulation
from fireworks.state_manager import CelebrationState, CountdownState, StateManager

log = get_logger("app")


def main():
    pygame.init()
    pygame.display.set_caption(settings.title)
    if settings.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode((settings.width, settings.height), pygame.RESIZABLE)
    screen.fill(BACKGROUND_COLOR)
    clock = pygame.time.Clock()

    RNGService.initialize(settings.seed)
    sim = FireworkSimulation(*screen.get_size())
    audio = AudioService.get()
    sm = StateManager()
    router = InputRouter()
    sm.set(CountdownState(sim, audio))
    log.info(f"Started {screen.get_width()}x{screen.get_height()} @ {settings.fps} fps")

    running = True
    while running:
        events = pygame.event.get()
        for e in events:
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.VIDEORESIZE:
                # The display surface is replaced on resize
                screen = pygame.display.get_surface()
                sim.resize(*screen.get_size())

        current_name = sm.current.name if sm.current else ""
        sm.handle_actions(router.process(events, current_name))

        cur = sm.current
        if getattr(cur, "quit_requested", False):
            running = False
        if isinstance(cur, CountdownState) and cur.finished:
            sm.set(CelebrationState(sim, audio))

        dt = clock.tick(settings.fps) / 1000.0
        sm.update(dt)
        sm.render(screen)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    main()
