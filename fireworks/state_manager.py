"""Scene states for the greeting.

A small stack-based state manager drives two scenes that share one
``FireworkSimulation``:

* ``CountdownState`` shows the time left until the target date over the
  ambient starfield. Once unlocked it starts the music and, after a short
  reveal delay, hands over to the celebration.
* ``CelebrationState`` turns continuous launching on and reveals the
  greeting lines when the user asks for more fireworks.

States only flip flags or enqueue launches on the simulation; the
simulation itself mutates its collections inside ``tick``.

Usage (see ``app.py``):

    sm = StateManager()
    sm.set(CountdownState(sim, audio))
    while running:
        actions = router.process(pygame.event.get(), sm.current.name)
        sm.handle_actions(actions)
        sm.update(dt)
        sm.render(screen)
"""

from __future__ import annotations

from typing import List, Sequence

import pygame

from fireworks.audio_service import AudioService
from fireworks.constants import (
    GREETING_LINE_STAGGER,
    INTENSIFY_BURST,
    INTENSIFY_STAGGER_TICKS,
    REVEAL_DELAY_SECONDS,
)
from fireworks.countdown import Countdown
from fireworks.logger import get_logger
from fireworks.renderer import Renderer
from fireworks.settings import settings
from fireworks.simulation import FireworkSimulation

_state_log = get_logger("state")

TEXT_COLOR = (248, 250, 252)
ACCENT_COLOR = (244, 114, 182)


class State:
    """Base class for an application state. All hooks are optional."""

    name: str = "State"
    manager: "StateManager | None" = None

    def on_enter(self, previous: "State | None") -> None:  # pragma: no cover - default no-op
        pass

    def on_exit(self, next_state: "State | None") -> None:  # pragma: no cover - default no-op
        pass

    def handle_actions(self, actions: Sequence[str]) -> None:  # pragma: no cover - default no-op
        pass

    def update(self, dt: float) -> None:  # pragma: no cover - default no-op
        pass

    def render(self, surface: pygame.Surface) -> None:  # pragma: no cover - default no-op
        pass


class StateManager:
    """Stack-based state manager; only the top state receives loop callbacks."""

    def __init__(self) -> None:
        self._stack: List[State] = []

    @property
    def current(self) -> State | None:
        return self._stack[-1] if self._stack else None

    def stack_size(self) -> int:
        return len(self._stack)

    def push(self, state: State) -> None:
        state.manager = self
        prev = self.current
        self._stack.append(state)
        state.on_enter(prev)
        _state_log.debug("push", state.name, "-> stack:", [s.name for s in self._stack])

    def pop(self) -> State | None:
        if not self._stack:
            return None
        top = self._stack.pop()
        top.on_exit(self.current)
        _state_log.debug("pop", top.name, "-> stack:", [s.name for s in self._stack])
        return top

    def set(self, state: State) -> None:
        state.manager = self
        previous = self.current
        while self._stack:
            popped = self._stack.pop()
            popped.on_exit(state)
        self._stack.append(state)
        state.on_enter(previous)
        _state_log.debug("set", state.name, "(root)")

    def handle_actions(self, actions: Sequence[str]) -> None:
        if self.current:
            if actions:
                _state_log.debug("actions ->", self.current.name, actions)
            self.current.handle_actions(actions)

    def update(self, dt: float) -> None:
        if self.current:
            self.current.update(dt)

    def render(self, surface: pygame.Surface) -> None:
        if self.current:
            self.current.render(surface)


class SimulationState(State):
    """State drawn on top of the shared firework simulation."""

    def __init__(self, sim: FireworkSimulation, audio: AudioService | None = None) -> None:
        self.sim = sim
        self.audio = audio
        self.quit_requested = False
        self._renderer: Renderer | None = None
        self._fonts: dict = {}

    def handle_actions(self, actions: Sequence[str]) -> None:
        for act in actions:
            if act == "quit":
                self.quit_requested = True
            elif act == "music_toggle" and self.audio is not None:
                self.audio.toggle()
            else:
                self.on_action(act)

    def on_action(self, action: str) -> None:  # pragma: no cover - default no-op
        pass

    def render(self, surface: pygame.Surface) -> None:
        if self._renderer is None:
            self._renderer = Renderer(surface, self.sim.rng)
        elif self._renderer.surface is not surface:
            self._renderer.set_surface(surface)
        self.sim.tick(self._renderer)
        self.render_overlay(surface)

    def render_overlay(self, surface: pygame.Surface) -> None:  # pragma: no cover - default no-op
        pass

    def font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def blit_centered(self, surface, text, size, y, color=TEXT_COLOR, alpha=255) -> None:
        text_surf = self.font(size).render(text, True, color)
        if alpha < 255:
            text_surf.set_alpha(alpha)
        surface.blit(text_surf, (surface.get_width() // 2 - text_surf.get_width() // 2, y))


class CountdownState(SimulationState):
    name = "CountdownState"

    def __init__(
        self,
        sim: FireworkSimulation,
        audio: AudioService | None = None,
        countdown: Countdown | None = None,
        allow_early_unlock: bool | None = None,
    ) -> None:
        super().__init__(sim, audio)
        self.countdown = countdown or Countdown()
        self.allow_early_unlock = settings.allow_early_unlock if allow_early_unlock is None else allow_early_unlock
        self.unlocked = False
        self.reveal_in: float | None = None
        self.finished = False

    @property
    def can_unlock(self) -> bool:
        return self.allow_early_unlock or self.countdown.is_due()

    def on_action(self, action: str) -> None:
        if action == "unlock" and self.can_unlock and not self.unlocked:
            self.unlocked = True
            self.reveal_in = REVEAL_DELAY_SECONDS
            if self.audio is not None and not self.audio.is_playing:
                self.audio.play()
            _state_log.info("Unlocked; revealing celebration")

    def update(self, dt: float) -> None:
        if self.reveal_in is None:
            return
        self.reveal_in -= dt
        if self.reveal_in <= 0:
            self.reveal_in = None
            self.finished = True

    def render_overlay(self, surface: pygame.Surface) -> None:
        if self.unlocked:
            return
        h = surface.get_height()
        self.blit_centered(surface, settings.title, 64, h // 2 - 120)
        if self.countdown.is_due():
            self.blit_centered(surface, "The moment is here!", 36, h // 2 - 40, ACCENT_COLOR)
        else:
            self.blit_centered(surface, self.countdown.text, 96, h // 2 - 40)
            self.blit_centered(surface, "days : hours : minutes : seconds", 24, h // 2 + 40)
        if self.can_unlock:
            self.blit_centered(surface, "Press Enter or click to open", 28, h // 2 + 100, ACCENT_COLOR)


class CelebrationState(SimulationState):
    name = "CelebrationState"

    def __init__(
        self,
        sim: FireworkSimulation,
        audio: AudioService | None = None,
        greeting: Sequence[str] | None = None,
    ) -> None:
        super().__init__(sim, audio)
        self.greeting = list(settings.greeting if greeting is None else greeting)
        self.revealed = False
        self.reveal_elapsed = 0.0

    def on_enter(self, previous: State | None) -> None:
        self.sim.set_celebrating(True)

    def on_exit(self, next_state: State | None) -> None:
        self.sim.set_celebrating(False)

    def on_action(self, action: str) -> None:
        if action == "intensify":
            self.sim.launch_burst(INTENSIFY_BURST, stagger=INTENSIFY_STAGGER_TICKS)
            if not self.revealed:
                self.revealed = True
                self.reveal_elapsed = 0.0
                _state_log.info("Greeting revealed")
        elif action == "toggle_celebrate":
            self.sim.set_celebrating(not self.sim.celebrating)

    def update(self, dt: float) -> None:
        if self.revealed:
            self.reveal_elapsed += dt

    def line_alpha(self, index: int) -> int:
        """Fade-in alpha for greeting line ``index`` (lines appear one by one)."""
        if not self.revealed:
            return 0
        t = self.reveal_elapsed - index * GREETING_LINE_STAGGER
        return int(255 * max(0.0, min(1.0, t / 0.5)))

    def visible_lines(self) -> int:
        return sum(1 for i in range(len(self.greeting)) if self.line_alpha(i) > 0)

    def render_overlay(self, surface: pygame.Surface) -> None:
        self.blit_centered(surface, settings.title, 64, 60, ACCENT_COLOR)
        if not self.revealed:
            self.blit_centered(surface, "Click or press F for more fireworks", 26, surface.get_height() - 60)
            return
        y = 150
        for i, line in enumerate(self.greeting):
            alpha = self.line_alpha(i)
            if alpha > 0:
                self.blit_centered(surface, line, 30, y, alpha=alpha)
            y += 40


__all__ = [
    "State",
    "StateManager",
    "SimulationState",
    "CountdownState",
    "CelebrationState",
]
