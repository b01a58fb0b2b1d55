"""Centralized input routing.

Transforms raw pygame events into semantic actions depending on the
active state, so states never parse events themselves. Rules are
evaluated in declaration order; the first match for an event wins and
duplicate actions within one frame are collapsed.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List

import pygame

Action = str
Rule = Callable[[pygame.event.Event], Action | None]


def _key_rule(key: int, action: Action, event_type=pygame.KEYDOWN) -> Rule:
    def _r(e: pygame.event.Event):
        if e.type == event_type and getattr(e, "key", None) == key:
            return action
        return None

    return _r


def _mouse_button_rule(button: int, action: Action, event_type=pygame.MOUSEBUTTONDOWN) -> Rule:
    def _r(e: pygame.event.Event):
        if e.type == event_type and getattr(e, "button", None) == button:
            return action
        return None

    return _r


class InputRouter:
    """Maps pygame events to semantic actions for the active state."""

    def __init__(self, key_bindings: Dict[str, Dict[str, List[int]]] | None = None) -> None:
        if key_bindings is None:
            from fireworks.settings import settings

            key_bindings = settings.key_bindings
        self._rules: Dict[str, List[Rule]] = {}
        for state_name, binds in key_bindings.items():
            rules: List[Rule] = []
            for action, keys in binds.items():
                rules.extend(_key_rule(k, action) for k in keys)
            self._rules[state_name] = rules
        # Left click is the "button" of each scene
        self._rules.setdefault("CountdownState", []).append(_mouse_button_rule(1, "unlock"))
        self._rules.setdefault("CelebrationState", []).append(_mouse_button_rule(1, "intensify"))

    def process(self, events: Iterable[pygame.event.Event], state_name: str) -> List[Action]:
        rules = self._rules.get(state_name, [])
        actions: List[Action] = []
        for e in events:
            for rule in rules:
                a = rule(e)
                if a:
                    if a not in actions:
                        actions.append(a)
                    break
        return actions


__all__ = ["InputRouter", "Action"]
