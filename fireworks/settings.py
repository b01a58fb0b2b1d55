import json
import os

import pygame

from fireworks.logger import get_logger

log = get_logger("settings")

DEFAULT_GREETING = [
    "Happy New Year!",
    "May the year ahead bring more ups than downs.",
    "Thank you for being part of this one.",
]


def _env_int(name, default):
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        log.warn(f"Ignoring non-integer {name}={raw!r}")
        return default


def _env_bool(name, default):
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Read-only application configuration.

    Defaults are overridden by an optional JSON file and then by
    ``FIREWORKS_*`` environment variables. Nothing is ever written back.
    """

    SETTINGS_FILE = os.environ.get("FIREWORKS_SETTINGS", "data/settings.json")

    def __init__(self, path: str | None = None):
        self.width = 1280
        self.height = 720
        self.fps = 60
        self.fullscreen = False
        self.seed = None
        self.allow_early_unlock = False
        self.music_track: str | None = None  # no track is shipped
        self._music_volume = 0.5
        self.title = "Happy New Year"
        self.greeting = list(DEFAULT_GREETING)
        self.key_bindings = {
            "CountdownState": {
                "unlock": [pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE],
                "music_toggle": [pygame.K_m],
                "quit": [pygame.K_ESCAPE],
            },
            "CelebrationState": {
                "intensify": [pygame.K_f, pygame.K_SPACE],
                "toggle_celebrate": [pygame.K_c],
                "music_toggle": [pygame.K_m],
                "quit": [pygame.K_ESCAPE],
            },
        }
        self.load_settings(path or self.SETTINGS_FILE)
        self.apply_environment()

    @property
    def music_volume(self):
        return self._music_volume

    @music_volume.setter
    def music_volume(self, value):
        self._music_volume = max(0.0, min(1.0, round(value * 10) / 10))

    def load_settings(self, path):
        """Merge values from the JSON file at ``path`` if it exists."""
        if not os.path.exists(path):
            log.debug("No settings file at", path, "- using defaults")
            return
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            log.warn("Error loading settings; keeping defaults", e)
            return
        if not isinstance(data, dict):
            log.warn("Settings file", path, "is not a JSON object; keeping defaults")
            return

        try:
            width = int(data.get("width", self.width))
            height = int(data.get("height", self.height))
            fps = int(data.get("fps", self.fps))
            volume = float(data.get("music_volume", self._music_volume))
        except (TypeError, ValueError) as e:
            log.warn("Malformed numeric setting; keeping defaults", e)
        else:
            self.width, self.height, self.fps = width, height, fps
            self.music_volume = volume
        self.fullscreen = bool(data.get("fullscreen", self.fullscreen))
        self.seed = data.get("seed", self.seed)
        self.allow_early_unlock = bool(data.get("allow_early_unlock", self.allow_early_unlock))
        track = data.get("music_track", self.music_track)
        self.music_track = str(track) if track else None
        self.title = str(data.get("title", self.title))
        greeting = data.get("greeting")
        if isinstance(greeting, list):
            self.greeting = [str(line) for line in greeting]

        # Deep merge so bindings missing from the file keep their defaults
        loaded_bindings = data.get("key_bindings", {})
        for state, binds in loaded_bindings.items():
            if state in self.key_bindings:
                for action, keys in binds.items():
                    self.key_bindings[state][action] = keys
        log.info("Settings loaded from", path)

    def apply_environment(self):
        self.width = _env_int("FIREWORKS_WIDTH", self.width)
        self.height = _env_int("FIREWORKS_HEIGHT", self.height)
        self.fps = _env_int("FIREWORKS_FPS", self.fps)
        self.fullscreen = _env_bool("FIREWORKS_FULLSCREEN", self.fullscreen)
        self.allow_early_unlock = _env_bool("FIREWORKS_EARLY_UNLOCK", self.allow_early_unlock)
        seed = os.environ.get("FIREWORKS_SEED")
        if seed:
            self.seed = seed


settings = Settings()
