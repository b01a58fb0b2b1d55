"""AudioService

Background-music toggle over ``pygame.mixer.music``. Playback problems
(no audio device, missing track) are logged and leave the service in the
"not playing" state; they never reach the simulation.
"""

from __future__ import annotations

import os

import pygame

from fireworks.logger import get_logger
from fireworks.settings import settings

log = get_logger("audio")


class AudioService:
    _instance: "AudioService | None" = None

    def __init__(self, track: str | None = None, volume: float | None = None) -> None:
        self.track = track or settings.music_track
        self.volume = settings.music_volume if volume is None else volume
        self.is_playing = False
        self._loaded = False
        self.available = self._init_mixer()

    @classmethod
    def get(cls) -> "AudioService":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _init_mixer(self) -> bool:
        if pygame.mixer.get_init():
            return True
        try:
            pygame.mixer.init()
        except pygame.error:
            # No audio device (CI, containers): retry with the dummy driver
            os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
            try:
                pygame.mixer.init()
            except pygame.error as e:
                log.warn("Audio unavailable:", e)
                return False
        return True

    def play(self) -> bool:
        """Start (or resume) the music. Returns True when playback is running."""
        if not self.available:
            return False
        if not self.track:
            log.debug("No music track configured; skipping playback")
            return False
        try:
            if not self._loaded:
                pygame.mixer.music.load(self.track)
                pygame.mixer.music.set_volume(self.volume)
                pygame.mixer.music.play(-1)
                self._loaded = True
            else:
                pygame.mixer.music.unpause()
        except (pygame.error, FileNotFoundError) as e:
            log.warn(f"Audio play failed for {self.track!r}:", e)
            self.is_playing = False
            return False
        self.is_playing = True
        return True

    def pause(self) -> None:
        if self.available and self.is_playing:
            pygame.mixer.music.pause()
        self.is_playing = False

    def toggle(self) -> bool:
        if self.is_playing:
            self.pause()
        else:
            self.play()
        return self.is_playing


__all__ = ["AudioService"]
