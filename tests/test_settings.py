import json

import pygame

from fireworks.settings import DEFAULT_GREETING, Settings


def test_defaults_when_file_missing(tmp_path, monkeypatch):
    for var in ("FIREWORKS_WIDTH", "FIREWORKS_HEIGHT", "FIREWORKS_FPS", "FIREWORKS_SEED"):
        monkeypatch.delenv(var, raising=False)
    s = Settings(str(tmp_path / "nope.json"))
    assert (s.width, s.height, s.fps) == (1280, 720, 60)
    assert s.greeting == DEFAULT_GREETING
    assert s.music_volume == 0.5
    assert s.music_track is None
    assert not (tmp_path / "nope.json").exists()  # never written


def test_file_values_and_binding_merge(tmp_path, monkeypatch):
    monkeypatch.delenv("FIREWORKS_WIDTH", raising=False)
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "width": 640,
                "music_volume": 0.73,
                "greeting": ["hi", "there"],
                "music_track": "data/song.ogg",
                "key_bindings": {"CountdownState": {"unlock": [pygame.K_u]}},
            }
        )
    )
    s = Settings(str(path))
    assert s.width == 640
    assert s.music_volume == 0.7
    assert s.greeting == ["hi", "there"]
    assert s.music_track == "data/song.ogg"
    assert s.key_bindings["CountdownState"]["unlock"] == [pygame.K_u]
    assert s.key_bindings["CountdownState"]["quit"] == [pygame.K_ESCAPE]


def test_malformed_file_keeps_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    s = Settings(str(path))
    assert s.title == "Happy New Year"


def test_malformed_numbers_keep_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("FIREWORKS_WIDTH", raising=False)
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"width": "wide", "title": "Yay"}))
    s = Settings(str(path))
    assert s.width == 1280
    assert s.title == "Yay"


def test_environment_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("FIREWORKS_WIDTH", "800")
    monkeypatch.setenv("FIREWORKS_FPS", "abc")
    monkeypatch.setenv("FIREWORKS_EARLY_UNLOCK", "yes")
    monkeypatch.setenv("FIREWORKS_SEED", "42")
    s = Settings(str(tmp_path / "none.json"))
    assert s.width == 800
    assert s.fps == 60
    assert s.allow_early_unlock is True
    assert s.seed == "42"


def test_null_music_track_means_no_music(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"music_track": None}))
    assert Settings(str(path)).music_track is None
