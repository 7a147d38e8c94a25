from unittest import mock

import pygame
import pytest

from cubray.app import describe_map, load_textures, main, run
from cubray.colors import opaque
from cubray.config import Direction, SceneError
from cubray.parser import parse_scene

MAP = [
    "1111111",
    "1000001",
    "1E00001",
    "1000001",
    "1111111",
]

COLORS = {
    "ea.png": (255, 0, 0),
    "no.png": (0, 255, 0),
    "we.png": (0, 0, 255),
    "so.png": (90, 90, 90),
}


def _scene(tmp_path, write_images=True):
    if write_images:
        for name, color in COLORS.items():
            surface = pygame.Surface((2, 2))
            surface.fill(color)
            pygame.image.save(surface, str(tmp_path / name))
    header = [
        f"EA {tmp_path / 'ea.png'}",
        f"NO {tmp_path / 'no.png'}",
        f"WE {tmp_path / 'we.png'}",
        f"SO {tmp_path / 'so.png'}",
        "F 1,2,3",
        "C 4,5,6",
    ]
    return parse_scene(header + MAP, path_exists=lambda path: True)


def test_describe_map_lists_rows(tmp_path):
    text = describe_map(_scene(tmp_path, write_images=False))
    lines = text.splitlines()
    assert lines[0] == "height: 5"
    assert "00  [1111111]" in lines
    assert "02  [1E00001]" in lines


def test_load_textures(tmp_path):
    textures = load_textures(_scene(tmp_path))
    assert set(textures) == set(Direction)
    assert textures[Direction.EA].width == 2
    assert textures[Direction.EA].color_at(0, 0) == opaque(COLORS["ea.png"])
    assert textures[Direction.SO].color_at(1, 1) == opaque(COLORS["so.png"])


def test_load_textures_missing_file(tmp_path):
    with pytest.raises(SceneError):
        load_textures(_scene(tmp_path, write_images=False))


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.cub")]) == 0
    assert "Map file not found" in capsys.readouterr().out


def test_main_without_arguments(capsys):
    assert main([]) == 0
    assert "Map file not found" in capsys.readouterr().out


def test_main_bad_extension(tmp_path, capsys):
    path = tmp_path / "scene.txt"
    path.write_text("1\n")
    assert main([str(path)]) == 1
    assert "Invalid file extension" in capsys.readouterr().out


def test_main_too_many_arguments(tmp_path, capsys):
    path = tmp_path / "scene.cub"
    path.write_text("1\n")
    assert main([str(path), "extra"]) == 1
    assert "Invalid number of arguments" in capsys.readouterr().out


def test_main_invalid_scene(tmp_path, capsys):
    path = tmp_path / "scene.cub"
    path.write_text("XX nothing\n")
    assert main([str(path)]) == 1
    assert "Invalid key in the .cub file" in capsys.readouterr().out


def test_run_draws_until_quit(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    scene = _scene(tmp_path)
    quit_event = pygame.event.Event(pygame.QUIT)
    with mock.patch("pygame.event.get", side_effect=[[], [quit_event]]):
        assert run(scene) == 1