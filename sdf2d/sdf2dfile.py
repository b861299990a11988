"""Saving and loading scenes as ``.sdf2d`` directories."""

from __future__ import annotations

import fnmatch
import json
from pathlib import Path

from PIL import Image

from sdf2d.canvas import FRAME_NAME, Canvas, Frame

ASSETS_DIR = "assets"
SCENE_FILE = "scene.json"
FORMAT = "sdf2d-0.1"
_FRAME_PATTERN = "frame_*.png"


class Sdf2dFileError(Exception):
    """Raised when a scene cannot be loaded."""


def save(path: str | Path, canvas: Canvas) -> None:
    """Write the canvas frames and scene description into the directory ``path``."""
    out = Path(path).absolute()
    out.parent.mkdir(parents=True, exist_ok=True)
    assets = out / ASSETS_DIR
    assets.mkdir(parents=True, exist_ok=True)
    for index, frame in enumerate(canvas.frames):
        frame.image.save(assets / FRAME_NAME.format(index), "PNG")
    (out / SCENE_FILE).write_text(json.dumps({"format": FORMAT}, separators=(",", ":")))


def _read_frame(path: Path) -> Frame:
    try:
        with Image.open(path) as image:
            return Frame(image.convert("RGBA"))
    except OSError as exc:
        raise Sdf2dFileError(f"cannot read frame {path}") from exc


def load(path: str | Path, canvas: Canvas) -> None:
    """Replace the canvas frames with those stored in the scene directory ``path``."""
    assets = Path(path) / ASSETS_DIR
    if not assets.is_dir():
        raise Sdf2dFileError(f"no {ASSETS_DIR} directory in {path}")
    canvas.frames.clear()

    names = sorted(
        entry.name
        for entry in assets.iterdir()
        if entry.is_file() and fnmatch.fnmatchcase(entry.name.lower(), _FRAME_PATTERN)
    )
    if not names:
        raise Sdf2dFileError(f"no frames in {assets}")

    frames = [_read_frame(assets / name) for name in names]
    canvas.frames.extend(frames)
    canvas.current = 0