"""Frames of an animation and the raster surface they are drawn on."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, ImageDraw, UnidentifiedImageError

SCENE_SIZE = (1280, 720)
SCENE_BACKGROUND = (18, 22, 28, 255)
FRAME_NAME = "frame_{:04d}.png"

_CHECKER_SIZE = 16
_CHECKER_LIGHT = (30, 32, 40, 255)
_CHECKER_DARK = (36, 38, 46, 255)
_ONION_OPACITY = 0.3
_PEN_COLOR = (122, 92, 255, 255)
_PEN_WIDTH = 4
_TEXT_COLOR = (255, 255, 255, 210)
_TEXT_ORIGIN = (10, 8)


@dataclass
class Frame:
    """A single raster frame."""

    image: Image.Image


def _blank_frame() -> Frame:
    return Frame(Image.new("RGBA", SCENE_SIZE, SCENE_BACKGROUND))


class Canvas:
    """Holds the frames, the current frame and the drawing state."""

    def __init__(self, on_change: Callable[[], None] | None = None) -> None:
        self.on_change = on_change
        self.frames: list[Frame] = []
        self.current = 0
        self.drawing = False
        self._last: tuple[int, int] = (0, 0)
        self._onion_prev = False
        self._onion_next = False
        self._fps = 24
        self.new_scene()

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()

    def new_scene(self) -> None:
        """Replace all frames with one blank frame."""
        self.frames = [_blank_frame()]
        self.current = 0
        self._changed()

    def import_image(self, path: str | Path) -> None:
        """Draw the image at ``path`` onto the current frame; unreadable files are ignored."""
        if not self.frames:
            self.new_scene()
        try:
            with Image.open(path) as source:
                overlay = source.convert("RGBA")
        except (OSError, UnidentifiedImageError):
            return
        target = self.frames[self.current].image
        width = min(overlay.width, target.width)
        height = min(overlay.height, target.height)
        target.alpha_composite(overlay.crop((0, 0, width, height)), (0, 0))
        self._changed()

    def export_png_sequence(self, directory: str | Path) -> None:
        """Write every frame to ``directory`` as numbered PNG files."""
        directory = Path(directory)
        for index, frame in enumerate(self.frames):
            frame.image.save(directory / FRAME_NAME.format(index), "PNG")

    def set_onion_prev(self, on: bool) -> None:
        self._onion_prev = bool(on)
        self._changed()

    def set_onion_next(self, on: bool) -> None:
        self._onion_next = bool(on)
        self._changed()

    def set_fps(self, value: int) -> None:
        self._fps = int(value)

    def press(self, x: int, y: int) -> None:
        """Start a stroke at ``(x, y)``."""
        self.drawing = True
        self._last = (x, y)

    def move(self, x: int, y: int) -> None:
        """Extend the current stroke to ``(x, y)`` if one is in progress."""
        if not self.drawing or not self.frames:
            return
        draw = ImageDraw.Draw(self.frames[self.current].image)
        draw.line([self._last, (x, y)], fill=_PEN_COLOR, width=_PEN_WIDTH)
        radius = _PEN_WIDTH / 2
        for cx, cy in (self._last, (x, y)):
            draw.ellipse((cx - radius, cy - radius, cx + radius, cy + radius), fill=_PEN_COLOR)
        self._last = (x, y)
        self._changed()

    def release(self) -> None:
        """End the current stroke."""
        self.drawing = False

    def overlay_text(self) -> str:
        """Return the frame counter and frame rate line shown over the canvas."""
        return f"Frame {self.current + 1}/{len(self.frames)}  |  FPS {self._fps}"

    def render(self, width: int, height: int) -> Image.Image:
        """Return the view of the canvas at the given widget size."""
        if width <= 0 or height <= 0:
            raise ValueError(f"render size must be positive, got {width}x{height}")
        out = Image.new("RGBA", (width, height))
        draw = ImageDraw.Draw(out)
        for y in range(0, height, _CHECKER_SIZE):
            for x in range(0, width, _CHECKER_SIZE):
                even = (x // _CHECKER_SIZE + y // _CHECKER_SIZE) % 2 == 0
                draw.rectangle(
                    (x, y, x + _CHECKER_SIZE - 1, y + _CHECKER_SIZE - 1),
                    fill=_CHECKER_LIGHT if even else _CHECKER_DARK,
                )

        if self.frames:
            image = self.frames[self.current].image
            scale = min(width / image.width, height / image.height)
            left = max(0, round((width - image.width * scale) / 2))
            top = max(0, round((height - image.height * scale) / 2))
            size = (
                min(round(image.width * scale), width - left),
                min(round(image.height * scale), height - top),
            )
            if size[0] > 0 and size[1] > 0:
                if self._onion_prev and self.current > 0:
                    _blit(out, self.frames[self.current - 1].image, size, (left, top), _ONION_OPACITY)
                _blit(out, image, size, (left, top), 1.0)
                if self._onion_next and self.current + 1 < len(self.frames):
                    _blit(out, self.frames[self.current + 1].image, size, (left, top), _ONION_OPACITY)

        text_layer = Image.new("RGBA", out.size, (0, 0, 0, 0))
        ImageDraw.Draw(text_layer).text(_TEXT_ORIGIN, self.overlay_text(), fill=_TEXT_COLOR)
        out.alpha_composite(text_layer)
        return out


def _blit(
    out: Image.Image,
    image: Image.Image,
    size: tuple[int, int],
    dest: tuple[int, int],
    opacity: float,
) -> None:
    layer = image.convert("RGBA").resize(size)
    if opacity < 1.0:
        layer.putalpha(layer.getchannel("A").point(lambda a: round(a * opacity)))
    out.alpha_composite(layer, dest)