import pytest
from PIL import Image

from sdf2d.app import AppWindow, DockLayers, DockProperties, DockTimeline, parse_args
from sdf2d.canvas import SCENE_BACKGROUND


class FakeHost:
    def __init__(self, open_file="", save_file="", directory=""):
        self.open_file = open_file
        self.save_file = save_file
        self.directory = directory
        self.statuses = []
        self.warnings = []
        self.requests = []
        self.refreshes = 0

    def ask_open_file(self, title, filetypes):
        self.requests.append(("open", title))
        return self.open_file

    def ask_save_file(self, title, initial, filetypes):
        self.requests.append(("save", title, initial))
        return self.save_file

    def ask_directory(self, title):
        self.requests.append(("directory", title))
        return self.directory

    def warn(self, title, message):
        self.warnings.append((title, message))

    def show_status(self, message, timeout_ms=0):
        self.statuses.append((message, timeout_ms))

    def refresh(self):
        self.refreshes += 1


def test_window_starts_ready():
    host = FakeHost()
    window = AppWindow(host)
    assert host.statuses == [("Ready", 0)]
    assert len(window.canvas.frames) == 1


def test_new_scene_resets_and_reports():
    host = FakeHost()
    window = AppWindow(host)
    window.canvas.press(10, 10)
    window.canvas.move(50, 10)
    window.new_scene()
    assert window.canvas.frames[0].image.getpixel((30, 10)) == SCENE_BACKGROUND
    assert host.statuses[-1] == ("New scene", 1500)


def test_open_cancelled_changes_nothing():
    host = FakeHost(open_file="")
    window = AppWindow(host)
    frames = list(window.canvas.frames)
    window.open_scene()
    assert window.canvas.frames == frames
    assert host.warnings == []


def test_open_missing_warns(tmp_path):
    host = FakeHost(open_file=str(tmp_path / "missing.sdf2d"))
    window = AppWindow(host)
    window.open_scene()
    assert host.warnings == [("Open Failed", "Could not open.")]


def test_save_then_open_round_trip(tmp_path):
    target = str(tmp_path / "untitled.sdf2d")
    host = FakeHost(open_file=target, save_file=target)
    window = AppWindow(host)
    window.canvas.press(100, 100)
    window.canvas.move(200, 100)
    window.save_scene()
    window.new_scene()
    window.open_scene()
    assert host.warnings == []
    assert window.canvas.frames[0].image.getpixel((150, 100)) == (122, 92, 255, 255)
    assert ("save", "Save .sdf2d", "untitled.sdf2d") in host.requests


def test_save_cancelled_writes_nothing(tmp_path):
    host = FakeHost(save_file="")
    window = AppWindow(host)
    window.save_scene()
    assert host.requests == [("save", "Save .sdf2d", "untitled.sdf2d")]
    assert host.warnings == []
    assert len(window.canvas.frames) == 1
    assert list(tmp_path.iterdir()) == []


def test_save_failure_warns(tmp_path):
    blocker = tmp_path / "file.txt"
    blocker.write_text("x")
    host = FakeHost(save_file=str(blocker / "scene.sdf2d"))
    AppWindow(host).save_scene()
    assert host.warnings == [("Save Failed", "Could not save.")]


def test_import_image(tmp_path):
    path = tmp_path / "green.png"
    Image.new("RGBA", (6, 6), (0, 200, 0, 255)).save(path)
    host = FakeHost(open_file=str(path))
    window = AppWindow(host)
    window.import_image()
    assert window.canvas.frames[0].image.getpixel((3, 3)) == (0, 200, 0, 255)


def test_export_png_sequence(tmp_path):
    host = FakeHost(directory=str(tmp_path))
    AppWindow(host).export_png_sequence()
    assert host.requests == [("directory", "Export PNG Sequence")]
    assert [p.name for p in tmp_path.iterdir()] == ["frame_0000.png"]
    with Image.open(tmp_path / "frame_0000.png") as exported:
        assert exported.size == (1280, 720)
        assert exported.convert("RGBA").getpixel((5, 5)) == SCENE_BACKGROUND


def test_docks_describe_panels():
    assert DockLayers().buttons == ("Add Raster Layer",)
    assert DockTimeline().labels == ("Timeline / X-Sheet (placeholder)",)
    assert DockProperties().title == "Properties"


def test_parse_args_version(capsys):
    with pytest.raises(SystemExit) as info:
        parse_args(["--version"])
    assert info.value.code == 0
    assert "0.1.0" in capsys.readouterr().out


def test_parse_args_rejects_unknown():
    with pytest.raises(SystemExit) as info:
        parse_args(["--bogus"])
    assert info.value.code == 2