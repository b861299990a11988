# sdf2d

A small 2D frame-by-frame animation starter. A scene is a list of raster
frames (1280×720 RGBA, filled with a dark background colour) that you can
draw on with a round purple pen, stamp imported images onto, preview with
onion skinning of the previous and next frames, and export as a numbered PNG
sequence.

## Installation

```
pip install .
```

The application window uses `tkinter`, which ships with most Python
installations; the library modules need only Pillow.

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

The package installs one command:

```
sdf2d
sdf2d --version
sdf2d --help
```

With no options it opens the application window: a drawing view, a toolbar
with "Prev"/"Next" onion-skin toggles and an FPS box (1–240, default 24),
Layers, Timeline and Properties panels, a File menu (New, Open…, Save,
Import Image…, Export PNG Sequence…, Exit, with Ctrl+N/O/S/Q shortcuts) and
a Help menu with an About box. Drag with the left mouse button in the view to
draw on the current frame.

## Using it from Python

```python
from sdf2d.canvas import Canvas
from sdf2d.document import Document
from sdf2d import sdf2dfile

canvas = Canvas()             # starts with one dark 1280x720 frame
canvas.set_fps(12)
canvas.set_onion_prev(True)

# Draw a stroke on the current frame.
canvas.press(100, 100)
canvas.move(200, 150)
canvas.move(300, 120)
canvas.release()

print(canvas.overlay_text())  # "Frame 1/1  |  FPS 12"

# Paste an image at the top-left corner of the current frame
# (files that cannot be read are ignored).
canvas.import_image("sketch.png")

# The view as the window shows it, as a Pillow image of the given size:
# checkerboard background, frame scaled to fit, onion skins, overlay text.
view = canvas.render(800, 600)

# Write frame_0000.png, frame_0001.png, ... into an existing directory.
canvas.export_png_sequence("out")

# Save as an .sdf2d scene directory and read it back.
sdf2dfile.save("shot.sdf2d", canvas)
sdf2dfile.load("shot.sdf2d", canvas)

# Scene settings round-trip through plain JSON objects.
doc = Document.from_json({"width": 1280, "height": 720})
print(doc.to_json())          # {'width': 1280, 'height': 720, 'fps': 24}
```

`Canvas(on_change=callback)` calls `callback` whenever the frames or the
onion-skin settings change. `Canvas.render` raises `ValueError` for a
non-positive size. `Document.from_json` falls back to 1920, 1080 and 24 for
missing or non-integer values.

`sdf2dfile.load` raises `sdf2dfile.Sdf2dFileError` when the path has no
`assets` directory, when it holds no `frame_*.png` files, or when a frame
cannot be read.

`sdf2d.app.AppWindow` holds the menu actions and works through a host object
that supplies the file dialogs, warnings, status messages and redraws; the
`sdf2d` command gives it a tkinter host.

## Scene format

A saved scene is a directory:

```
shot.sdf2d/
    scene.json           {"format":"sdf2d-0.1"}
    assets/
        frame_0000.png
        frame_0001.png
        ...
```

Frames are loaded in file-name order, and loading makes the first frame the
current one.

## What it does not do

- The Layers, Timeline and Properties panels only show placeholder labels;
  there are no layers, no timeline editing and no editable properties.
- There is no way to add, remove or step between frames in the window; a
  scene gets more than one frame only by loading a saved scene.
- `scene.json` records only the format name: the frame rate and the
  `Document` settings are not saved or loaded with a scene.
- The FPS value is shown in the overlay text only; there is no playback.