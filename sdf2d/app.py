"""Main window of the editor and the command that starts it."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from sdf2d.canvas import Canvas
from sdf2d.sdf2dfile import Sdf2dFileError, load, save

APP_NAME = "SDF2D"
APP_VERSION = "0.1.0"
ABOUT_TEXT = "SDF2D — 2D Animation Starter\n\nDockable UI, raster canvas, simple I/O."


@dataclass(frozen=True)
class DockLayers:
    title: str = "Layers"
    side: str = "left"
    labels: tuple[str, ...] = ("Layers (placeholder)",)
    buttons: tuple[str, ...] = ("Add Raster Layer",)


@dataclass(frozen=True)
class DockTimeline:
    title: str = "Timeline"
    side: str = "bottom"
    labels: tuple[str, ...] = ("Timeline / X-Sheet (placeholder)",)
    buttons: tuple[str, ...] = ()


@dataclass(frozen=True)
class DockProperties:
    title: str = "Properties"
    side: str = "right"
    labels: tuple[str, ...] = ("Properties (placeholder)",)
    buttons: tuple[str, ...] = ()


class AppWindow:
    """Menu actions of the editor, acting on a canvas through a host toolkit."""

    title = APP_NAME
    minimum_size = (1200, 800)
    fps_range = (1, 240)

    def __init__(self, host: Any, canvas: Canvas | None = None) -> None:
        self.host = host
        self.canvas = canvas if canvas is not None else Canvas()
        self.layers = DockLayers()
        self.timeline = DockTimeline()
        self.props = DockProperties()
        host.show_status("Ready")

    def new_scene(self) -> None:
        self.canvas.new_scene()
        self.host.refresh()
        self.host.show_status("New scene", 1500)

    def open_scene(self) -> None:
        path = self.host.ask_open_file("Open .sdf2d or .json", [("SDF2D", "*.sdf2d *.json")])
        if not path:
            return
        try:
            load(path, self.canvas)
        except (Sdf2dFileError, OSError):
            self.host.warn("Open Failed", "Could not open.")
        self.host.refresh()

    def save_scene(self) -> None:
        path = self.host.ask_save_file("Save .sdf2d", "untitled.sdf2d", [("SDF2D", "*.sdf2d")])
        if not path:
            return
        try:
            save(path, self.canvas)
        except OSError:
            self.host.warn("Save Failed", "Could not save.")

    def import_image(self) -> None:
        path = self.host.ask_open_file("Import Image", [("Images", "*.png *.jpg *.jpeg")])
        if not path:
            return
        self.canvas.import_image(path)
        self.host.refresh()

    def export_png_sequence(self) -> None:
        directory = self.host.ask_directory("Export PNG Sequence")
        if directory:
            self.canvas.export_png_sequence(directory)


class _TkHost:
    """Host built on tkinter."""

    def __init__(self, root: Any) -> None:
        import tkinter as tk
        from tkinter import filedialog, messagebox

        self._tk, self._dialog, self._box, self.root = tk, filedialog, messagebox, root
        self._status = tk.StringVar(root)
        tk.Label(root, textvariable=self._status, anchor="w").pack(side="bottom", fill="x")
        self._job = self._window = self._view = self._photo = None

    def ask_open_file(self, title, filetypes):
        return self._dialog.askopenfilename(parent=self.root, title=title, filetypes=filetypes) or ""

    def ask_save_file(self, title, initial, filetypes):
        return self._dialog.asksaveasfilename(
            parent=self.root, title=title, initialfile=initial, filetypes=filetypes
        ) or ""

    def ask_directory(self, title):
        return self._dialog.askdirectory(parent=self.root, title=title) or ""

    def warn(self, title, message):
        self._box.showwarning(title, message, parent=self.root)

    def show_status(self, message, timeout_ms=0):
        if self._job is not None:
            self.root.after_cancel(self._job)
            self._job = None
        self._status.set(message)
        if timeout_ms:
            self._job = self.root.after(timeout_ms, lambda: self._status.set(""))

    def refresh(self):
        if self._view is None:
            return
        width, height = self._view.winfo_width(), self._view.winfo_height()
        if width < 2 or height < 2:
            return
        from PIL import ImageTk

        self._photo = ImageTk.PhotoImage(self._window.canvas.render(width, height))
        self._view.delete("all")
        self._view.create_image(0, 0, anchor="nw", image=self._photo)

    def attach(self, window: AppWindow) -> None:
        tk, root, canvas = self._tk, self.root, window.canvas
        self._window = window
        root.title(window.title)
        root.minsize(*window.minimum_size)

        menubar = tk.Menu(root)
        file_menu = tk.Menu(menubar, tearoff=False)
        entries = [
            ("New", "Ctrl+N", "<Control-n>", window.new_scene),
            ("Open…", "Ctrl+O", "<Control-o>", window.open_scene),
            ("Save", "Ctrl+S", "<Control-s>", window.save_scene),
            None,
            ("Import Image…", "", None, window.import_image),
            None,
            ("Export PNG Sequence…", "", None, window.export_png_sequence),
            None,
            ("Exit", "Ctrl+Q", "<Control-q>", root.destroy),
        ]
        for entry in entries:
            if entry is None:
                file_menu.add_separator()
                continue
            label, accel, key, action = entry
            file_menu.add_command(label=label, accelerator=accel, command=action)
            if key:
                root.bind(key, lambda _e, act=action: act())
        menubar.add_cascade(label="File", menu=file_menu)
        help_menu = tk.Menu(menubar, tearoff=False)
        help_menu.add_command(
            label="About SDF2D",
            command=lambda: self._box.showinfo("About SDF2D", ABOUT_TEXT, parent=root),
        )
        menubar.add_cascade(label="Help", menu=help_menu)
        root.config(menu=menubar)

        bar = tk.Frame(root)
        bar.pack(side="top", fill="x")
        prev_var, next_var = tk.BooleanVar(root), tk.BooleanVar(root)
        low, high = window.fps_range
        fps_var = tk.IntVar(root, value=24)

        def apply_fps(*_args: Any) -> None:
            try:
                canvas.set_fps(max(low, min(high, fps_var.get())))
            except tk.TclError:
                return
            self.refresh()

        tk.Label(bar, text="Onion: ").pack(side="left")
        tk.Checkbutton(bar, text="Prev", variable=prev_var,
                       command=lambda: canvas.set_onion_prev(prev_var.get())).pack(side="left")
        tk.Checkbutton(bar, text="Next", variable=next_var,
                       command=lambda: canvas.set_onion_next(next_var.get())).pack(side="left")
        tk.Label(bar, text="  FPS").pack(side="left")
        spin = tk.Spinbox(bar, from_=low, to=high, width=5, textvariable=fps_var, command=apply_fps)
        spin.bind("<Return>", apply_fps)
        spin.pack(side="left")

        for dock in (window.timeline, window.layers, window.props):
            frame = tk.LabelFrame(root, text=dock.title)
            for text in dock.labels:
                tk.Label(frame, text=text, anchor="w").pack(side="top", fill="x")
            for text in dock.buttons:
                tk.Button(frame, text=text).pack(side="top", fill="x")
            frame.pack(side=dock.side, fill="x" if dock.side == "bottom" else "y")

        self._view = tk.Canvas(root, highlightthickness=0, background="black")
        self._view.pack(side="top", fill="both", expand=True)
        self._view.bind("<Configure>", lambda _e: self.refresh())
        self._view.bind("<ButtonPress-1>", lambda e: canvas.press(e.x, e.y))
        self._view.bind("<Motion>", lambda e: canvas.move(e.x, e.y))
        self._view.bind("<ButtonRelease-1>", lambda _e: canvas.release())
        canvas.on_change = self.refresh


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(prog="sdf2d", description="2D animation editor.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the editor window and run until it is closed."""
    parse_args(argv)
    import tkinter as tk

    root = tk.Tk(className=APP_NAME)
    host = _TkHost(root)
    host.attach(AppWindow(host))
    root.mainloop()
    return 0