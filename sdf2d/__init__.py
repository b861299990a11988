"""Frame-by-frame 2D raster animation: canvas, scene settings, scene files and application window."""

__version__ = "0.1.0"
__all__ = ["__version__"]