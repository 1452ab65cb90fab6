"""Count vertical black lines in raster images."""

__version__ = "1.0.0"
