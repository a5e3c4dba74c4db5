"""ITE 8291 (rev 2) keyboard backlight controller."""

__version__ = "0.2.0"
