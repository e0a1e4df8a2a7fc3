"""Turn-based banana-throwing artillery game on a 128x64 monochrome framebuffer."""

__version__ = "0.1.0"
__all__ = ["framebuffer", "sound", "world", "physics", "game"]