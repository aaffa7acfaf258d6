"""
display_manager.py
------------------
Drawing surface with a backing buffer that follows the window size.

Responsibilities:
- Window creation (resizable)
- Keeping the buffer size equal to the displayed size
- Presenting the buffer to the window
"""

import pygame

from snowfall.core.debug.debug_logger import DebugLogger
from snowfall.core.runtime.snow_settings import Display


class DrawingSurface:
    """
    Pixel buffer the animation paints into, plus the window that shows it.

    The window is anything with get_size() and blit() (the pygame display
    surface in the app, a plain pygame.Surface in tests). The buffer starts
    unsized and is created on the first resize_to_display_size() call.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, window, flip=None):
        """
        Args:
            window: Surface the buffer is presented on
            flip: Callable run after presenting (pygame.display.flip for windows)
        """
        self.window = window
        self.buffer = None
        self._flip = flip

    @classmethod
    def open_window(cls, width=Display.WIDTH, height=Display.HEIGHT, caption=Display.CAPTION):
        """
        Create a resizable pygame window and bind a surface to it.

        Raises:
            pygame.error: If no display is available.
        """
        window = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(caption)

        DebugLogger.init_entry("DrawingSurface")
        DebugLogger.init_sub(f"Window: {width}x{height} (resizable)")
        return cls(window, flip=pygame.display.flip)

    def rebind(self, window):
        """Point at a new window surface (after the host recreates it)."""
        self.window = window
        DebugLogger.state(f"Window rebound at {window.get_size()[0]}x{window.get_size()[1]}",
                          category="display")

    # ===========================================================
    # Sizing
    # ===========================================================

    @property
    def display_size(self):
        """Current displayed size of the window in pixels."""
        return tuple(self.window.get_size())

    @property
    def size(self):
        """Current buffer size in pixels, (0, 0) before first sizing."""
        if self.buffer is None:
            return (0, 0)
        return tuple(self.buffer.get_size())

    @property
    def width(self):
        return self.size[0]

    @property
    def height(self):
        return self.size[1]

    def resize_to_display_size(self):
        """
        Match the buffer to the displayed size.

        Returns:
            bool: True if the buffer was (re)created.
        """
        display_size = self.display_size
        if self.buffer is not None and self.size == display_size:
            return False

        old = self.size
        self.buffer = pygame.Surface(display_size)
        DebugLogger.state(
            f"Buffer resized {old[0]}x{old[1]} → {display_size[0]}x{display_size[1]}",
            category="display"
        )
        return True

    # ===========================================================
    # Presentation
    # ===========================================================

    def present(self):
        """Copy the buffer to the window and flip."""
        if self.buffer is None:
            return
        self.window.blit(self.buffer, (0, 0))
        if self._flip is not None:
            self._flip()
