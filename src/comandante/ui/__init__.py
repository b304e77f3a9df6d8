"""Text UI layer for comandante."""

from .app import ComandanteTuiApp
from .controller import ShellController, ShellSnapshot

__all__ = ["ComandanteTuiApp", "ShellController", "ShellSnapshot"]
