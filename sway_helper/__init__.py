"""sway-helper - Context-aware commands for the sway window manager.

This package provides:
- Directional resize that grows or shrinks the focused container
  depending on where its neighbors are
- Two-display placement relative to a reference display
"""

__version__ = "0.1.0"
__author__ = "sway-helper contributors"
__license__ = "MIT"

__all__ = ["__version__", "__author__", "__license__"]
