"""List pending pacman updates and install them from an interactive terminal session."""

__version__ = "0.1.0"