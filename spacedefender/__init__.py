"""An arcade shooter with enemy waves, barriers and power-ups, playable with pygame."""

__version__ = "0.1.0"