"""Brickfall skins (rendering + audio)."""

from .base import BrickBreakerSkin, NullSkin
from .geometric import GeometricSkin

__all__ = ['BrickBreakerSkin', 'NullSkin', 'GeometricSkin']
