"""
Pydantic models and enums shared across Brickfall.

Usage:
    >>> from brickfall.models import Point2D, BrickType, RenderSnapshot
"""

from .primitives import Point2D, Rectangle
from .enums import BrickType, PowerUpType, SoundCue, PaddleDirection, SessionPhase
from .snapshot import BrickView, BallView, PowerUpView, RenderSnapshot

__all__ = [
    'Point2D', 'Rectangle',
    'BrickType', 'PowerUpType', 'SoundCue', 'PaddleDirection', 'SessionPhase',
    'BrickView', 'BallView', 'PowerUpView', 'RenderSnapshot',
]
