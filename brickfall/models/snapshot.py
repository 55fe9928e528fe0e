"""
Render snapshot models.

A RenderSnapshot is the read-only view of a session handed to the skin
once per tick. Skins never see the live entities.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .enums import BrickType, PowerUpType, SessionPhase
from .primitives import Point2D, Rectangle


class BrickView(BaseModel):
    """A visible brick and where it sits in the grid."""
    column: int = Field(ge=0)
    row: int = Field(ge=0)
    rect: Rectangle
    brick_type: BrickType
    status: int

    model_config = ConfigDict(frozen=True)


class BallView(BaseModel):
    """Ball position and appearance."""
    center: Point2D
    radius: float = Field(gt=0)
    is_fireball: bool = False

    model_config = ConfigDict(frozen=True)


class PowerUpView(BaseModel):
    """A falling power-up."""
    position: Point2D
    size: float = Field(gt=0)
    power_up_type: PowerUpType

    model_config = ConfigDict(frozen=True)


class RenderSnapshot(BaseModel):
    """Everything the skin needs to draw one frame.

    Examples:
        >>> snapshot = session.snapshot()
        >>> snapshot.lives
        3
    """
    field_width: float = Field(gt=0)
    field_height: float = Field(gt=0)
    paddle: Rectangle
    is_wide: bool = False
    ball: BallView
    bricks: List[BrickView] = Field(default_factory=list)
    power_ups: List[PowerUpView] = Field(default_factory=list)
    score: int = Field(ge=0)
    lives: int = Field(ge=0)
    level: int = Field(ge=1)
    phase: SessionPhase

    model_config = ConfigDict(frozen=True)
