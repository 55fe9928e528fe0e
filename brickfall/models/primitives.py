"""
Shared primitive data types.

Geometric types used by render snapshots and the skin.
"""

from pydantic import BaseModel, ConfigDict, field_validator


class Point2D(BaseModel):
    """Immutable 2D point for positions on the field.

    Attributes:
        x: X coordinate (horizontal, grows right)
        y: Y coordinate (vertical, grows down)

    Examples:
        >>> pos = Point2D(x=400.0, y=570.0)
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


class Rectangle(BaseModel):
    """Immutable axis-aligned rectangle, positioned at its top-left corner.

    Examples:
        >>> rect = Rectangle(x=35.0, y=40.0, width=75.0, height=20.0)
    """
    x: float
    y: float
    width: float
    height: float

    @field_validator('width', 'height')
    @classmethod
    def validate_positive_dimensions(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
