"""Brickfall input: events, sources and the manager."""

from .input_event import InputAction, InputEvent
from .input_manager import InputManager

__all__ = ['InputAction', 'InputEvent', 'InputManager']
