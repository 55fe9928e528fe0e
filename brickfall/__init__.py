"""Brickfall - a brick-breaking arcade game.

The simulation core lives in ``brickfall.game``; ``brickfall.game_mode``
wires it to a skin and keyboard input, and ``brickfall.main`` runs it in
a pygame window.
"""

__version__ = "1.0.0"
