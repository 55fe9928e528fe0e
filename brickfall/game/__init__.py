"""Brickfall simulation core: entities, physics, power-ups, levels and the scheduler."""
