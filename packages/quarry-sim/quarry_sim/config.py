"""Centralised configuration constants for the quarry simulation."""
from __future__ import annotations

# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
DEFAULT_TPS: int = 20

# ---------------------------------------------------------------------------
# Tiles
# ---------------------------------------------------------------------------
TILE_SIZE: float = 64.0
GRID_W: int = 10
GRID_H: int = 10
INITIAL_TILE_DURABILITY: int = 10

# ---------------------------------------------------------------------------
# Buildings
# ---------------------------------------------------------------------------
CORE_ACCEPT_RADIUS: int = 50
DEFAULT_FOOTPRINT: tuple[float, float] = (100.0, 100.0)

# ---------------------------------------------------------------------------
# Default site layout
# ---------------------------------------------------------------------------
CORE_POSITION: tuple[float, float] = (900.0, 300.0)
BRICK_WORKS_POSITION: tuple[float, float] = (900.0, 600.0)
BRICK_WORKS_MAX_INPUT: int = 3
BRICK_WORKS_MAX_OUTPUT: int = 100
BRICK_WORKS_SECONDS: float = 10.0  # wall-clock seconds per conversion
