"""Plain-text rendering of grid snapshots."""

import numpy as np

from ..core.config import ALIVE_GLYPH, DEAD_GLYPH


def generation_label(generation: int) -> str:
    """Heading printed above a snapshot."""
    if generation == 0:
        return "Generation: 0 (Initial State)"
    return f"Generation: {generation}"


def format_grid(snapshot: np.ndarray, alive: str = ALIVE_GLYPH, dead: str = DEAD_GLYPH) -> str:
    """Render a row-major snapshot, one line per row.

    Args:
        snapshot: Boolean array of shape (height, width)
        alive: Glyph for a living cell
        dead: Glyph for a dead cell

    Returns:
        Rows joined by newlines, without a trailing newline
    """
    return "\n".join("".join(alive if cell else dead for cell in row) for row in snapshot)


def format_generation(
    generation: int, snapshot: np.ndarray, alive: str = ALIVE_GLYPH, dead: str = DEAD_GLYPH
) -> str:
    """Render a labelled snapshot followed by the blank separator line."""
    return f"{generation_label(generation)}\n{format_grid(snapshot, alive, dead)}\n"
