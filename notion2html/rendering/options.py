"""
Render configuration for block tree → HTML output.

Centralizes behavior flags so callers can tune defaults without touching
core logic. All fields are optional at call sites; None means "use current
module defaults".
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    # Logging/debug
    debug: bool = False

    # Nesting guard. Exports are trees in practice, but nothing upstream
    # enforces it; past this depth a block renders as empty markup.
    max_depth: int = 64

    # Cut a block that is already being rendered further up the current path.
    detect_cycles: bool = True

    def depth_exceeded(self, depth: int) -> bool:
        return self.max_depth > 0 and depth > self.max_depth


DEFAULT_CONFIG = RenderConfig()
