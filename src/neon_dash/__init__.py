"""
Neon Dash package root.

The engine subpackage holds the pure game logic (physics, obstacles,
collision, session state machine). Rendering with Arcade and the high score
storage backends live outside of it and only consume or feed the engine.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
