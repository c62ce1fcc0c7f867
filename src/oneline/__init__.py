"""oneline - Rule engine for one-stroke line puzzles.

A puzzle board holds dots the line must touch, shapes it must pass through
exactly once and red areas it must never cross. oneline decides, from the
sampled points of a single stroke, whether those rules hold: both for a
finished line and segment by segment while it is being drawn.

Example:
    $ oneline check

This validates every bundled puzzle's reference solution and exits non-zero
if any of them breaks its own rules.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
