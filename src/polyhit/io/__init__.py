"""Scene input for the polyhit inspection CLI.

This module reads JSON scene files into domain shape trees. It is read-only:
the kernel never writes or persists scenes.

Key classes:
- SceneReader: Load a scene file and expose its root shape
"""

from polyhit.io.reader import SceneReader

__all__ = [
    "SceneReader",
]
