"""Scene reader for loading shape trees from JSON.

A scene file holds one shape in its dictionary form, typically a group:

    {"kind": "group", "children": [
        {"kind": "polygon", "contours": [
            {"kind": "contour", "points": [[0, 0], [20, 0], [20, 20], [0, 20]]},
            {"kind": "contour", "points": [[5, 5], [15, 5], [15, 15], [5, 15]]}
        ]}
    ]}
"""

import json
from pathlib import Path

from polyhit.domain import Shape, iter_contours, shape_from_dict
from polyhit.exceptions import SceneLoadError, ShapeError


class SceneReader:
    """Loads a scene file into a shape tree.

    Example:
        reader = SceneReader(Path("scene.json"))
        reader.load()
        print(reader.contour_count)
    """

    def __init__(self, scene_path: Path) -> None:
        """Initialize the scene reader.

        Args:
            scene_path: Path to the JSON scene file
        """
        self._scene_path = scene_path
        self._shape: Shape | None = None

    def load(self) -> Shape:
        """Load and parse the scene file.

        Returns:
            The root shape of the scene

        Raises:
            SceneLoadError: If the file is missing, is not JSON, or does not
                describe a shape
        """
        if not self._scene_path.exists():
            raise SceneLoadError(str(self._scene_path), "file not found")

        try:
            data = json.loads(self._scene_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise SceneLoadError(str(self._scene_path), str(e)) from e

        if not isinstance(data, dict):
            raise SceneLoadError(str(self._scene_path), "top level must be an object")

        try:
            self._shape = shape_from_dict(data)
        except ShapeError as e:
            raise SceneLoadError(str(self._scene_path), str(e)) from e
        except (KeyError, TypeError, ValueError) as e:
            raise SceneLoadError(str(self._scene_path), f"malformed shape data: {e}") from e

        return self._shape

    @property
    def shape(self) -> Shape:
        """Return the loaded root shape.

        Raises:
            RuntimeError: If the scene has not been loaded yet
        """
        if self._shape is None:
            raise RuntimeError("Scene not loaded. Call load() first.")
        return self._shape

    @property
    def contour_count(self) -> int:
        """Return the number of contours in the scene."""
        return sum(1 for _ in iter_contours(self.shape))

    @property
    def kind(self) -> str:
        """Return the kind of the root shape ("group", "polygon" or "contour")."""
        return self.shape.to_dict()["kind"]
