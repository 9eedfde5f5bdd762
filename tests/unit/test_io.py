"""Unit tests for the scene I/O layer."""

import json
from pathlib import Path

import pytest

from polyhit.domain import Contour, Group, Point, Polygon
from polyhit.exceptions import SceneLoadError
from polyhit.io import SceneReader


@pytest.fixture
def scene_file(tmp_path: Path) -> Path:
    """Write a group holding a donut polygon and a loose triangle."""
    data = {
        "kind": "group",
        "children": [
            {
                "kind": "polygon",
                "contours": [
                    {"kind": "contour", "points": [[0, 0], [20, 0], [20, 20], [0, 20]]},
                    {"kind": "contour", "points": [[5, 5], [15, 5], [15, 15], [5, 15]]},
                ],
            },
            {"kind": "contour", "points": [[30, 30], [40, 30], [35, 40]]},
        ],
    }
    path = tmp_path / "scene.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestSceneReader:
    """Tests for SceneReader class."""

    def test_init(self) -> None:
        """Test SceneReader initialization."""
        path = Path("scene.json")
        reader = SceneReader(path)
        assert reader._scene_path == path
        assert reader._shape is None

    def test_shape_before_load(self) -> None:
        """Accessing the shape before loading raises RuntimeError."""
        reader = SceneReader(Path("scene.json"))
        with pytest.raises(RuntimeError, match="Scene not loaded"):
            _ = reader.shape

    def test_load(self, scene_file: Path) -> None:
        reader = SceneReader(scene_file)
        shape = reader.load()

        assert isinstance(shape, Group)
        assert reader.shape is shape
        assert reader.kind == "group"
        assert reader.contour_count == 3

        donut = shape[0]
        assert isinstance(donut, Polygon)
        assert donut[1][0] == Point(5.0, 5.0)
        assert shape[1] == Contour.from_tuples([(30, 30), (40, 30), (35, 40)])

    def test_load_single_contour(self, tmp_path: Path) -> None:
        path = tmp_path / "dot.json"
        path.write_text('{"kind": "contour", "points": [[3, 3]]}', encoding="utf-8")
        reader = SceneReader(path)
        assert reader.load() == Contour.from_tuples([(3, 3)])
        assert reader.kind == "contour"

    def test_load_nonexistent_file(self, tmp_path: Path) -> None:
        reader = SceneReader(tmp_path / "missing.json")
        with pytest.raises(SceneLoadError, match="file not found"):
            reader.load()

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SceneLoadError) as exc_info:
            SceneReader(path).load()
        assert exc_info.value.path == str(path)

    def test_top_level_must_be_object(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text("[[0, 0], [1, 1]]", encoding="utf-8")
        with pytest.raises(SceneLoadError, match="top level"):
            SceneReader(path).load()

    def test_unknown_kind(self, tmp_path: Path) -> None:
        path = tmp_path / "circle.json"
        path.write_text('{"kind": "circle", "radius": 4}', encoding="utf-8")
        with pytest.raises(SceneLoadError, match="circle"):
            SceneReader(path).load()

    def test_malformed_points(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"kind": "contour", "points": [[1, 2, 3]]}', encoding="utf-8")
        with pytest.raises(SceneLoadError, match="malformed"):
            SceneReader(path).load()

    def test_missing_points(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.json"
        path.write_text('{"kind": "polygon"}', encoding="utf-8")
        with pytest.raises(SceneLoadError, match="malformed"):
            SceneReader(path).load()
