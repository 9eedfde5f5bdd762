"""Integration tests driving the kernel the way an editor view does.

A scene is loaded from disk, cursor positions are mapped from screen to
object space, and the hit-test and containment queries are checked before
and after zooming the view around the cursor.
"""

import json
from pathlib import Path

import pytest

from polyhit.config import GeometryConfig, PolyhitSettings
from polyhit.core import (
    HitTarget,
    classify_target,
    find_corner,
    find_edge,
    shape_contains_point,
    to_object,
    to_screen,
    wheel_zoom,
)
from polyhit.domain import Inclusion, Point, TransformConvention, Viewport
from polyhit.io import SceneReader


@pytest.fixture
def scene_path(tmp_path: Path) -> Path:
    """A letter-O outline and a filled square to its right."""
    data = {
        "kind": "group",
        "children": [
            {
                "kind": "polygon",
                "contours": [
                    {"kind": "contour", "points": [[0, 0], [60, 0], [60, 80], [0, 80]]},
                    {"kind": "contour", "points": [[15, 15], [45, 15], [45, 65], [15, 65]]},
                ],
            },
            {"kind": "contour", "points": [[100, 0], [140, 0], [140, 40], [100, 40]]},
        ],
    }
    path = tmp_path / "letters.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture(params=list(TransformConvention), ids=lambda c: c.value)
def viewport(request: pytest.FixtureRequest) -> Viewport:
    return Viewport(scale=2.0, offset=Point(10.0, 10.0), convention=request.param)


def test_vertex_stays_under_cursor_while_zooming(scene_path: Path, viewport: Viewport) -> None:
    shape = SceneReader(scene_path).load()
    geometry = GeometryConfig()

    cursor = to_screen(viewport, Point(45, 65))
    for delta in (120, 120, -360, 480):
        viewport = wheel_zoom(viewport, delta, cursor)
        point = to_object(viewport, cursor)
        reach = geometry.handle_radius_at(viewport.scale)

        hit = find_corner(point, shape, reach)
        assert hit.success
        assert hit.contour[hit.index] == Point(45, 65)
        assert classify_target(point, shape, reach) is HitTarget.CORNER


def test_handle_reach_shrinks_when_zoomed_in(scene_path: Path) -> None:
    """Three screen pixels cover less of the object as the scale grows."""
    shape = SceneReader(scene_path).load()
    geometry = GeometryConfig(handle_radius=3.0)
    near_edge = Point(30, 2)

    wide = Viewport(scale=1.0)
    assert find_edge(near_edge, shape, geometry.handle_radius_at(wide.scale)).success

    close = Viewport(scale=4.0)
    assert not find_edge(near_edge, shape, geometry.handle_radius_at(close.scale)).success
    assert classify_target(near_edge, shape, geometry.handle_radius_at(close.scale)) is (
        HitTarget.BODY
    )


def test_hole_and_separate_square(scene_path: Path, viewport: Viewport) -> None:
    shape = SceneReader(scene_path).load()

    def inclusion_at(x: float, y: float) -> Inclusion:
        return shape_contains_point(shape, to_object(viewport, to_screen(viewport, Point(x, y))))

    assert inclusion_at(5, 40) is Inclusion.INSIDE
    assert inclusion_at(30, 40) is Inclusion.OUTSIDE
    assert inclusion_at(120, 20) is Inclusion.INSIDE
    assert inclusion_at(80, 20) is Inclusion.OUTSIDE
    assert inclusion_at(100, 20) is Inclusion.BOUNDARY


def test_edge_insertion_point(scene_path: Path) -> None:
    """Clicking on an edge reports where a new vertex would go."""
    shape = SceneReader(scene_path).load()
    hit = find_edge(Point(140.5, 20), shape, 1.0)

    assert hit.success
    assert (hit.start_index, hit.end_index) == (1, 2)
    assert hit.insert_index == 2
    assert hit.nearest == Point(140.0, 20.0)


def test_settings_drive_a_zoom_session(scene_path: Path) -> None:
    settings = PolyhitSettings()
    viewport = Viewport(
        scale=settings.viewport.initial_scale,
        convention=settings.viewport.convention,
    )
    cursor = Point(120.0, 20.0)
    anchored = to_object(viewport, cursor)

    for _ in range(5):
        viewport = wheel_zoom(viewport, 120, cursor, settings.viewport.scale_per_delta)

    assert viewport.scale == pytest.approx(1.5)
    assert to_object(viewport, cursor).x == pytest.approx(anchored.x)
    assert to_object(viewport, cursor).y == pytest.approx(anchored.y)
    shape = SceneReader(scene_path).load()
    assert shape_contains_point(shape, to_object(viewport, cursor)) is Inclusion.INSIDE
