"""Scene preprocessing: world mapping and expanded bounding boxes."""

import pytest

from ansi_shape_renderer.preprocess import (AA_REGION_PIXELS, WORLD_SPAN, outward_stroke_extension,
                                            prepare_scene, stroke_band, world_coord)
from ansi_shape_renderer.scene import Scene, ShapeKind, StrokePosition

from helpers import make_shape


def test_world_coord_is_pixel_center() -> None:
    assert world_coord(0, 2, 10.0) == pytest.approx(-2.5)
    assert world_coord(1, 2, 10.0) == pytest.approx(2.5)
    assert world_coord(0, 1, 10.0) == 0.0


def test_smaller_dimension_spans_ten_world_units(background) -> None:
    prepared = prepare_scene(Scene(40, 20, background))

    assert prepared.world_units_per_pixel == pytest.approx(0.5)
    assert prepared.world_height == pytest.approx(WORLD_SPAN)
    assert prepared.world_width == pytest.approx(20.0)
    assert prepared.aa_region == pytest.approx(AA_REGION_PIXELS * 0.5)

    assert len(prepared.world_xs) == 40
    assert len(prepared.world_ys) == 20
    assert prepared.world_xs[0] == pytest.approx(-9.75)
    assert prepared.world_xs[-1] == pytest.approx(9.75)
    assert prepared.world_ys[0] == pytest.approx(-4.75)


def test_tall_canvas_spans_ten_units_horizontally(background) -> None:
    prepared = prepare_scene(Scene(10, 40, background))
    assert prepared.world_units_per_pixel == pytest.approx(1.0)
    assert prepared.world_width == pytest.approx(10.0)
    assert prepared.world_height == pytest.approx(40.0)


@pytest.mark.parametrize(
    ("position", "band", "extension"),
    [
        (StrokePosition.INSIDE, (-2.0, 0.0), 0.0),
        (StrokePosition.CENTER, (-1.0, 1.0), 1.0),
        (StrokePosition.OUTSIDE, (0.0, 2.0), 2.0),
    ],
)
def test_stroke_band_and_extension(position, band, extension) -> None:
    assert stroke_band(position, 2.0) == band
    assert outward_stroke_extension(position, 2.0) == extension


def test_shape_box_grows_by_aa_band_and_outer_stroke(background) -> None:
    shape = make_shape(kind=ShapeKind.CIRCLE, size=2, x=1, y=1,
                       stroke_position=StrokePosition.OUTSIDE, stroke_width=2.0)
    prepared = prepare_scene(Scene(40, 20, background, (shape,)))
    ps = prepared.shapes[0]

    # 2 px at 0.5 world units per pixel
    assert ps.stroke_width == pytest.approx(1.0)
    assert (ps.band_min, ps.band_max) == pytest.approx((0.0, 1.0))
    expand = prepared.aa_region + 1.0
    assert ps.box.min_x == pytest.approx(1.0 - 2.0 - expand)
    assert ps.box.max_y == pytest.approx(1.0 + 2.0 + expand)


def test_inside_stroke_does_not_grow_box(background) -> None:
    shape = make_shape(kind=ShapeKind.SQUARE, size=3,
                       stroke_position=StrokePosition.INSIDE, stroke_width=10.0)
    ps = prepare_scene(Scene(20, 20, background, (shape,))).shapes[0]
    assert ps.box.max_x == pytest.approx(3.0 + AA_REGION_PIXELS * 0.5)


def test_shapes_keep_painter_order(background) -> None:
    shapes = tuple(make_shape(size=s) for s in (3, 1, 2))
    prepared = prepare_scene(Scene(20, 20, background, shapes))
    assert [ps.shape.size for ps in prepared.shapes] == [3, 1, 2]


@pytest.mark.parametrize("aa_pixels", [-1.0, 0.0, float('nan'), float('inf')])
def test_unusable_aa_width_becomes_hard_edge(background, aa_pixels) -> None:
    shape = make_shape(kind=ShapeKind.CIRCLE, size=3)
    prepared = prepare_scene(Scene(20, 20, background, (shape,)), aa_pixels)
    assert prepared.aa_region == 0.0
    assert prepared.shapes[0].box.max_x == pytest.approx(3.0)
