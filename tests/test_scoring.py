import pytest

from conquest import polygon_area, score_for_area

TRIANGLE = [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)]
PENTAGON = [(0.1, -0.3), (0.6, 0.0), (0.4, 0.5), (-0.2, 0.6), (-0.5, 0.1)]


def test_right_triangle():
    assert polygon_area(TRIANGLE) == 0.5


def test_unit_square():
    assert polygon_area([(0, 0), (1, 0), (1, 1), (0, 1)]) == 1.0


@pytest.mark.parametrize('shift', range(len(PENTAGON)))
def test_invariant_under_rotation(shift):
    rotated = PENTAGON[shift:] + PENTAGON[:shift]
    assert polygon_area(rotated) == pytest.approx(polygon_area(PENTAGON))


def test_invariant_under_reversal():
    assert polygon_area(PENTAGON[::-1]) == pytest.approx(polygon_area(PENTAGON))
    assert polygon_area(PENTAGON) > 0


def test_closing_vertex_is_optional():
    assert polygon_area(TRIANGLE + [TRIANGLE[0]]) == 0.5


@pytest.mark.parametrize('polygon', [[], [(0.3, 0.3)], [(0.0, 0.0), (1.0, 1.0)]])
def test_degenerate_polygons_have_no_area(polygon):
    assert polygon_area(polygon) == 0.0


def test_score_floors_scaled_area():
    assert score_for_area(0.5) == 5000
    assert score_for_area(0.0) == 0
    assert score_for_area(0.00019999) == 1
    assert score_for_area(0.125, scale=100) == 12
