import pytest

from nurbseval.knots import (
    find_span,
    is_nondecreasing,
    is_valid_knot_vector,
    knot_domain,
    knot_multiplicities,
    knot_multiplicity,
    knots_valid,
    uniform_knots,
)


def test_knots_valid_relation():
    knots = [0, 0, 0, 0, 0.5, 1, 1, 1, 1]
    assert knots_valid(knots, 3, 5)
    assert not knots_valid(knots, 3, 4)
    assert not knots_valid(knots, 2, 5)


def test_find_span():
    knots = [0, 0, 0, 1, 2, 3, 4, 4, 5, 5, 5]
    assert find_span(2, knots, 0.0) == 2
    assert find_span(2, knots, 0.5) == 2
    assert find_span(2, knots, 1.0) == 3
    assert find_span(2, knots, 2.5) == 4
    assert find_span(2, knots, 4.0) == 7
    assert find_span(2, knots, 4.5) == 7
    # end of domain maps to the last non-degenerate span
    assert find_span(2, knots, 5.0) == 7


def test_find_span_contains_parameter():
    knots = [0.0, 0.0, 0.0, 0.0, 0.2, 0.2, 0.7, 1.0, 1.0, 1.0, 1.0]
    for i in range(100):
        u = i / 100.0
        span = find_span(3, knots, u)
        assert knots[span] <= u < knots[span + 1]


def test_multiplicities():
    knots = [0, 0, 0, 0.5, 0.5, 1, 1, 1]
    mults = knot_multiplicities(knots)
    assert mults == {0.0: 3, 0.5: 2, 1.0: 3}
    assert list(mults) == [0.0, 0.5, 1.0]


def test_multiplicity_with_tolerance():
    knots = [0, 0, 0, 0.5, 0.5, 1, 1, 1]
    assert knot_multiplicity(knots, 0.5) == 2
    assert knot_multiplicity(knots, 0.5 + 1e-12) == 2
    assert knot_multiplicity(knots, 0.25) == 0
    assert knot_multiplicity(knots, 1.0) == 3


def test_is_nondecreasing():
    assert is_nondecreasing([0, 0, 1, 2, 2, 3])
    assert not is_nondecreasing([0, 1, 0.5, 2])
    assert not is_nondecreasing([])
    # checking the last value must not read past the end
    assert not is_nondecreasing([0, 1, 2, 1])


def test_is_valid_knot_vector():
    assert is_valid_knot_vector([0, 0, 0, 0.5, 1, 1, 1], 2)
    assert is_valid_knot_vector([1, 1, 1, 1, 1, 1], 2)
    # too short for degree 2
    assert not is_valid_knot_vector([0, 0, 1, 1], 2)
    # not clamped at the start
    assert not is_valid_knot_vector([0, 0, 0.1, 0.5, 1, 1, 1], 2)
    # not clamped at the end
    assert not is_valid_knot_vector([0, 0, 0, 0.5, 0.9, 1, 1], 2)
    assert not is_valid_knot_vector([0, 0, 0, 0.7, 0.5, 1, 1, 1], 2)
    assert not is_valid_knot_vector([], 2)


def test_knot_domain():
    assert knot_domain([1, 1, 1, 2, 3, 3, 3]) == (1.0, 3.0)


def test_uniform_knots_clamped():
    assert uniform_knots(2, 3) == [0.0, 0.0, 0.0, 1.0, 1.0, 1.0]
    assert uniform_knots(3, 5) == [0.0, 0.0, 0.0, 0.0, 0.5, 1.0, 1.0, 1.0, 1.0]


def test_uniform_knots_unclamped():
    knots = uniform_knots(2, 3, clamped=False)
    assert len(knots) == 6
    assert knots == pytest.approx([0.0, 0.2, 0.4, 0.6, 0.8, 1.0])


def test_uniform_knots_bad_input():
    with pytest.raises(ValueError):
        uniform_knots(0, 3)
    with pytest.raises(ValueError):
        uniform_knots(3, 3)
