"""Mapping percentages to letter grades and grade points."""

import collections

import numpy as np
import pandas as pd


# helper functions =====================================================================


def _check_that_scale_monotonically_decreases(scale):
    prev = float("inf")
    for threshold in scale.values():
        if threshold >= prev:
            raise ValueError("Scale is not monotonically decreasing.")
        prev = threshold


def _validate_scale(scale):
    if scale is None:
        return DEFAULT_SCALE

    if list(scale) != list(DEFAULT_SCALE):
        raise ValueError(
            f"Scale has invalid letter grades. Must be in {list(DEFAULT_SCALE)}"
        )
    _check_that_scale_monotonically_decreases(scale)
    return scale


# common scales ========================================================================

DEFAULT_SCALE = collections.OrderedDict(
    [
        ("A+", 97),
        ("A", 93),
        ("A-", 90),
        ("B+", 87),
        ("B", 83),
        ("B-", 80),
        ("C+", 77),
        ("C", 73),
        ("C-", 70),
        ("D+", 67),
        ("D", 60),
        ("F", float("-inf")),
    ]
)
"""The default grading scale, as percentage thresholds (inclusive lower bounds)."""

GRADE_POINTS = collections.OrderedDict(
    [
        ("A+", 4.0),
        ("A", 3.7),
        ("A-", 3.3),
        ("B+", 3.0),
        ("B", 2.7),
        ("B-", 2.3),
        ("C+", 2.0),
        ("C", 1.7),
        ("C-", 1.3),
        ("D+", 1.0),
        ("D", 0.7),
        ("F", 0.0),
    ]
)
"""Grade points on the 4.0 scale earned by each letter grade."""

VALID_LETTERS = tuple(DEFAULT_SCALE)


# public functions =====================================================================


def letter_grade(percentage, scale=None) -> str:
    """The letter grade earned by a single percentage.

    Thresholds are inclusive lower bounds, checked from the top of the scale
    down. The mapping is total: anything above 100 is an A+, anything below 0
    is an F.

    Parameters
    ----------
    percentage : float
        A score between 0 and 100.
    scale : Optional[OrderedDict]
        An ordered dictionary mapping letter grades to their thresholds.
        Default: :attr:`DEFAULT_SCALE`.

    Returns
    -------
    str
        The letter grade.

    Example
    -------
    >>> letter_grade(92.9)
    'A-'

    """
    scale = _validate_scale(scale)
    for letter, threshold in scale.items():
        if percentage >= threshold:
            return letter
    return "F"


def grade_point(percentage, scale=None) -> float:
    """The grade point earned by a single percentage.

    Uses the same breakpoints as :func:`letter_grade`, so that
    ``grade_point(p) == GRADE_POINTS[letter_grade(p)]`` for every ``p``.

    """
    return GRADE_POINTS[letter_grade(percentage, scale=scale)]


def map_scores_to_letter_grades(scores, scale=None):
    """Map each percentage to a letter grade.

    Parameters
    ----------
    scores : pandas.Series
        A series containing percentages between 0 and 100. Missing entries
        (ungraded) are left missing.
    scale : OrderedDict
        An ordered dictionary mapping letter grades to their thresholds.
        Default: :attr:`DEFAULT_SCALE`.

    Returns
    -------
    pandas.Series
        A series containing the resulting letter grades.

    Raises
    ------
    ValueError
        If the provided scale has invalid letter grades, or its thresholds
        do not decrease.

    """
    scale = _validate_scale(scale)

    def _map(score):
        if pd.isna(score):
            return np.nan
        return letter_grade(score, scale=scale)

    return scores.apply(_map)


def map_scores_to_grade_points(scores, scale=None):
    """Map each percentage to a grade point on the 4.0 scale.

    Missing entries are left as `NaN`.

    """
    scale = _validate_scale(scale)

    values = scores.to_numpy(dtype=float)
    conditions = [values >= threshold for threshold in scale.values()]
    points = np.select(conditions, [GRADE_POINTS[letter] for letter in scale], 0.0)
    points[np.isnan(values)] = np.nan

    return pd.Series(points, index=scores.index, name=scores.name)
