"""Read and write seed data.

A seed file is a JSON array of objects with camelCase keys, one file per
entity type: ``courses.json``, ``assignments.json``, and ``classes.json``.
Every object has an integer ``Id``. For example, a course looks like:

.. code:: json

    {
        "Id": 1,
        "name": "Data Structures",
        "code": "CS 201",
        "instructor": "Dr. Patel",
        "credits": 4,
        "color": "#4F46E5",
        "semester": "Fall 2024",
        "gradeCategories": [
            {"name": "Homework", "weight": 40},
            {"name": "Final", "weight": 60}
        ],
        "currentGrade": null
    }

Keys that are not recognized are ignored.

"""

import dataclasses
import datetime
import enum
import json
import pathlib

from ..core import Assignment, ClassSession, Course, GradeCategory

# maps json keys to attribute names, per entity type
_KEYS = {
    Course: {
        "Id": "id",
        "name": "name",
        "code": "code",
        "instructor": "instructor",
        "credits": "credits",
        "color": "color",
        "semester": "semester",
        "gradeCategories": "grade_categories",
        "currentGrade": "current_grade",
    },
    Assignment: {
        "Id": "id",
        "courseId": "course_id",
        "title": "title",
        "description": "description",
        "dueDate": "due_date",
        "priority": "priority",
        "status": "status",
        "category": "category",
        "grade": "grade",
    },
    ClassSession: {
        "Id": "id",
        "courseId": "course_id",
        "dayOfWeek": "day_of_week",
        "startTime": "start_time",
        "endTime": "end_time",
        "location": "location",
        "type": "type",
    },
}


def _read_records(path):
    path = pathlib.Path(path)
    with path.open() as fileobj:
        records = json.load(fileobj)

    if not isinstance(records, list):
        raise ValueError(f"{path} does not contain a JSON array.")

    return records


def _from_record(cls, record, **kwargs):
    keys = _KEYS[cls]
    fields = {keys[k]: v for k, v in record.items() if k in keys}
    return cls(**fields, **kwargs)


def _to_json_value(value):
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, datetime.date):
        return value.isoformat()
    if isinstance(value, GradeCategory):
        return {"name": value.name, "weight": value.weight}
    if isinstance(value, tuple):
        return [_to_json_value(v) for v in value]
    return value


def _to_record(entity):
    keys = {attr: key for key, attr in _KEYS[type(entity)].items()}
    return {
        keys[f.name]: _to_json_value(getattr(entity, f.name))
        for f in dataclasses.fields(entity)
        if f.name in keys
    }


# public functions ---------------------------------------------------------------------


def read_courses(path, allow_partial_weights=False):
    """Read courses from a seed file.

    Parameters
    ----------
    path : str or pathlib.Path
        Path to the JSON file.
    allow_partial_weights : bool
        Passed on to each :class:`~studyplan.core.Course`. Default: `False`.

    Returns
    -------
    list[Course]

    Raises
    ------
    ValueError
        If the file is not a JSON array or a course is invalid.

    """
    return [
        _from_record(Course, r, allow_partial_weights=allow_partial_weights)
        for r in _read_records(path)
    ]


def read_assignments(path):
    """Read assignments from a seed file."""
    return [_from_record(Assignment, r) for r in _read_records(path)]


def read_classes(path):
    """Read weekly class sessions from a seed file."""
    return [_from_record(ClassSession, r) for r in _read_records(path)]


def write(path, entities):
    """Write entities of a single type to a seed file."""
    path = pathlib.Path(path)
    records = [_to_record(e) for e in entities]
    with path.open("w") as fileobj:
        json.dump(records, fileobj, indent=2)
        fileobj.write("\n")
