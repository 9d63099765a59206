"""In-memory repositories for courses, assignments, and class sessions.

Each store owns its collection and hands out snapshots: the entities are
immutable, and :meth:`Store.get_all` returns a fresh list, so nothing a caller
does with the result can change the store. Stores are meant to be created by
the application and passed to whatever needs them, e.g. a
:class:`studyplan.Planner`.

"""

import dataclasses
import logging
import typing

from .core import (
    DEFAULT_CATEGORIES,
    Assignment,
    ClassSession,
    Course,
    Priority,
    Status,
)
from .errors import NotFound

logger = logging.getLogger(__name__)


class Store:
    """A collection of entities keyed by integer id.

    Ids are allocated by a counter that starts one past the largest id among
    the initial entities and only ever increases, so the id of a deleted
    entity is never handed out again.

    Parameters
    ----------
    entities : Iterable
        The initial contents of the store.

    Raises
    ------
    ValueError
        If two of the initial entities share an id.

    """

    #: the entity class this store holds
    entity_type: typing.Type = None

    #: human-readable name of the entity, used in error messages
    kind = "Entity"

    def __init__(self, entities=()):
        self._entities = {}
        for entity in entities:
            if entity.id in self._entities:
                raise ValueError(f"Duplicate {self.kind} id: {entity.id}.")
            self._entities[entity.id] = entity

        self._next_id = max(self._entities, default=0) + 1

    def __repr__(self):
        return f"<{self.__class__.__name__} with {len(self)} entities>"

    def __len__(self):
        return len(self._entities)

    def __contains__(self, id_):
        return id_ in self._entities

    # hooks ------------------------------------------------------------------------

    def _prepare(self, fields: dict) -> dict:
        """Fill in defaults for a new entity. Subclasses override this."""
        return fields

    def _check(self, entity, previous=None):
        """Validate an entity before it is stored. Subclasses override this.

        `previous` is the stored version of the entity when it is being
        updated, and `None` when it is being created.

        """

    # reading ----------------------------------------------------------------------

    def get_all(self) -> list:
        """All entities, in insertion order."""
        return list(self._entities.values())

    def get_by_id(self, id_):
        """The entity with the given id, or `None` if there is none."""
        return self._entities.get(id_)

    # mutating ---------------------------------------------------------------------

    def create(self, **fields):
        """Create an entity and assign it a new id.

        Fields that are not given are filled in with the defaults for the
        entity type.

        Raises
        ------
        ValueError
            If an id is provided; ids are assigned by the store.

        """
        if "id" in fields:
            raise ValueError("Ids are assigned by the store.")

        entity = self.entity_type(id=self._next_id, **self._prepare(dict(fields)))
        self._check(entity)

        self._entities[entity.id] = entity
        self._next_id += 1

        logger.debug("Created %s %s.", self.kind, entity.id)
        return entity

    def update(self, id_, **fields):
        """Replace some of an entity's fields.

        Returns
        -------
        The updated entity.

        Raises
        ------
        NotFound
            If there is no entity with the given id.
        ValueError
            If an attempt is made to change the id.

        """
        if id_ not in self._entities:
            raise NotFound(self.kind, id_)

        if fields.get("id", id_) != id_:
            raise ValueError("The id of an entity cannot be changed.")
        fields.pop("id", None)

        previous = self._entities[id_]
        entity = dataclasses.replace(previous, **fields)
        self._check(entity, previous)
        self._entities[id_] = entity

        logger.debug("Updated %s %s: %s.", self.kind, id_, sorted(fields))
        return entity

    def delete(self, id_) -> bool:
        """Remove an entity.

        Raises
        ------
        NotFound
            If there is no entity with the given id.

        """
        if id_ not in self._entities:
            raise NotFound(self.kind, id_)

        del self._entities[id_]
        logger.debug("Deleted %s %s.", self.kind, id_)
        return True


class CourseStore(Store):
    """Courses.

    New courses have no current grade and, unless given, the default grade
    categories (Homework 20, Quizzes 15, Midterm 25, Final 40).

    """

    entity_type = Course
    kind = "Course"

    def _prepare(self, fields):
        fields["current_grade"] = None
        if not fields.get("grade_categories"):
            fields["grade_categories"] = DEFAULT_CATEGORIES
        return fields


class _PerCourseStore(Store):
    """A store of entities that each belong to a course.

    The course is checked when an entity is created and when an update moves
    it to another course. Deleting a course does not touch the entities that
    belong to it, and those entities can still be updated in other ways.

    """

    def __init__(self, entities=(), courses: typing.Optional[CourseStore] = None):
        super().__init__(entities)
        self.courses = courses

    def _prepare(self, fields):
        if "course_id" in fields:
            fields["course_id"] = int(fields["course_id"])
        return fields

    def _check(self, entity, previous=None):
        if previous is not None and entity.course_id == previous.course_id:
            return

        if self.courses is not None and self.courses.get_by_id(entity.course_id) is None:
            raise NotFound("Course", entity.course_id)

    def update(self, id_, **fields):
        if fields.get("course_id") is not None:
            fields["course_id"] = int(fields["course_id"])
        return super().update(id_, **fields)

    def get_by_course(self, course_id) -> list:
        """All entities belonging to the course."""
        course_id = int(course_id)
        return [e for e in self._entities.values() if e.course_id == course_id]


class AssignmentStore(_PerCourseStore):
    """Assignments.

    New assignments are pending and ungraded, with medium priority, and count
    towards the "Homework" category unless told otherwise.

    Parameters
    ----------
    entities : Iterable[Assignment]
        The initial contents of the store.
    courses : Optional[CourseStore]
        If given, new assignments must belong to a course in this store, and
        their category must be one of that course's categories. Updates are
        held to the same rules only when they change the course or the
        category.

    """

    entity_type = Assignment
    kind = "Assignment"

    def _prepare(self, fields):
        fields = super()._prepare(fields)
        fields.setdefault("status", Status.PENDING)
        fields.setdefault("priority", Priority.MEDIUM)
        fields.setdefault("grade", None)
        if not fields.get("category"):
            fields["category"] = "Homework"
        return fields

    def _check(self, entity, previous=None):
        super()._check(entity, previous)
        if self.courses is None:
            return

        if previous is not None and (entity.course_id, entity.category) == (
            previous.course_id,
            previous.category,
        ):
            return

        course = self.courses.get_by_id(entity.course_id)
        if course is None:
            raise NotFound("Course", entity.course_id)

        if entity.category not in course.category_names:
            raise ValueError(
                f"'{entity.category}' is not a grade category of {course.code}; "
                f"expected one of {course.category_names}."
            )


class ClassStore(_PerCourseStore):
    """Weekly class sessions."""

    entity_type = ClassSession
    kind = "Class"

    def _prepare(self, fields):
        fields = super()._prepare(fields)
        fields.setdefault("type", "Lecture")
        fields.setdefault("location", "")
        return fields
