"""Exceptions raised at the boundaries of the planner."""


class InvalidDate(ValueError):
    """A date or time could not be interpreted."""


class NotFound(KeyError):
    """An entity with the requested id does not exist in a store."""

    def __init__(self, kind, id_):
        super().__init__(f"{kind} not found: {id_!r}")
        self.kind = kind
        self.id = id_
