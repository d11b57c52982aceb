"""Error classes"""

__all__ = ["DefinitionError"]


class DefinitionError(TypeError):
    """Malformed class definition passed to extend.

    Raised for definition bags, mixin lists, mixin entries and class
    variable bags that are not the expected container type, and for
    members that would shadow the instance facilities.

    Args:
        message: (str) Error description
        key: (str | None) Definition key that caused the error

    Attributes:
        message: (str) Error description
        key: (str | None) Definition key that caused the error
    """

    def __init__(self, message, key=None):
        self.message = message
        self.key = key
        super().__init__(message)
