"""
Custom exception hierarchy for metadata-filter.

Every failure kind subclasses ``MetadataFilterError`` so callers can catch
all library errors at once, and also the closest builtin exception so code
that only knows about ``TypeError`` / ``ValueError`` keeps working:

- MissingArgumentError: a required argument is ``None``.
- TypeMismatchError: a value has the wrong runtime shape, including
  elements nested inside a filter function chain.
- EmptyCollectionError: a sequence argument must not be empty.
- EmptyStringError: a string argument must not be empty.
- UnknownFieldError: a field was never registered in the filter.
- ConfigValidationError: a declarative filter config cannot be built.
"""


class MetadataFilterError(Exception):
    """Base exception for all metadata-filter errors."""


class MissingArgumentError(MetadataFilterError, ValueError):
    """Raised when a required argument is not specified."""


class TypeMismatchError(MetadataFilterError, TypeError):
    """Raised when an argument has an unexpected type.

    The message names both the expected and the actual type, e.g.
    ``Invalid filter function: expected 'function', got 'int'``.
    """


class EmptyCollectionError(MetadataFilterError, ValueError):
    """Raised when a list argument is empty but must have items."""


class EmptyStringError(MetadataFilterError, ValueError):
    """Raised when a string argument is empty but must have content."""


class UnknownFieldError(MetadataFilterError, LookupError):
    """Raised when filtering a field that has no filter functions.

    Attributes:
        field: The field name that was requested.
    """

    def __init__(self, field: str) -> None:
        super().__init__(f"Invalid filter field: {field}")
        self.field = field


class ConfigValidationError(MetadataFilterError, ValueError):
    """Raised when a filter config cannot be turned into a filter.

    This can happen if:
    - The config file is empty.
    - A function reference is not of the form ``module:attribute``.
    - The referenced module or attribute cannot be imported.
    - The referenced object is not callable.
    """
