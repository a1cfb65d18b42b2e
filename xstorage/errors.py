"""Errors raised while composing resources."""


class FunctionError(Exception):
    """Base error for a failed composition step."""

    pass


class FieldError(FunctionError):
    """A required field could not be read from a document."""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class MissingFieldError(FieldError):
    """The field path does not exist in the document."""

    pass


class TypeMismatchError(FieldError):
    """The field exists but holds a value of the wrong kind."""

    pass


class ConversionError(FunctionError):
    """A model could not be converted to an unstructured resource body."""

    pass


class ResponseAssemblyError(FunctionError):
    """The desired state could not be written into the response."""

    pass
