"""Exceptions raised by the extraction pipeline."""


class StructGenError(Exception):
    """Base class for structgen errors."""


class MalformedTableError(StructGenError):
    """A field table does not have the Field/Type/Description shape."""


class UnmappedTypeError(StructGenError):
    """A documented type cannot be translated under the current config."""

    def __init__(self, type_name: str, reason: str):
        super().__init__(reason)
        self.type_name = type_name
        self.reason = reason
