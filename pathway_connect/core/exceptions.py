from __future__ import annotations

from typing import Dict, List


class ContentError(Exception):
    """Base class for failures raised by the content data-access layer."""


class ValidationFailure(ContentError):
    """A submitted record is missing required values or has malformed ones.

    ``errors`` maps field name -> list of human readable messages so views can
    attach them to the re-rendered form.
    """

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = {name: list(messages) for name, messages in (errors or {}).items()}
        fields = ", ".join(sorted(self.errors)) or "record"
        super().__init__(f"Invalid value for: {fields}")


class NotFound(ContentError):
    def __init__(self, collection: str, pk=None):
        self.collection = collection
        self.pk = pk
        if pk is None:
            super().__init__(f"Unknown collection '{collection}'")
        else:
            super().__init__(f"No {collection} record with id {pk}")


class UnknownCollection(NotFound):
    def __init__(self, collection: str):
        super().__init__(collection)


class StorageError(ContentError):
    """The backing database was unreachable or rejected the write."""
