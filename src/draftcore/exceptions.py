"""Exception hierarchy for draftcore."""


class DraftCoreError(Exception):
    """Base exception for all draftcore errors."""

    pass


class EntityError(DraftCoreError):
    """Errors related to drawing entities."""

    pass


class InvalidEntityError(EntityError):
    """Entity geometry or style violates an invariant."""

    def __init__(self, entity_type: str, reason: str) -> None:
        self.entity_type = entity_type
        self.reason = reason
        super().__init__(f"Invalid {entity_type}: {reason}")


class EntityDeserializationError(EntityError):
    """A persisted entity record could not be decoded."""

    def __init__(self, reason: str, entity_id: str | None = None) -> None:
        self.reason = reason
        self.entity_id = entity_id
        where = f" '{entity_id}'" if entity_id else ""
        super().__init__(f"Failed to decode entity{where}: {reason}")


class UnknownEntityTypeError(EntityDeserializationError):
    """The record names an entity type that does not exist."""

    def __init__(self, entity_type: object, entity_id: str | None = None) -> None:
        self.entity_type = entity_type
        super().__init__(f"unknown entity type {entity_type!r}", entity_id)


class DocumentError(DraftCoreError):
    """Errors related to drawing documents."""

    pass


class InvalidDocumentError(DocumentError):
    """Document contents violate an invariant."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid document: {reason}")


class DocumentLoadError(DocumentError):
    """Error loading a document file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load document '{path}': {reason}")


class DocumentSaveError(DocumentError):
    """Error saving a document file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save document '{path}': {reason}")


class GeometryError(DraftCoreError):
    """Errors in geometric calculations that cannot degrade to an empty result."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
