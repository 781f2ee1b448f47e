"""Application exceptions."""


class AppError(Exception):
    """Base exception for application errors."""


class ModelError(AppError):
    """Base exception for model/database operations."""


class RecordNotFoundError(ModelError):
    """Raised when a record is not found in the database."""

    def __init__(self, model_name: str, record_id: int):
        self.model_name = model_name
        self.record_id = record_id
        super().__init__(f"{model_name} with id={record_id} not found")


class RelatedRecordNotFoundError(ModelError):
    """Raised when a related record (FK) is not found."""

    def __init__(self, field: str, record_id: int):
        self.field = field
        self.record_id = record_id
        super().__init__(f"Related record for '{field}' with id={record_id} not found")


class DuplicateRecordError(ModelError):
    """Raised when a unique constraint would be violated."""

    def __init__(self, model_name: str, detail: str):
        self.model_name = model_name
        self.detail = detail
        super().__init__(detail)


class DatabaseConnectionError(ModelError):
    """Raised when database connection fails."""


class InvalidFilterError(ModelError):
    """Raised when invalid filter is provided."""
