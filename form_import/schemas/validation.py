from enum import Enum

from pydantic import BaseModel, ConfigDict

from form_import.schemas.base import CamelModel


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class ValidationIssue(BaseModel):
    """Individual diagnostic, addressed by a path such as fields[2].options[0].label"""
    model_config = ConfigDict(frozen=True)

    path: str
    message: str
    severity: Severity

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class ValidationResult(CamelModel):
    """Outcome of validating one import document"""
    is_valid: bool
    errors: list[ValidationIssue]
    warnings: list[ValidationIssue]  # Non-blocking
    fixable_errors: list[ValidationIssue]  # Subset of errors, advisory only
