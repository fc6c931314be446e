from datetime import datetime
from typing import Any

from pydantic import model_validator

from form_import.schemas.base import CamelModel
from form_import.schemas.form_schema import FormSchema
from form_import.schemas.validation import ValidationResult


class ImportTransformResult(CamelModel):
    """Outcome of one import attempt; every failure mode ends up here"""
    success: bool
    form_schema: FormSchema | None = None
    errors: list[str] = []
    warnings: list[str] = []
    validation_result: ValidationResult | None = None

    @model_validator(mode="after")
    def _success_means_schema_and_no_errors(self):
        if self.success != (self.form_schema is not None and not self.errors):
            raise ValueError("success requires a form schema and no errors")
        return self


class FormOut(CamelModel):
    id: str
    title: str
    owner_email: str
    form_schema: dict[str, Any]
    created_at: datetime
    updated_at: datetime


class FormSummaryOut(CamelModel):
    id: str
    title: str
    field_count: int
    created_at: datetime


class FormImportOut(CamelModel):
    form: FormOut
    warnings: list[str]
    validation_result: ValidationResult | None = None


class SupportedFieldTypeOut(CamelModel):
    import_type: str
    internal_type: str
    requires_options: bool
