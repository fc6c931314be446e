"""
External import shape, as supplied by users.

Every record is open: known keys are typed, unknown keys land in
``model_extra`` and are ignored. These models are only built from documents
the schema validator has already accepted.
"""

from typing import Any

from pydantic import ConfigDict

from form_import.schemas.base import CamelModel


class ImportedModel(CamelModel):
    model_config = ConfigDict(extra="allow")

    def has(self, name: str) -> bool:
        """True when the key was present in the source document (even if null)."""
        return name in self.model_fields_set


class ImportedFieldValidation(ImportedModel):
    min_length: int | None = None
    max_length: int | None = None
    min: Any = None
    max: Any = None
    pattern: str | None = None


class ImportedFormField(ImportedModel):
    id: str | None = None
    # pre-mapping type string; multi_select vs select is decided from it
    type: str
    label: str | None = None
    description: str | None = None
    placeholder: str | None = None
    required: bool | None = None
    help_text: str | None = None
    # only checked for option-bearing types
    options: Any = None
    allow_other: Any = None
    min_selections: Any = None
    max_selections: Any = None
    min: Any = None
    max: Any = None
    step: Any = None
    rows: Any = None
    default_value: Any = None
    default_checked: Any = None
    validation: ImportedFieldValidation | None = None


class ImportedSubmission(ImportedModel):
    redirect_url: str | None = None
    success_message: str | None = None


class ImportedNotifications(ImportedModel):
    send_email: bool | None = None
    emails: list[str] | None = None


class ImportedSettings(ImportedModel):
    theme: str | None = None
    language: str | None = None
    submission: ImportedSubmission | None = None
    notifications: ImportedNotifications | None = None


class ImportedFormSchema(ImportedModel):
    title: str
    description: str | None = None
    settings: ImportedSettings | None = None
    fields: list[ImportedFormField]
