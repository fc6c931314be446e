from __future__ import annotations

import json
import logging
from typing import Any

from form_import.core.field_types import (
    NUMERIC_FIELD_TYPES,
    OPTION_FIELD_TYPES,
    SECTION_FIELD_TYPES,
    SELECTION_BOUND_FIELD_TYPES,
    SUPPORTED_FIELD_TYPES,
    TEXTAREA_FIELD_TYPES,
    is_fixable_message,
    supported_field_types,
)
from form_import.schemas.validation import Severity, ValidationIssue, ValidationResult

logger = logging.getLogger(__name__)

_MISSING = object()

INVALID_JSON_MESSAGE = "Invalid JSON format. Please check your JSON syntax."


def _is_number(value: Any) -> bool:
    # JSON booleans are not numbers
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def _is_non_blank_str(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


class _Diagnostics:
    """Append-only accumulator for one validation run."""

    def __init__(self) -> None:
        self.errors: list[ValidationIssue] = []
        self.warnings: list[ValidationIssue] = []

    def error(self, path: str, message: str) -> None:
        self.errors.append(ValidationIssue(path=path, message=message, severity=Severity.ERROR))

    def warning(self, path: str, message: str) -> None:
        self.warnings.append(ValidationIssue(path=path, message=message, severity=Severity.WARNING))

    def result(self) -> ValidationResult:
        return ValidationResult(
            is_valid=not self.errors,
            errors=list(self.errors),
            warnings=list(self.warnings),
            fixable_errors=[e for e in self.errors if is_fixable_message(e.message)],
        )


def _validate_form(data: Any, diag: _Diagnostics) -> None:
    if not isinstance(data, dict):
        diag.error("root", "Form schema must be a JSON object")
        return

    if not _is_non_blank_str(data.get("title")):
        diag.error("title", "Form title is required and must be a non-empty string")

    description = data.get("description")
    if description is not None and not isinstance(description, str):
        diag.error("description", "Form description must be a string")

    fields = data.get("fields")
    if not isinstance(fields, list):
        # nothing to iterate, settings are not checked either
        diag.error("fields", "Fields must be an array")
        return

    if not fields:
        diag.error("fields", "Form must have at least one field")

    for index, field in enumerate(fields):
        _validate_field(field, f"fields[{index}]", diag)

    settings = data.get("settings")
    if settings is not None:
        _validate_settings(settings, "settings", diag)


def _validate_field(field: Any, path: str, diag: _Diagnostics) -> None:
    if not isinstance(field, dict):
        diag.error(path, "Field must be an object")
        return

    field_type = field.get("type")
    type_name = field_type if isinstance(field_type, str) else None
    is_section = type_name in SECTION_FIELD_TYPES

    if not _is_non_blank_str(field.get("id")):
        diag.error(f"{path}.id", "Field ID is required and must be a non-empty string")

    if not _is_non_blank_str(field_type):
        diag.error(f"{path}.type", "Field type is required and must be a string")
    elif field_type not in SUPPORTED_FIELD_TYPES:
        diag.error(
            f"{path}.type",
            f"Unsupported field type: {field_type}. "
            f"Supported types: {', '.join(supported_field_types())}",
        )

    label = field.get("label")
    if is_section and (label is None or (isinstance(label, str) and label.strip() == "")):
        # sections are display-only; a blank heading degrades the form but is not invalid
        diag.warning(f"{path}.label", "Section fields should have descriptive labels")
    elif not _is_non_blank_str(label):
        diag.error(f"{path}.label", "Field label is required and must be a non-empty string")

    required = field.get("required", _MISSING)
    if required is not _MISSING and not isinstance(required, bool):
        diag.error(f"{path}.required", "Field required must be a boolean")

    for key in ("placeholder", "helpText", "description"):
        value = field.get(key)
        if value is not None and not isinstance(value, str):
            diag.error(f"{path}.{key}", f"Field {key} must be a string")

    _validate_field_type_specific(field, type_name, path, diag)


def _validate_field_type_specific(field: dict, field_type: str | None, path: str, diag: _Diagnostics) -> None:
    if field_type in OPTION_FIELD_TYPES:
        _validate_options(field.get("options"), field_type, f"{path}.options", diag)

        if field_type in SELECTION_BOUND_FIELD_TYPES:
            _validate_selection_bounds(field, path, diag)

    if field_type in TEXTAREA_FIELD_TYPES:
        rows = field.get("rows")
        if rows is not None and not (_is_integer(rows) and rows >= 1):
            diag.error(f"{path}.rows", "rows must be a positive integer")

    if field_type in NUMERIC_FIELD_TYPES:
        for key in ("min", "max", "step"):
            value = field.get(key)
            if value is not None and not _is_number(value):
                diag.error(f"{path}.{key}", f"{key} value must be a number")

        mn, mx = field.get("min"), field.get("max")
        if _is_number(mn) and _is_number(mx) and mn >= mx:
            diag.error(f"{path}.min", "min value must be less than max value")

    validation = field.get("validation")
    if validation is not None:
        _validate_field_validation(validation, f"{path}.validation", diag)


def _validate_options(options: Any, field_type: str, path: str, diag: _Diagnostics) -> None:
    if not isinstance(options, list):
        diag.error(path, f"Field type {field_type} requires an options array")
        return
    if not options:
        diag.error(path, f"Field type {field_type} must have at least one option")
        return

    for index, option in enumerate(options):
        option_path = f"{path}[{index}]"
        if isinstance(option, str):
            if option.strip() == "":
                diag.error(option_path, "Option cannot be empty")
        elif isinstance(option, dict):
            if not _is_non_blank_str(option.get("id")):
                diag.error(f"{option_path}.id", "Option ID is required and must be a string")
            if not _is_non_blank_str(option.get("label")):
                diag.error(f"{option_path}.label", "Option label is required and must be a string")
        else:
            diag.error(option_path, "Option must be a string or object with id and label")


def _validate_selection_bounds(field: dict, path: str, diag: _Diagnostics) -> None:
    min_sel = field.get("minSelections")
    max_sel = field.get("maxSelections")

    min_ok = min_sel is None or (_is_integer(min_sel) and min_sel >= 0)
    max_ok = max_sel is None or (_is_integer(max_sel) and max_sel >= 1)

    if not min_ok:
        diag.error(f"{path}.minSelections", "minSelections must be a non-negative integer")
    if not max_ok:
        diag.error(f"{path}.maxSelections", "maxSelections must be a positive integer")

    if min_sel is not None and max_sel is not None and min_ok and max_ok and max_sel < min_sel:
        diag.error(f"{path}.maxSelections", "maxSelections cannot be less than minSelections")


def _validate_field_validation(validation: Any, path: str, diag: _Diagnostics) -> None:
    if not isinstance(validation, dict):
        diag.error(path, "Validation must be an object")
        return

    min_length = validation.get("minLength")
    max_length = validation.get("maxLength")

    min_ok = min_length is None or (_is_integer(min_length) and min_length >= 0)
    max_ok = max_length is None or (_is_integer(max_length) and max_length >= 1)

    if not min_ok:
        diag.error(f"{path}.minLength", "minLength must be a non-negative integer")
    if not max_ok:
        diag.error(f"{path}.maxLength", "maxLength must be a positive integer")
    if (
        min_length is not None
        and max_length is not None
        and min_ok
        and max_ok
        and min_length >= max_length
    ):
        diag.error(f"{path}.minLength", "minLength must be less than maxLength")

    for key in ("min", "max"):
        value = validation.get(key)
        if value is not None and not _is_number(value):
            diag.error(f"{path}.{key}", f"{key} must be a number")

    pattern = validation.get("pattern")
    if pattern is not None and not isinstance(pattern, str):
        diag.error(f"{path}.pattern", "Pattern must be a string")


def _validate_settings(settings: Any, path: str, diag: _Diagnostics) -> None:
    if not isinstance(settings, dict):
        diag.error(path, "Settings must be an object")
        return

    theme = settings.get("theme")
    if theme is not None and not isinstance(theme, str):
        diag.error(f"{path}.theme", "Theme must be a string")

    language = settings.get("language")
    if language is not None and not isinstance(language, str):
        diag.error(f"{path}.language", "Language must be a string")

    submission = settings.get("submission")
    if submission is not None:
        if not isinstance(submission, dict):
            diag.error(f"{path}.submission", "Submission settings must be an object")
        else:
            redirect_url = submission.get("redirectUrl")
            if redirect_url is not None and not isinstance(redirect_url, str):
                diag.error(f"{path}.submission.redirectUrl", "Redirect URL must be a string or null")
            success_message = submission.get("successMessage")
            if success_message is not None and not isinstance(success_message, str):
                diag.error(f"{path}.submission.successMessage", "Success message must be a string")

    notifications = settings.get("notifications")
    if notifications is not None:
        if not isinstance(notifications, dict):
            diag.error(f"{path}.notifications", "Notifications settings must be an object")
            return

        send_email = notifications.get("sendEmail", _MISSING)
        if send_email is not _MISSING and not isinstance(send_email, bool):
            diag.error(f"{path}.notifications.sendEmail", "sendEmail must be a boolean")

        emails = notifications.get("emails")
        if emails is not None:
            if not isinstance(emails, list):
                diag.error(f"{path}.notifications.emails", "emails must be an array")
            else:
                for index, email in enumerate(emails):
                    if not isinstance(email, str):
                        diag.error(f"{path}.notifications.emails[{index}]", "Email must be a string")


def parse_json_document(text: str) -> Any:
    """Raises ValueError (or RecursionError on absurd nesting) for unparsable text."""
    return json.loads(text)


def invalid_json_result() -> ValidationResult:
    diag = _Diagnostics()
    diag.error("root", INVALID_JSON_MESSAGE)
    return ValidationResult(is_valid=False, errors=diag.errors, warnings=[], fixable_errors=[])


class SchemaValidator:
    """
    Checks an untrusted import document against the expected import shape.

    Structural defects are collected, never raised. Every call works on its
    own accumulator, so one instance can serve concurrent imports.
    """

    def validate(self, data: Any) -> ValidationResult:
        if isinstance(data, str):
            try:
                data = parse_json_document(data)
            except (ValueError, RecursionError):
                return invalid_json_result()

        diag = _Diagnostics()
        _validate_form(data, diag)
        result = diag.result()
        logger.debug(
            "Validated import document: %d errors, %d warnings",
            len(result.errors),
            len(result.warnings),
        )
        return result


def validate_import_schema(data: Any) -> ValidationResult:
    return SchemaValidator().validate(data)
