"""
Turns a validated import document into the internal form schema.

Precondition: the document has passed SchemaValidator. Nothing is re-checked
here; malformed input may produce defaulted values or raise, and callers are
expected to validate first (JsonImportService does).
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from typing import Any

from form_import.core.field_types import NUMERIC_FIELD_TYPES, RTL_LANGUAGES, map_field_type
from form_import.core.form_defaults import (
    DARK_PRIMARY_COLOR,
    LIGHT_PRIMARY_COLOR,
    create_default_form_schema,
)
from form_import.schemas.form_schema import (
    BlockSettings,
    FieldValidation,
    FormBlock,
    FormField,
    FormSchema,
    FormSettings,
    NotificationSettings,
    field_models_for,
)
from form_import.schemas.imported import ImportedFormField, ImportedFormSchema, ImportedSettings

# prefix ("field" / "block") -> fresh identifier
IdFactory = Callable[[str], str]

REQUIRED_MESSAGE = "This field is required"
DEFAULT_OPTION_LABEL = "Option"
MAIN_BLOCK_TITLE = "Main"
NOTIFICATION_MESSAGE = "A new form submission has been received."


def uuid_id_factory(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex}"


def normalize_options(options: Any) -> list[str]:
    """Strings pass through, {id, label} objects reduce to their label."""
    if not isinstance(options, list):
        return []
    normalized: list[str] = []
    for option in options:
        if isinstance(option, str):
            normalized.append(option)
        elif isinstance(option, dict) and isinstance(option.get("label"), str) and option["label"]:
            normalized.append(option["label"])
        else:
            normalized.append(DEFAULT_OPTION_LABEL)
    return normalized


def derive_validation(imported: ImportedFormField, internal_type: str) -> FieldValidation:
    values: dict[str, Any] = {}

    source = imported.validation
    if source is not None:
        for key in ("min_length", "max_length", "min", "max", "pattern"):
            value = getattr(source, key)
            if value is not None:
                values[key] = value

    # root-level bounds win over the nested ones for numeric fields
    if internal_type in NUMERIC_FIELD_TYPES:
        if imported.min is not None:
            values["min"] = imported.min
        if imported.max is not None:
            values["max"] = imported.max

    if imported.required:
        values["required_message"] = REQUIRED_MESSAGE

    return FieldValidation(**values)


# ---- type-specific settings; exactly one branch runs per field ----

def _textarea_settings(imported: ImportedFormField) -> dict[str, Any]:
    return {"rows": imported.rows} if imported.rows is not None else {}


def _numeric_settings(imported: ImportedFormField) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key in ("min", "max", "step"):
        value = getattr(imported, key)
        if value is not None:
            out[key] = value
    return out


def _slider_settings(imported: ImportedFormField) -> dict[str, Any]:
    out = _numeric_settings(imported)
    if imported.has("default_value"):
        out["default_value"] = imported.default_value
    return out


def _checkbox_settings(imported: ImportedFormField) -> dict[str, Any]:
    out: dict[str, Any] = {}
    if imported.min_selections is not None:
        out["min"] = imported.min_selections
    if imported.max_selections is not None:
        out["max"] = imported.max_selections
    return out


def _select_settings(imported: ImportedFormField) -> dict[str, Any]:
    # select and multi_select resolve to the same internal type
    return {"allow_multiple": True} if imported.type == "multi_select" else {}


def _statement_settings(imported: ImportedFormField) -> dict[str, Any]:
    out: dict[str, Any] = {
        "statement_heading": imported.label or "",
        "statement_align": "left",
        "statement_size": "md",
    }
    if imported.description:
        out["statement_description"] = imported.description
    return out


def _rating_settings(imported: ImportedFormField) -> dict[str, Any]:
    return {"star_count": 5, "icon": "star", "color": "#fbbf24"}


def _tags_settings(imported: ImportedFormField) -> dict[str, Any]:
    return {"max_tags": 10, "allow_duplicates": False}


SETTINGS_BRANCHES: dict[str, Callable[[ImportedFormField], dict[str, Any]]] = {
    "textarea": _textarea_settings,
    "number": _numeric_settings,
    "slider": _slider_settings,
    "checkbox": _checkbox_settings,
    "select": _select_settings,
    "statement": _statement_settings,
    "rating": _rating_settings,
    "tags": _tags_settings,
}


def derive_field_settings(imported: ImportedFormField, internal_type: str) -> dict[str, Any]:
    settings: dict[str, Any] = {}

    if imported.help_text:
        settings["help_text"] = imported.help_text
    if imported.has("default_value"):
        settings["default_value"] = imported.default_value
    # applied after defaultValue, so it wins when both are given
    if imported.has("default_checked"):
        settings["default_value"] = imported.default_checked

    branch = SETTINGS_BRANCHES.get(internal_type)
    if branch is not None:
        settings.update(branch(imported))
    return settings


def merge_form_settings(imported: ImportedSettings | None, base: FormSettings) -> FormSettings:
    settings = base.model_copy(deep=True)
    if imported is None:
        return settings

    if imported.theme:
        # binary switch, not a general color import
        primary = DARK_PRIMARY_COLOR if imported.theme == "dark" else LIGHT_PRIMARY_COLOR
        settings.theme = settings.theme.model_copy(update={"primary_color": primary})

    submission = imported.submission
    if submission is not None:
        if submission.success_message:
            settings.success_message = submission.success_message
        if submission.redirect_url:
            settings.redirect_url = submission.redirect_url

    notifications = imported.notifications
    if notifications is not None:
        emails = notifications.emails or []
        settings.notifications = NotificationSettings(
            enabled=bool(notifications.send_email),
            email=emails[0] if emails else "",
            subject=f"New form submission: {settings.title}",
            message=NOTIFICATION_MESSAGE,
        )

    if imported.language:
        settings.rtl = imported.language in RTL_LANGUAGES

    return settings


class ImportTransformer:
    def __init__(self, id_factory: IdFactory = uuid_id_factory) -> None:
        self._id_factory = id_factory

    def transform(self, data: ImportedFormSchema | dict[str, Any]) -> FormSchema:
        imported = (
            data if isinstance(data, ImportedFormSchema) else ImportedFormSchema.model_validate(data)
        )

        base = create_default_form_schema(
            title=imported.title,
            description=imported.description or "",
            multi_step=False,
        )

        fields = [self.transform_field(f) for f in imported.fields]

        main_block = FormBlock(
            id=self._id_factory("block"),
            title=MAIN_BLOCK_TITLE,
            description="",
            fields=fields,
            settings=BlockSettings(show_step_number=False, layout="single", spacing="normal"),
        )

        return FormSchema(
            blocks=[main_block],
            fields=list(fields),
            settings=merge_form_settings(imported.settings, base.settings),
            logic=list(base.logic),
        )

    def transform_field(self, imported: ImportedFormField) -> FormField:
        field_id = imported.id if imported.id and imported.id.strip() else self._id_factory("field")
        internal_type = map_field_type(imported.type)
        field_model, settings_model = field_models_for(internal_type)

        values: dict[str, Any] = {
            "id": field_id,
            "type": internal_type,
            "label": imported.label or "",
            "description": imported.description,
            "placeholder": imported.placeholder,
            "required": imported.required if imported.required is not None else False,
            "validation": derive_validation(imported, internal_type),
            "settings": settings_model(**derive_field_settings(imported, internal_type)),
        }

        options = normalize_options(imported.options)
        if options:
            values["options"] = options

        return field_model(**values)
