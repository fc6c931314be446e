"""
Fixed lookup tables shared by the import validator and transformer.

Kept as plain immutable data so callers (and tests) can enumerate them.
"""

from types import MappingProxyType

# import type -> internal type
SUPPORTED_FIELD_TYPES = MappingProxyType(
    {
        # direct mappings
        "text": "text",
        "short_text": "text",
        "email": "email",
        "textarea": "textarea",
        "long_text": "textarea",
        "number": "number",
        "date": "date",
        "time": "time",
        "phone": "phone",
        "file": "file",
        "signature": "signature",
        "rating": "rating",
        "slider": "slider",
        "tags": "tags",
        "address": "address",
        "link": "link",
        # option-based
        "radio": "radio",
        "select": "select",
        "checkbox": "checkbox",
        "checkboxes": "checkbox",
        "multi_select": "select",
        # special
        "section": "statement",
        "statement": "statement",
        "poll": "poll",
        "scheduler": "scheduler",
        "social": "social",
    }
)

OPTION_FIELD_TYPES = frozenset({"radio", "select", "checkbox", "checkboxes", "multi_select"})
MULTI_SELECTION_FIELD_TYPES = frozenset({"checkboxes", "multi_select"})
NUMERIC_FIELD_TYPES = frozenset({"number", "slider"})
SECTION_FIELD_TYPES = frozenset({"section", "statement"})

# import types whose internal settings carry typed selection bounds / row counts
SELECTION_BOUND_FIELD_TYPES = MULTI_SELECTION_FIELD_TYPES | frozenset(
    name for name, internal in SUPPORTED_FIELD_TYPES.items() if internal == "checkbox"
)
TEXTAREA_FIELD_TYPES = frozenset(
    name for name, internal in SUPPORTED_FIELD_TYPES.items() if internal == "textarea"
)

# Substrings of validator messages that a UI can offer to auto-correct
FIXABLE_ERROR_MESSAGES = (
    "Field required must be a boolean",
    "Theme must be a string",
    "Language must be a string",
    "Success message must be a string",
)

RTL_LANGUAGES = frozenset({"ar", "he", "ur", "fa"})


def supported_field_types() -> list[str]:
    """Import type names, in table order."""
    return list(SUPPORTED_FIELD_TYPES.keys())


def map_field_type(import_type: str) -> str:
    # unknown types pass through; the validator rejects them first
    return SUPPORTED_FIELD_TYPES.get(import_type, import_type)


def is_fixable_message(message: str) -> bool:
    return any(fixable in message for fixable in FIXABLE_ERROR_MESSAGES)
