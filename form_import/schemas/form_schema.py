"""
Internal form schema: what the rest of the application renders and persists.

Fields are a discriminated union on the resolved ``type``. Each variant owns
the settings payload that is legal for it, and settings models forbid extra
keys, so e.g. ``starCount`` on a text field cannot be constructed.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import ConfigDict, Field

from form_import.schemas.base import CamelModel


# ---- per-field settings ----

class FieldSettings(CamelModel):
    model_config = ConfigDict(extra="forbid")

    help_text: str | None = None
    default_value: Any = None


class TextareaFieldSettings(FieldSettings):
    rows: int | None = None


class NumericFieldSettings(FieldSettings):
    min: int | float | None = None
    max: int | float | None = None
    step: int | float | None = None


class ChoiceFieldSettings(FieldSettings):
    # selection bounds for checkbox groups
    min: int | None = None
    max: int | None = None


class SelectFieldSettings(FieldSettings):
    allow_multiple: bool | None = None


class StatementFieldSettings(FieldSettings):
    statement_heading: str
    statement_description: str | None = None
    statement_align: Literal["left", "center", "right"] = "left"
    statement_size: Literal["sm", "md", "lg"] = "md"


class RatingFieldSettings(FieldSettings):
    star_count: int = 5
    icon: str = "star"
    color: str = "#fbbf24"


class TagsFieldSettings(FieldSettings):
    max_tags: int = 10
    allow_duplicates: bool = False


class FieldValidation(CamelModel):
    min_length: int | None = None
    max_length: int | None = None
    min: int | float | None = None
    max: int | float | None = None
    pattern: str | None = None
    required_message: str | None = None


# ---- fields ----

class BaseFormField(CamelModel):
    id: str
    label: str
    description: str | None = None
    placeholder: str | None = None
    required: bool = False
    validation: FieldValidation = Field(default_factory=FieldValidation)
    options: list[str] | None = None


class BasicFormField(BaseFormField):
    type: Literal[
        "text",
        "email",
        "date",
        "time",
        "phone",
        "file",
        "signature",
        "address",
        "link",
        "radio",
        "poll",
        "scheduler",
        "social",
    ]
    settings: FieldSettings = Field(default_factory=FieldSettings)


class TextareaFormField(BaseFormField):
    type: Literal["textarea"]
    settings: TextareaFieldSettings = Field(default_factory=TextareaFieldSettings)


class NumericFormField(BaseFormField):
    type: Literal["number", "slider"]
    settings: NumericFieldSettings = Field(default_factory=NumericFieldSettings)


class CheckboxFormField(BaseFormField):
    type: Literal["checkbox"]
    settings: ChoiceFieldSettings = Field(default_factory=ChoiceFieldSettings)


class SelectFormField(BaseFormField):
    type: Literal["select"]
    settings: SelectFieldSettings = Field(default_factory=SelectFieldSettings)


class StatementFormField(BaseFormField):
    type: Literal["statement"]
    settings: StatementFieldSettings


class RatingFormField(BaseFormField):
    type: Literal["rating"]
    settings: RatingFieldSettings = Field(default_factory=RatingFieldSettings)


class TagsFormField(BaseFormField):
    type: Literal["tags"]
    settings: TagsFieldSettings = Field(default_factory=TagsFieldSettings)


FormField = Annotated[
    Union[
        BasicFormField,
        TextareaFormField,
        NumericFormField,
        CheckboxFormField,
        SelectFormField,
        StatementFormField,
        RatingFormField,
        TagsFormField,
    ],
    Field(discriminator="type"),
]

# resolved internal type -> (field model, settings model)
FIELD_MODELS: dict[str, tuple[type[BaseFormField], type[FieldSettings]]] = {
    "textarea": (TextareaFormField, TextareaFieldSettings),
    "number": (NumericFormField, NumericFieldSettings),
    "slider": (NumericFormField, NumericFieldSettings),
    "checkbox": (CheckboxFormField, ChoiceFieldSettings),
    "select": (SelectFormField, SelectFieldSettings),
    "statement": (StatementFormField, StatementFieldSettings),
    "rating": (RatingFormField, RatingFieldSettings),
    "tags": (TagsFormField, TagsFieldSettings),
}


def field_models_for(internal_type: str) -> tuple[type[BaseFormField], type[FieldSettings]]:
    return FIELD_MODELS.get(internal_type, (BasicFormField, FieldSettings))


# ---- blocks / form-level ----

class BlockSettings(CamelModel):
    show_step_number: bool = False
    layout: Literal["single", "two-column"] = "single"
    spacing: Literal["compact", "normal", "relaxed"] = "normal"


class FormBlock(CamelModel):
    id: str
    title: str
    description: str = ""
    fields: list[FormField]
    settings: BlockSettings = Field(default_factory=BlockSettings)


class ThemeSettings(CamelModel):
    primary_color: str = "#3b82f6"
    background_color: str = "#ffffff"
    text_color: str = "#111827"
    font_family: str = "Inter"


class NotificationSettings(CamelModel):
    enabled: bool = False
    email: str = ""
    subject: str = ""
    message: str = ""


class FormSettings(CamelModel):
    title: str
    description: str = ""
    multi_step: bool = False
    theme: ThemeSettings = Field(default_factory=ThemeSettings)
    submit_text: str = "Submit"
    success_message: str = "Thank you for your submission!"
    redirect_url: str | None = None
    notifications: NotificationSettings = Field(default_factory=NotificationSettings)
    rtl: bool = False


class FormSchema(CamelModel):
    blocks: list[FormBlock]
    fields: list[FormField]
    settings: FormSettings
    # conditional logic rules; imports never carry any
    logic: list[dict[str, Any]] = Field(default_factory=list)

    def to_document(self) -> dict[str, Any]:
        """JSON-ready camelCase document, as stored and served."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
