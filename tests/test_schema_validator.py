import pytest

from form_import.core.field_types import SUPPORTED_FIELD_TYPES
from form_import.core.schema_validator import SchemaValidator, validate_import_schema
from tests.helpers import make_field, make_form


def _paths(issues) -> list[str]:
    return [i.path for i in issues]


def test_minimal_form_is_valid():
    """Test a minimal form passes validation"""
    result = validate_import_schema(make_form(make_field(required=True)))
    assert result.is_valid is True
    assert result.errors == []
    assert result.warnings == []
    assert result.fixable_errors == []


def test_missing_title_and_fields():
    """Test an empty object reports title and fields"""
    result = validate_import_schema({})
    assert result.is_valid is False
    assert _paths(result.errors) == ["title", "fields"]
    assert result.errors[1].message == "Fields must be an array"


def test_fields_not_an_array_stops_field_and_settings_checks():
    """Test non-array fields stops further checks"""
    result = validate_import_schema({"title": "T", "fields": {"id": "x"}, "settings": "nope"})
    assert _paths(result.errors) == ["fields"]


def test_empty_title_and_empty_fields_both_reported():
    """Both root checks are independent and fire from one call"""
    result = validate_import_schema({"title": "", "fields": []})
    assert result.is_valid is False
    assert _paths(result.errors) == ["title", "fields"]
    assert result.errors[1].message == "Form must have at least one field"


def test_empty_fields_still_validates_settings():
    result = validate_import_schema({"title": "T", "fields": [], "settings": {"theme": 3}})
    assert _paths(result.errors) == ["fields", "settings.theme"]


def test_blank_title_and_wrong_type_title():
    assert _paths(validate_import_schema(make_form(title="   ")).errors) == ["title"]
    assert _paths(validate_import_schema(make_form(title=7)).errors) == ["title"]


def test_description_must_be_string():
    result = validate_import_schema(make_form(description=["x"]))
    assert _paths(result.errors) == ["description"]


def test_non_object_root():
    """Test a non-object document is rejected at the root"""
    result = validate_import_schema([1, 2, 3])
    assert result.is_valid is False
    assert _paths(result.errors) == ["root"]


def test_malformed_json_text():
    """Test unparsable text yields one root error"""
    result = SchemaValidator().validate("{not json")
    assert result.is_valid is False
    assert len(result.errors) == 1
    assert result.errors[0].path == "root"
    assert result.errors[0].message == "Invalid JSON format. Please check your JSON syntax."
    assert result.warnings == []
    assert result.fixable_errors == []


def test_json_text_is_parsed_before_validation():
    result = SchemaValidator().validate('{"title": "T", "fields": [{"id": "a", "type": "email", "label": "E"}]}')
    assert result.is_valid is True


def test_field_must_be_object():
    """Test non-object field entries are reported"""
    result = validate_import_schema(make_form("just a string", make_field()))
    assert _paths(result.errors) == ["fields[0]"]
    assert result.errors[0].message == "Field must be an object"


def test_required_field_properties():
    """Test id, type and label are required"""
    result = validate_import_schema(make_form({"id": " ", "type": "", "label": None}))
    assert _paths(result.errors) == ["fields[0].id", "fields[0].type", "fields[0].label"]


def test_errors_in_one_field_do_not_suppress_siblings():
    """Test each field is checked independently"""
    result = validate_import_schema(
        make_form(
            make_field("a", "bogus"),
            make_field("b", "radio"),
            make_field("c", "number", min=5, max=1),
        )
    )
    assert _paths(result.errors) == ["fields[0].type", "fields[1].options", "fields[2].min"]


def test_unsupported_type_lists_every_supported_type():
    """Test the unsupported type message lists every supported type"""
    result = validate_import_schema(make_form(make_field(field_type="hologram")))
    type_errors = [e for e in result.errors if e.path == "fields[0].type"]
    assert len(type_errors) == 1
    message = type_errors[0].message
    assert message.startswith("Unsupported field type: hologram.")
    for import_type in SUPPORTED_FIELD_TYPES:
        assert import_type in message


@pytest.mark.parametrize("import_type", sorted(SUPPORTED_FIELD_TYPES))
def test_every_supported_type_is_accepted(import_type):
    field = make_field(field_type=import_type, options=["A"])
    result = validate_import_schema(make_form(field))
    assert result.is_valid is True, result.errors


def test_optional_field_property_types():
    """Test types of optional field properties"""
    field = make_field(required="yes", placeholder=1, helpText=False, description={"a": 1})
    result = validate_import_schema(make_form(field))
    assert _paths(result.errors) == [
        "fields[0].required",
        "fields[0].placeholder",
        "fields[0].helpText",
        "fields[0].description",
    ]
    assert result.errors[0].message == "Field required must be a boolean"


def test_explicit_null_required_is_wrong_type():
    result = validate_import_schema(make_form(make_field(required=None)))
    assert _paths(result.errors) == ["fields[0].required"]


def test_unknown_keys_are_ignored():
    result = validate_import_schema(make_form(make_field(color="red", x_custom={"deep": [1]})))
    assert result.is_valid is True


@pytest.mark.parametrize("import_type", ["radio", "select", "checkbox", "checkboxes", "multi_select"])
def test_option_fields_require_options(import_type):
    """Test option-bearing types require a non-empty options array"""
    missing = validate_import_schema(make_form(make_field(field_type=import_type)))
    assert _paths(missing.errors) == ["fields[0].options"]
    assert missing.errors[0].message == f"Field type {import_type} requires an options array"

    empty = validate_import_schema(make_form(make_field(field_type=import_type, options=[])))
    assert _paths(empty.errors) == ["fields[0].options"]
    assert empty.errors[0].message == f"Field type {import_type} must have at least one option"


def test_each_bad_option_is_addressed_by_index():
    """Test each bad option is reported at its index"""
    options = ["ok", "  ", {"id": "x", "label": "X"}, {"id": 3, "label": ""}, 42]
    result = validate_import_schema(make_form(make_field(field_type="radio", options=options)))
    assert _paths(result.errors) == [
        "fields[0].options[1]",
        "fields[0].options[3].id",
        "fields[0].options[3].label",
        "fields[0].options[4]",
    ]
    assert result.errors[-1].message == "Option must be a string or object with id and label"


def test_selection_bounds_for_multi_select():
    """Test selection bounds on multi-selection fields"""
    ok = make_field(field_type="multi_select", options=["A", "B"], minSelections=1, maxSelections=5)
    assert validate_import_schema(make_form(ok)).is_valid is True

    bad = make_field(field_type="checkboxes", options=["A"], minSelections=-1, maxSelections=0)
    result = validate_import_schema(make_form(bad))
    assert _paths(result.errors) == ["fields[0].minSelections", "fields[0].maxSelections"]

    inverted = make_field(field_type="checkboxes", options=["A"], minSelections=3, maxSelections=2)
    result = validate_import_schema(make_form(inverted))
    assert _paths(result.errors) == ["fields[0].maxSelections"]
    assert result.errors[0].message == "maxSelections cannot be less than minSelections"


def test_selection_bounds_reject_booleans_and_fractions():
    field = make_field(field_type="multi_select", options=["A"], minSelections=True, maxSelections=1.5)
    result = validate_import_schema(make_form(field))
    assert _paths(result.errors) == ["fields[0].minSelections", "fields[0].maxSelections"]


def test_selection_bounds_only_apply_to_multi_selection_types():
    field = make_field(field_type="radio", options=["A"], minSelections=-4)
    assert validate_import_schema(make_form(field)).is_valid is True


@pytest.mark.parametrize("import_type", ["number", "slider"])
def test_numeric_bounds(import_type):
    """Test min must be less than max on numeric fields"""
    equal = validate_import_schema(make_form(make_field(field_type=import_type, min=5, max=5)))
    assert _paths(equal.errors) == ["fields[0].min"]
    assert equal.errors[0].message == "min value must be less than max value"

    ordered = validate_import_schema(make_form(make_field(field_type=import_type, min=1, max=10, step=0.5)))
    assert ordered.is_valid is True


def test_numeric_values_must_be_numbers():
    field = make_field(field_type="number", min="1", max=True, step=[1])
    result = validate_import_schema(make_form(field))
    assert _paths(result.errors) == ["fields[0].min", "fields[0].max", "fields[0].step"]


@pytest.mark.parametrize("import_type", ["section", "statement"])
def test_section_without_label_is_only_a_warning(import_type):
    """Test a blank section label is only a warning"""
    result = validate_import_schema(make_form(make_field(field_type=import_type, label="  ")))
    assert result.is_valid is True
    assert _paths(result.warnings) == ["fields[0].label"]
    assert result.warnings[0].severity == "warning"


def test_section_with_wrong_label_type_is_an_error():
    result = validate_import_schema(make_form(make_field(field_type="section", label=12)))
    assert _paths(result.errors) == ["fields[0].label"]


def test_nested_validation_rules():
    """Test the nested validation object rules"""
    ok = make_field(validation={"minLength": 2, "maxLength": 10, "pattern": "^a"})
    assert validate_import_schema(make_form(ok)).is_valid is True

    bad = make_field(validation={"minLength": -1, "maxLength": 0, "pattern": 5, "min": "x"})
    result = validate_import_schema(make_form(bad))
    assert _paths(result.errors) == [
        "fields[0].validation.minLength",
        "fields[0].validation.maxLength",
        "fields[0].validation.min",
        "fields[0].validation.pattern",
    ]

    inverted = make_field(validation={"minLength": 10, "maxLength": 10})
    result = validate_import_schema(make_form(inverted))
    assert _paths(result.errors) == ["fields[0].validation.minLength"]
    assert result.errors[0].message == "minLength must be less than maxLength"


def test_validation_must_be_object():
    result = validate_import_schema(make_form(make_field(validation="strict")))
    assert _paths(result.errors) == ["fields[0].validation"]


def test_settings_rules():
    """Test form settings value types"""
    settings = {
        "theme": 1,
        "language": ["en"],
        "submission": {"redirectUrl": 5, "successMessage": False},
        "notifications": {"sendEmail": "yes", "emails": ["a@x.com", 7]},
        "custom": {"anything": True},
    }
    result = validate_import_schema(make_form(settings=settings))
    assert _paths(result.errors) == [
        "settings.theme",
        "settings.language",
        "settings.submission.redirectUrl",
        "settings.submission.successMessage",
        "settings.notifications.sendEmail",
        "settings.notifications.emails[1]",
    ]


def test_settings_accepts_null_redirect_url():
    settings = {"submission": {"redirectUrl": None, "successMessage": "Thanks"}}
    assert validate_import_schema(make_form(settings=settings)).is_valid is True


def test_settings_sub_objects_must_be_objects():
    settings = {"submission": "x", "notifications": {"emails": "a@x.com"}}
    result = validate_import_schema(make_form(settings=settings))
    assert _paths(result.errors) == ["settings.submission", "settings.notifications.emails"]

    result = validate_import_schema(make_form(settings=[1]))
    assert _paths(result.errors) == ["settings"]


def test_fixable_errors_are_a_subset_of_errors():
    """Test fixable errors are a subset of errors"""
    settings = {"theme": 1, "language": 2, "submission": {"successMessage": 3}, "notifications": {"sendEmail": 1}}
    result = validate_import_schema(make_form(make_field(required="true", label=""), settings=settings))
    fixable = {e.path for e in result.fixable_errors}
    assert fixable == {
        "fields[0].required",
        "settings.theme",
        "settings.language",
        "settings.submission.successMessage",
    }
    assert all(e in result.errors for e in result.fixable_errors)


def test_warnings_do_not_affect_validity():
    result = validate_import_schema(make_form(make_field(field_type="statement", label="")))
    assert result.warnings
    assert result.is_valid is True


def test_validator_instance_keeps_no_state_between_runs():
    """Test a validator instance keeps no state between runs"""
    validator = SchemaValidator()
    bad = validator.validate({})
    good = validator.validate(make_form())
    assert bad.is_valid is False
    assert good.is_valid is True
    assert good.errors == []
    assert len(bad.errors) == 2


def test_camel_case_serialization():
    result = validate_import_schema({"title": "T", "fields": []})
    body = result.model_dump(mode="json", by_alias=True)
    assert body["isValid"] is False
    assert body["fixableErrors"] == []
    assert body["errors"][0] == {
        "path": "fields",
        "message": "Form must have at least one field",
        "severity": "error",
    }


@pytest.mark.parametrize("import_type", ["checkbox", "checkboxes", "multi_select"])
def test_selection_bounds_checked_for_every_checkbox_type(import_type):
    """Test selection bounds are checked wherever the settings receive them"""
    field = make_field(field_type=import_type, options=["A"], minSelections="x", maxSelections=2.5)
    result = validate_import_schema(make_form(field))
    assert _paths(result.errors) == ["fields[0].minSelections", "fields[0].maxSelections"]


@pytest.mark.parametrize("import_type", ["textarea", "long_text"])
def test_textarea_rows_must_be_positive_integer(import_type):
    """Test textarea rows must be a positive integer"""
    for rows in (2.5, 0, "4", True):
        result = validate_import_schema(make_form(make_field(field_type=import_type, rows=rows)))
        assert _paths(result.errors) == ["fields[0].rows"]
        assert result.errors[0].message == "rows must be a positive integer"

    assert validate_import_schema(make_form(make_field(field_type=import_type, rows=4))).is_valid is True


def test_rows_ignored_on_other_types():
    result = validate_import_schema(make_form(make_field(field_type="text", rows="many")))
    assert result.is_valid is True
