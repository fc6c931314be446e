from form_import.schemas.form_schema import FormSchema, FormSettings, ThemeSettings

LIGHT_PRIMARY_COLOR = "#3b82f6"
DARK_PRIMARY_COLOR = "#1f2937"


def create_default_form_schema(
    *,
    title: str,
    description: str = "",
    multi_step: bool = False,
) -> FormSchema:
    """
    Blank form with the application's default settings.

    Callers fill in blocks and fields; logic starts empty.
    """
    return FormSchema(
        blocks=[],
        fields=[],
        settings=FormSettings(
            title=title,
            description=description,
            multi_step=multi_step,
            theme=ThemeSettings(primary_color=LIGHT_PRIMARY_COLOR),
        ),
        logic=[],
    )
