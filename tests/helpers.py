from itertools import count

from sqlalchemy.orm import Session

from form_import.core.import_transformer import ImportTransformer
from form_import.models.form import Form


def make_field(field_id: str = "f1", field_type: str = "short_text", label: str = "Name", **extra) -> dict:
    field = {"id": field_id, "type": field_type, "label": label}
    field.update(extra)
    return field


def make_form(*fields: dict, title: str = "T", **extra) -> dict:
    doc = {"title": title, "fields": list(fields) or [make_field()]}
    doc.update(extra)
    return doc


def counting_transformer() -> ImportTransformer:
    """Transformer whose generated ids are predictable: field_1, block_2, ..."""
    counter = count(1)
    return ImportTransformer(id_factory=lambda prefix: f"{prefix}_{next(counter)}")


def create_form(
    db: Session,
    *,
    owner_email: str = "owner@test.com",
    title: str = "Stored Form",
    fields: list[dict] | None = None,
) -> Form:
    form = Form(
        owner_email=owner_email,
        title=title,
        form_schema={"blocks": [], "fields": fields or [], "settings": {"title": title}, "logic": []},
    )
    db.add(form)
    db.commit()
    db.refresh(form)
    return form
