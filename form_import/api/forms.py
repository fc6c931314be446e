from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, File, HTTPException, Query, UploadFile, status
from sqlalchemy.orm import Session

from form_import.core.config import settings
from form_import.core.field_types import OPTION_FIELD_TYPES, SUPPORTED_FIELD_TYPES
from form_import.core.security import get_current_owner
from form_import.db.session import get_db
from form_import.models.form import Form
from form_import.schemas.imports import (
    FormImportOut,
    FormOut,
    FormSummaryOut,
    ImportTransformResult,
    SupportedFieldTypeOut,
)
from form_import.schemas.pagination import PaginatedResponse, PaginationMeta
from form_import.schemas.validation import ValidationResult
from form_import.services.import_service import json_import_service

router = APIRouter(prefix="/forms", tags=["forms"])


def _form_out(form: Form) -> FormOut:
    return FormOut(
        id=str(form.id),
        title=form.title,
        owner_email=form.owner_email,
        form_schema=form.form_schema,
        created_at=form.created_at,
        updated_at=form.updated_at,
    )


def _form_summary(form: Form) -> FormSummaryOut:
    return FormSummaryOut(
        id=str(form.id),
        title=form.title,
        field_count=len((form.form_schema or {}).get("fields", [])),
        created_at=form.created_at,
    )


def _persist_import(db: Session, owner: str, result: ImportTransformResult) -> FormImportOut:
    if not (result.success and result.form_schema):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=result.model_dump(mode="json", by_alias=True, exclude_none=True),
        )

    form = Form(
        owner_email=owner,
        title=result.form_schema.settings.title,
        form_schema=result.form_schema.to_document(),
    )
    db.add(form)
    db.commit()
    db.refresh(form)

    return FormImportOut(
        form=_form_out(form),
        warnings=result.warnings,
        validation_result=result.validation_result,
    )


@router.get("/import/field-types", response_model=list[SupportedFieldTypeOut])
def list_supported_field_types():
    return [
        SupportedFieldTypeOut(
            import_type=import_type,
            internal_type=internal_type,
            requires_options=import_type in OPTION_FIELD_TYPES,
        )
        for import_type, internal_type in SUPPORTED_FIELD_TYPES.items()
    ]


@router.post("/import/validate", response_model=ValidationResult)
def validate_import(payload: Any = Body(...)):
    """
    Validate an import document without transforming it.

    Always 200; inspect `isValid`. A JSON string body is treated as raw
    (pasted) JSON text and parsed first.
    """
    return json_import_service.validator.validate(payload)


@router.post("/import/preview", response_model=ImportTransformResult, response_model_exclude_none=True)
def preview_import(payload: Any = Body(...)):
    """Run the full pipeline and return the result without saving anything."""
    return json_import_service.transform_json(payload)


@router.post(
    "/import",
    response_model=FormImportOut,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def import_form(
    payload: Any = Body(...),
    db: Session = Depends(get_db),
    owner: str = Depends(get_current_owner),
):
    result = json_import_service.transform_json(payload)
    return _persist_import(db, owner, result)


@router.post(
    "/import/file",
    response_model=FormImportOut,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def import_form_file(
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    owner: str = Depends(get_current_owner),
):
    try:
        raw = file.file.read(settings.MAX_IMPORT_BYTES + 1)
    except OSError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=ImportTransformResult(
                success=False, errors=[f"Failed to read file: {e}"]
            ).model_dump(mode="json", by_alias=True, exclude_none=True),
        )
    finally:
        file.file.close()

    result = json_import_service.import_from_bytes(raw)
    return _persist_import(db, owner, result)


@router.get("")
def list_forms(
    search: str | None = Query(default=None, description="Search by title"),
    limit: int = Query(default=100, ge=1, le=500, description="Maximum number of results"),
    offset: int = Query(default=0, ge=0, description="Number of results to skip"),
    include_pagination: bool = Query(default=False, description="Include pagination metadata"),
    db: Session = Depends(get_db),
    owner: str = Depends(get_current_owner),
):
    """
    List the caller's forms, newest first.

    Use ?include_pagination=true to get pagination metadata.
    """
    query = db.query(Form).filter(Form.owner_email == owner)

    if search:
        query = query.filter(Form.title.ilike(f"%{search}%"))

    total = query.count()
    forms = query.order_by(Form.created_at.desc()).offset(offset).limit(limit).all()
    items = [_form_summary(f) for f in forms]

    if include_pagination:
        return PaginatedResponse[FormSummaryOut](
            items=items,
            pagination=PaginationMeta.for_page(total=total, limit=limit, offset=offset, returned=len(items)),
        )
    return items


@router.get("/{form_id}", response_model=FormOut)
def get_form(
    form_id: str,
    db: Session = Depends(get_db),
    owner: str = Depends(get_current_owner),
):
    try:
        key = UUID(form_id)
    except ValueError:
        raise HTTPException(status_code=404, detail="Form not found")

    form = db.get(Form, key)
    if not form or form.owner_email != owner:
        raise HTTPException(status_code=404, detail="Form not found")
    return _form_out(form)
