"""
JSON form import: parse -> validate -> transform.

Nothing raised inside the pipeline crosses these entry points; parse,
validation, transform and read failures all come back as an
ImportTransformResult with success=False.
"""

import logging
from os import PathLike
from typing import Any

from pydantic import ValidationError

from form_import.core.config import settings
from form_import.core.import_transformer import ImportTransformer
from form_import.core.schema_validator import (
    SchemaValidator,
    invalid_json_result,
    parse_json_document,
)
from form_import.schemas.imports import ImportTransformResult
from form_import.schemas.validation import ValidationResult

logger = logging.getLogger(__name__)


def _describe_failure(exc: Exception) -> str:
    """One line for the caller; the full traceback goes to the log."""
    if isinstance(exc, ValidationError):
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        summary = f"{exc.title}.{location}: {first['msg']}" if location else f"{exc.title}: {first['msg']}"
        extra = exc.error_count() - 1
        return f"{summary} (+{extra} more)" if extra else summary
    lines = str(exc).strip().splitlines()
    return lines[0] if lines else type(exc).__name__


class JsonImportService:
    def __init__(
        self,
        validator: SchemaValidator | None = None,
        transformer: ImportTransformer | None = None,
        max_bytes: int | None = None,
    ):
        self.validator = validator or SchemaValidator()
        self.transformer = transformer or ImportTransformer()
        self.max_bytes = settings.MAX_IMPORT_BYTES if max_bytes is None else max_bytes

    # ---- entry points ----

    def transform_json(self, data: Any) -> ImportTransformResult:
        """Accepts an already-parsed JSON value or raw JSON text."""
        if isinstance(data, str):
            try:
                data = parse_json_document(data)
            except (ValueError, RecursionError):
                return self._rejected(invalid_json_result())

        validation = self.validator.validate(data)
        if not validation.is_valid:
            return self._rejected(validation)

        try:
            form_schema = self.transformer.transform(data)
        except Exception as e:
            logger.exception("Transforming a validated import document failed")
            return ImportTransformResult(
                success=False,
                errors=[f"Failed to transform JSON: {_describe_failure(e)}"],
                warnings=[str(w) for w in validation.warnings],
                validation_result=validation,
            )

        logger.info(
            "Imported form %r: %d fields, %d warnings",
            form_schema.settings.title,
            len(form_schema.fields),
            len(validation.warnings),
        )
        return ImportTransformResult(
            success=True,
            form_schema=form_schema,
            errors=[],
            warnings=[str(w) for w in validation.warnings],
            validation_result=validation,
        )

    def import_from_text(self, text: str) -> ImportTransformResult:
        """Pasted content."""
        if len(text.encode("utf-8")) > self.max_bytes:
            return self._read_failure(f"file exceeds {self.max_bytes} bytes")
        return self.transform_json(text)

    def import_from_bytes(self, raw: bytes) -> ImportTransformResult:
        """Uploaded content, decoded as UTF-8 (a leading BOM is tolerated)."""
        if len(raw) > self.max_bytes:
            return self._read_failure(f"file exceeds {self.max_bytes} bytes")
        try:
            text = raw.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            return self._read_failure(str(e))
        return self.transform_json(text)

    def import_from_file(self, path: str | PathLike) -> ImportTransformResult:
        try:
            with open(path, "rb") as fh:
                # one byte past the limit is enough to detect oversize
                raw = fh.read(self.max_bytes + 1)
        except OSError as e:
            return self._read_failure(str(e))
        return self.import_from_bytes(raw)

    # ---- helpers ----

    def _rejected(self, validation: ValidationResult) -> ImportTransformResult:
        logger.warning(
            "Rejected import document: %d errors, %d warnings",
            len(validation.errors),
            len(validation.warnings),
        )
        return ImportTransformResult(
            success=False,
            errors=[str(e) for e in validation.errors],
            warnings=[str(w) for w in validation.warnings],
            validation_result=validation,
        )

    def _read_failure(self, detail: str) -> ImportTransformResult:
        logger.warning("Could not read import content: %s", detail)
        return ImportTransformResult(
            success=False,
            errors=[f"Failed to read file: {detail}"],
            warnings=[],
        )


json_import_service = JsonImportService()
