#!/usr/bin/env python3
"""
Validate a JSON form definition and import it as a new form.

Usage:
    python scripts/import_form_json.py path/to/form.json --dry-run
    python scripts/import_form_json.py path/to/form.json --owner owner@local.test
    python scripts/import_form_json.py path/to/form.json --owner owner@local.test --verbose
"""

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from form_import.db.session import SessionLocal
from form_import.models.form import Form
from form_import.schemas.imports import ImportTransformResult
from form_import.services.import_service import JsonImportService


def print_diagnostics(result: ImportTransformResult) -> None:
    for error in result.errors:
        print(f"  ❌ {error}")
    for warning in result.warnings:
        print(f"  ⚠ {warning}")
    validation = result.validation_result
    if validation and validation.fixable_errors:
        print("\nThese look easy to fix (usually a quoted true/false or a non-text value):")
        for issue in validation.fixable_errors:
            print(f"  - {issue}")


def print_summary(result: ImportTransformResult) -> None:
    schema = result.form_schema
    print(f"  Title:  {schema.settings.title}")
    print(f"  Fields: {len(schema.fields)}")
    for field in schema.fields:
        flag = " *" if field.required else ""
        print(f"    - [{field.type}] {field.label}{flag}")


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="Import a JSON form definition")
    parser.add_argument("path", type=Path, help="JSON file to import")
    parser.add_argument("--owner", help="Owner email for the created form (required unless --dry-run)")
    parser.add_argument("--dry-run", action="store_true", help="Validate and transform without saving")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    args = parser.parse_args()

    if not args.dry_run and not args.owner:
        parser.error("--owner is required unless --dry-run is given")

    service = JsonImportService()
    result = service.import_from_file(args.path.resolve())

    if not result.success:
        print(f"❌ Import failed: {args.path}")
        print_diagnostics(result)
        sys.exit(1)

    print(f"✓ Validation passed: {args.path}")
    if result.warnings:
        print_diagnostics(result)
    if args.verbose or args.dry_run:
        print_summary(result)

    if args.dry_run:
        print("\n✓ Dry-run complete - nothing saved.")
        return

    db = SessionLocal()
    try:
        form = Form(
            owner_email=args.owner.strip().lower(),
            title=result.form_schema.settings.title,
            form_schema=result.form_schema.to_document(),
        )
        db.add(form)
        db.commit()
        db.refresh(form)
        print(f"\n✓ Created form {form.id} for {form.owner_email}")
    except Exception as e:
        db.rollback()
        print(f"\n❌ Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)
    finally:
        db.close()


if __name__ == "__main__":
    main()
