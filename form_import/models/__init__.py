from form_import.models.form import Form

__all__ = ["Form"]
