"""Validators do formulário de contato.

Uso:
    from api.validators.contact import validate_contact_form

    result = validate_contact_form(payload)
    if not result.is_valid:
        return {"success": False, "errors": result.errors_as_dicts()}
"""

from api.validators.contact.email_address import is_valid_email, normalize_email
from api.validators.contact.form import (
    CONTACT_FORM_RULES,
    FieldRule,
    ValidationResult,
    validate_contact_form,
)
from api.validators.contact.sanitize import escape_html, text_length

__all__ = [
    "CONTACT_FORM_RULES",
    "FieldRule",
    "ValidationResult",
    "escape_html",
    "is_valid_email",
    "normalize_email",
    "text_length",
    "validate_contact_form",
]
