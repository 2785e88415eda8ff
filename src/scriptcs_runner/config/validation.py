"""Field-level validation for the global configuration form."""
from enum import Enum

from pydantic import BaseModel


class ValidationKind(str, Enum):
    OK = "ok"
    WARNING = "warning"
    ERROR = "error"


class FormValidation(BaseModel):
    """Outcome of checking one form field."""
    kind: ValidationKind
    message: str = ""

    class Config:
        frozen = True

    @classmethod
    def ok(cls) -> 'FormValidation':
        return cls(kind=ValidationKind.OK)

    @classmethod
    def warning(cls, message: str) -> 'FormValidation':
        return cls(kind=ValidationKind.WARNING, message=message)

    @classmethod
    def error(cls, message: str) -> 'FormValidation':
        return cls(kind=ValidationKind.ERROR, message=message)

    @property
    def is_error(self) -> bool:
        return self.kind == ValidationKind.ERROR


def check_name(value: str) -> FormValidation:
    """
    Check a value typed into the configuration form.

    Args:
        value: The value the administrator entered

    Returns:
        An error for an empty value, a warning for one shorter than
        four characters, ok otherwise
    """
    value = value or ""
    if len(value) == 0:
        return FormValidation.error("Please set a name")
    if len(value) < 4:
        return FormValidation.warning("Isn't the name too short?")
    return FormValidation.ok()
