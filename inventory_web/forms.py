"""
Minimal form model with field validators.

Mirrors the backend rules so obviously bad input never leaves the form:
required fields, a 255 character limit and non-negative quantities.
"""
from typing import Any, Callable, Dict, List, Optional

from .config import MAX_FIELD_LENGTH


class FormField:
    """
    A single form control.

    Args:
        default: Initial value, restored by ``Form.reset``
        required: Whether a blank value is an error
        max_length: Maximum string length
        min_value: Minimum numeric value
        coerce: Converter applied to non-blank values (e.g. ``int``)
    """

    def __init__(self, default: Any = None, required: bool = False, max_length: Optional[int] = None,
                 min_value: Optional[int] = None, coerce: Optional[Callable[[Any], Any]] = None):
        self.default = default
        self.required = required
        self.max_length = max_length
        self.min_value = min_value
        self.coerce = coerce
        self.value = default

    def cleaned(self) -> Any:
        """Value as it should be submitted: blanks become None, coercion applied."""
        value = self.value
        if isinstance(value, str):
            value = value.strip()
            if value == "":
                return None
        if value is not None and self.coerce is not None:
            value = self.coerce(value)
        return value

    def errors(self, label: str) -> List[str]:
        try:
            value = self.cleaned()
        except (TypeError, ValueError):
            return [f"{label} must be a number"]

        errors = []
        if value is None:
            if self.required:
                errors.append(f"{label} is required")
            return errors
        if self.max_length is not None and isinstance(value, str) and len(value) > self.max_length:
            errors.append(f"{label} cannot exceed {self.max_length} characters")
        if self.min_value is not None and value < self.min_value:
            errors.append(f"{label} must be at least {self.min_value}")
        return errors


def text_field(required: bool = False) -> FormField:
    return FormField(default="", required=required, max_length=MAX_FIELD_LENGTH)


class Form:
    """
    A named group of FormFields.

    Example:
        form = Form(name=text_field(required=True), quantity=FormField(0, required=True, min_value=0, coerce=int))
        form.patch_value({"name": "Bolts"})
        if form.is_valid():
            payload = form.value()
    """

    def __init__(self, **fields: FormField):
        self.fields: Dict[str, FormField] = fields

    def __getitem__(self, name: str) -> FormField:
        return self.fields[name]

    def set(self, name: str, value: Any) -> None:
        self.fields[name].value = value

    def patch_value(self, values: Dict[str, Any]) -> None:
        """Copy matching keys into the form, ignoring unknown ones."""
        for name, value in values.items():
            if name in self.fields:
                self.fields[name].value = value

    def reset(self) -> None:
        for field in self.fields.values():
            field.value = field.default

    def value(self) -> Dict[str, Any]:
        return {name: field.cleaned() for name, field in self.fields.items()}

    def errors(self) -> Dict[str, List[str]]:
        result = {}
        for name, field in self.fields.items():
            field_errors = field.errors(name.replace("_", " ").capitalize())
            if field_errors:
                result[name] = field_errors
        return result

    def is_valid(self) -> bool:
        return not self.errors()
