"""
Validation and sanitization of submitted author forms.

Each form is a pydantic model. Names are trimmed and HTML-escaped before
the field validators run, so the length limit applies to the value that is
actually stored. Empty dates become None. Every field stops at its first
failing rule; errors are reported in field declaration order.

A rejected form still needs the user's input for redisplay, so
``validate`` also returns the sanitized values when validation fails.

Example:
    ```python
    result = validate(CreateAuthorForm, {"first_name": "  Jane ", "family_name": ""})
    result.values   # {"first_name": "Jane", "family_name": "", ...}
    result.errors   # [FieldError(field="family_name", ...)]
    ```
"""

import html
import re
from datetime import date, datetime
from typing import Annotated, Any, Mapping

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic_core import PydanticCustomError

from catalog.constants import NAME_MAX_LENGTH

_ALPHANUMERIC = re.compile(r"[0-9A-Za-z]+")

# Characters html.escape leaves alone but which are still unsafe in attributes
_EXTRA_ESCAPES = str.maketrans({"/": "&#x2F;", "\\": "&#x5C;", "`": "&#96;"})

_NAME_LABELS = {"first_name": "First name", "family_name": "Family name"}
_DATE_LABELS = {"date_of_birth": "date of birth", "date_of_death": "date of death"}


def escape_html(value: str) -> str:
    """Replace HTML-significant characters with entities."""
    return html.escape(value, quote=True).translate(_EXTRA_ESCAPES)


def _trim(value: Any) -> Any:
    if value is None:
        return ""
    return value.strip() if isinstance(value, str) else value


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        # Full ISO-8601 timestamps keep only their calendar date
        if "T" in value:
            try:
                return datetime.fromisoformat(value).date()
            except ValueError:
                return value
    return value or None


Name = Annotated[str, BeforeValidator(_trim), AfterValidator(escape_html)]
OptionalDate = Annotated[date | None, BeforeValidator(_blank_to_none)]

_name_adapter = TypeAdapter(Name)
_date_adapter = TypeAdapter(OptionalDate)


class FieldError(BaseModel):  # type: ignore[misc]
    """A single failed rule, shown next to the offending form field."""

    field: str
    message: str
    value: Any = None

    def to_view(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class ValidationResult(BaseModel):  # type: ignore[misc]
    """Sanitized values for every declared field plus the ordered errors."""

    values: dict[str, Any] = Field(default_factory=dict)
    errors: list[FieldError] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


class AuthorForm(BaseModel):  # type: ignore[misc]
    """
    Author fields accepted on update.

    Both names are required and limited to the column length; dates are
    optional ISO-8601 calendar dates.
    """

    model_config = ConfigDict(validate_default=True, extra="ignore")

    first_name: Name = ""
    family_name: Name = ""
    date_of_birth: OptionalDate = None
    date_of_death: OptionalDate = None

    @field_validator("first_name", "family_name")
    @classmethod
    def check_name(cls, v: str, info: ValidationInfo) -> str:
        """
        Validate that a name is present and fits its column.

        Raises:
            PydanticCustomError: If the name is empty or too long.
        """
        label = _NAME_LABELS[info.field_name]
        if not v:
            raise PydanticCustomError(
                "not_empty", "{label} must be specified.", {"label": label}
            )
        if len(v) > NAME_MAX_LENGTH:
            raise PydanticCustomError(
                "too_long",
                "{label} must be at most {max_length} characters.",
                {"label": label, "max_length": NAME_MAX_LENGTH},
            )
        return v

    @field_validator("date_of_birth", "date_of_death", mode="wrap")
    @classmethod
    def check_date(cls, value: Any, handler: Any, info: ValidationInfo) -> date | None:
        try:
            return handler(value)
        except ValidationError:
            raise PydanticCustomError(
                "iso_date",
                "Invalid {label}",
                {"label": _DATE_LABELS[info.field_name]},
            )

    @classmethod
    def sanitize(cls, form: Mapping[str, Any]) -> dict[str, Any]:
        """
        Sanitized value of every declared field, valid or not.

        Names are trimmed and escaped; a date that does not parse is None.
        """
        values: dict[str, Any] = {}
        for name in cls.model_fields:
            raw = form.get(name)
            if name in _NAME_LABELS:
                values[name] = _name_adapter.validate_python(raw)
                continue
            try:
                values[name] = _date_adapter.validate_python(raw)
            except ValidationError:
                values[name] = None
        return values


class CreateAuthorForm(AuthorForm):
    """Author fields accepted on create: names must also be alphanumeric."""

    @field_validator("first_name", "family_name")
    @classmethod
    def check_alphanumeric(cls, v: str, info: ValidationInfo) -> str:
        if not _ALPHANUMERIC.fullmatch(v):
            raise PydanticCustomError(
                "alphanumeric",
                "{label} has non-alphanumeric characters.",
                {"label": _NAME_LABELS[info.field_name]},
            )
        return v


def validate(
    form_model: type[AuthorForm], form: Mapping[str, Any]
) -> ValidationResult:
    """
    Validate a submitted form against ``form_model``.

    Args:
        form_model: AuthorForm or one of its subclasses.
        form: Submitted field values; undeclared fields are ignored.

    Returns:
        ValidationResult with a sanitized value for each declared field.
    """
    try:
        validated = form_model.model_validate(dict(form))
    except ValidationError as ex:
        errors = [
            FieldError(
                field=str(error["loc"][0]),
                message=error["msg"],
                value=form.get(str(error["loc"][0])),
            )
            for error in ex.errors()
        ]
        return ValidationResult(values=form_model.sanitize(form), errors=errors)

    return ValidationResult(values=validated.model_dump())
