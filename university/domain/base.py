"""
Record Base

Common base for every domain record. Validation failures raised by pydantic are
re-raised as the domain ``ValidationError`` so callers only handle one hierarchy.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from university.domain.exceptions import ValidationError

_MISSING = object()


def _describe_errors(exc: PydanticValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors into field/message pairs."""
    described = []
    for error in exc.errors():
        cause = error.get("ctx", {}).get("error")
        described.append(
            {
                "field": ".".join(str(part) for part in error["loc"]) or "__root__",
                "message": str(cause) if cause is not None else error["msg"],
            }
        )
    return described


class Record(BaseModel):
    """
    Base domain record.

    Construction either yields a fully valid record or raises ``ValidationError``;
    no partially-constructed record is observable.
    """

    model_config = ConfigDict(validate_assignment=True)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as exc:
            raise self._domain_error(exc) from exc

    def __setattr__(self, name: str, value: Any) -> None:
        # A rejected assignment leaves the previous value in place.
        previous = self.__dict__.get(name, _MISSING)
        try:
            super().__setattr__(name, value)
        except PydanticValidationError as exc:
            if previous is not _MISSING:
                self.__dict__[name] = previous
            raise self._domain_error(exc) from exc

    def _domain_error(self, exc: PydanticValidationError) -> ValidationError:
        errors = _describe_errors(exc)
        return ValidationError(
            errors[0]["message"],
            context={"record_type": type(self).__name__, "errors": errors},
        )

    def replace(self, **changes: Any) -> "Record":
        """
        Return a revalidated copy with ``changes`` applied.

        Raises:
            ValidationError: If the resulting record is invalid
        """
        return type(self)(**{**dict(self), **changes})
