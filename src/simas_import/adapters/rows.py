"""Pydantic model describing one vacancy row as typed by a person."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from simas_import.domain.model import ImportRow


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def _normalize_flag(value: object) -> object:
    # spreadsheet cells arrive as booleans or numbers as often as text
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return "1" if value == 1 else str(value)
    if isinstance(value, str):
        return value or None
    return value


class VacancyRowPayload(BaseModel):
    """Accepts the legacy spreadsheet headers as well as camelCase and snake_case keys.

    Blank cells become ``None``; whether a required value is missing is decided
    later, when all missing fields of the row are reported together.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    position_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("position_name", "positionName", "NOME_CARGO"),
    )
    department_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("department_name", "departmentName", "NOME_LOTACAO"),
    )
    notice_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("notice_name", "noticeName", "NOME_EDITAL"),
    )
    locked: str | None = Field(
        default=None,
        validation_alias=AliasChoices("locked", "BLOQUEADA"),
    )

    _normalize_names = field_validator(
        "position_name", "department_name", "notice_name", mode="before"
    )(_blank_to_none)
    _normalize_locked = field_validator("locked", mode="before")(_normalize_flag)

    def to_import_row(self) -> ImportRow:
        return {
            "position_name": self.position_name,
            "department_name": self.department_name,
            "notice_name": self.notice_name,
            "locked": self.locked,
        }
