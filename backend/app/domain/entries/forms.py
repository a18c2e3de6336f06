"""Form binding and validation for the add/edit entry forms."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, Mapping

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic_core import PydanticCustomError

from .activities import ActivitiesLookup
from .types import Entry, ValidationErrors

DURATION_NOT_POSITIVE_MESSAGE = "The Duration field value must be greater than '0'."
UNKNOWN_ACTIVITY_MESSAGE = (
    "The Activity field value '{activity_id}' is not a known activity."
)
FREE_TEXT_FIELDS = frozenset({"Notes"})
FORM_FIELDS: tuple[str, ...] = (
    "Id",
    "Date",
    "ActivityId",
    "Duration",
    "Exclude",
    "Notes",
)
FIELD_LABELS = {
    "Id": "Id",
    "Date": "Date",
    "ActivityId": "Activity",
    "Duration": "Duration",
    "Exclude": "Exclude",
    "Notes": "Notes",
}


class EntryForm(BaseModel):
    """Posted entry form fields, keyed by their HTML input names."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(default=0, alias="Id", ge=0)
    date: dt.date = Field(alias="Date")
    activity_id: int = Field(alias="ActivityId")
    duration: float = Field(alias="Duration", allow_inf_nan=False)
    exclude: bool = Field(default=False, alias="Exclude")
    notes: str | None = Field(default=None, alias="Notes")

    @field_validator("activity_id")
    @classmethod
    def _validate_activity(cls, value: int, info: ValidationInfo) -> int:
        activities: ActivitiesLookup | None = (info.context or {}).get("activities")
        if activities is not None and activities.get(value) is None:
            raise PydanticCustomError(
                "unknown_activity",
                UNKNOWN_ACTIVITY_MESSAGE,
                {"activity_id": value},
            )
        return value

    @field_validator("duration")
    @classmethod
    def _validate_duration(cls, value: float) -> float:
        # Runs only when Duration itself parsed cleanly.
        if value <= 0:
            raise PydanticCustomError(
                "duration_not_positive", DURATION_NOT_POSITIVE_MESSAGE
            )
        return value

    def to_entry(self) -> Entry:
        return Entry(
            id=self.id,
            date=self.date,
            activity_id=self.activity_id,
            duration=self.duration,
            exclude=self.exclude,
            notes=self.notes or None,
        )


@dataclass
class EntryFormResult:
    """Outcome of binding a submitted form.

    ``values`` holds the submitted strings so an invalid form can be
    re-rendered exactly as the user typed it.
    """

    values: dict[str, str]
    errors: ValidationErrors
    entry: Entry | None = None

    @property
    def is_valid(self) -> bool:
        return self.entry is not None and self.errors.is_valid


def bind_entry_form(
    form: Mapping[str, Any],
    *,
    ignore_id: bool = False,
    activities: ActivitiesLookup | None = None,
) -> EntryFormResult:
    """Bind and validate submitted fields; shared by the add and edit flows.

    The add flow passes ``ignore_id`` because the repository assigns ids, so
    whatever arrived in the hidden ``Id`` input is dropped unvalidated. When
    ``activities`` is given, ``ActivityId`` must name a known activity.
    """

    values = {
        name: str(form[name]) for name in FORM_FIELDS if form.get(name) is not None
    }
    # Blank inputs behave as if the field was never posted.
    payload = {
        name: value if name in FREE_TEXT_FIELDS else value.strip()
        for name, value in values.items()
        if value.strip()
    }
    if ignore_id:
        payload.pop("Id", None)
    errors = ValidationErrors()
    try:
        bound = EntryForm.model_validate(
            payload, context={"activities": activities}
        )
    except ValidationError as exc:
        for error in exc.errors():
            field_name = str(error["loc"][0]) if error["loc"] else "__all__"
            errors.add(field_name, _error_message(field_name, error))
        return EntryFormResult(values=values, errors=errors)
    return EntryFormResult(values=values, errors=errors, entry=bound.to_entry())


def form_values(entry: Entry) -> dict[str, str]:
    """Render an entry back into form input strings."""

    duration = entry.duration
    if not duration:
        duration_text = ""
    elif float(duration).is_integer():
        duration_text = str(int(duration))
    else:
        duration_text = str(duration)
    return {
        "Id": str(entry.id),
        "Date": entry.date.isoformat(),
        "ActivityId": "" if entry.activity_id is None else str(entry.activity_id),
        "Duration": duration_text,
        "Exclude": "true" if entry.exclude else "",
        "Notes": entry.notes or "",
    }


def _error_message(field_name: str, error: Mapping[str, Any]) -> str:
    label = FIELD_LABELS.get(field_name, field_name)
    error_type = error.get("type")
    if error_type == "missing":
        return f"The {label} field is required."
    if error_type in {"duration_not_positive", "unknown_activity"}:
        return str(error["msg"])
    return f"The value '{error.get('input')}' is not valid for {label}."
