"""Pydantic model (V2) describing the outcome of a single property lookup."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from sysprop.constants.messages import MASKED_VALUE


class LookupOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Property key that was looked up.")
    value: Optional[str] = None
    present: bool = False
    mandatory: bool = False

    # present is derived from value; an explicit mismatch is a caller bug
    @model_validator(mode='before')
    @classmethod
    def derive_present(cls, data: Any) -> Any:
        if isinstance(data, dict):
            derived = data.get('value') is not None
            if 'present' in data and data['present'] != derived:
                raise ValueError(f"present={data['present']} contradicts value for {data.get('key')!r}")
            data = {**data, 'present': derived}
        return data

    @property
    def missing_mandatory(self) -> bool:
        return self.mandatory and not self.present

    def masked(self) -> "LookupOutcome":
        """Copy with the value replaced by a placeholder (absent stays absent)."""
        if not self.present:
            return self
        return self.model_copy(update={'value': MASKED_VALUE})
