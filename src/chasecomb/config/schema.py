"""Pydantic schema for enumeration runs."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

Element = int | float | str


class EnumerationConfig(BaseModel):
    """Validated enumeration settings with defaults."""

    model_config = ConfigDict(extra="forbid")

    elements: list[Element] | None = None
    n: int | None = Field(default=None, ge=0)
    k: int = Field(ge=0)

    limit: int | None = Field(default=None, gt=0)
    output_format: Literal["text", "json", "csv"] = "text"
    count_only: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @model_validator(mode="after")
    def _check_source(self) -> EnumerationConfig:
        if (self.elements is None) == (self.n is None):
            raise ValueError("Exactly one of 'elements' or 'n' must be provided.")
        available = self.element_count()
        if self.k > available:
            raise ValueError(f"k ({self.k}) is greater than the number of elements ({available}).")
        return self

    def element_count(self) -> int:
        """Return the number of distinct elements to combine."""
        if self.elements is not None:
            return len(dict.fromkeys(self.elements))
        return self.n or 0

    def resolve_elements(self) -> list[Element]:
        """Return explicit elements, or 0..n-1 when only n is configured."""
        if self.elements is not None:
            return list(self.elements)
        return list(range(self.n or 0))
