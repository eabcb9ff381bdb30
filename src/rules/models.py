from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DisplaySectionRules(BaseModel):
    zones: list[str] = Field(min_length=1)
    display_types: list[str] = Field(default_factory=list)

    @field_validator("zones", "display_types")
    @classmethod
    def no_blank_or_duplicate_names(cls, values: list[str]) -> list[str]:
        if any(not v.strip() for v in values):
            raise ValueError("names must not be blank")
        if len(set(values)) != len(values):
            raise ValueError("names must be unique")
        return values

class LoggingRules(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

class Rules(BaseModel):
    model_config = ConfigDict(frozen=True)

    display: DisplaySectionRules
    logging: LoggingRules = Field(default_factory=LoggingRules)

    # DisplayRulesPort
    def get_display_types(self) -> tuple[str, ...]:
        return tuple(self.display.display_types)

    def get_zones(self) -> tuple[str, ...]:
        return tuple(self.display.zones)
