"""Pydantic schema for locale profiles."""

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

ASCII_WHITESPACE = "\t\n\v\f\r "

class LocaleConfig(BaseModel):
    """Character-classification and numeric settings for one locale."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(default="C", description="Profile name, informational only")
    whitespace: str = Field(default=ASCII_WHITESPACE,
                            description="Every character classified as whitespace")
    decimal_point: str = Field(default=".",
                               description="Single character separating whole and fractional parts")
    integer_type: str = Field(default="int32",
                              description="numpy signed integer dtype bounding integer literals")
    float_type: str = Field(default="float64",
                            description="numpy float dtype bounding float literals")

    @field_validator("decimal_point")
    @classmethod
    def _check_decimal_point(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"decimal_point must be exactly one character, got {value!r}")
        if value == "-" or value in "0123456789":
            raise ValueError(f"decimal_point cannot be a digit or '-', got {value!r}")
        return value

    @field_validator("integer_type")
    @classmethod
    def _check_integer_type(cls, value: str) -> str:
        try:
            dtype = np.dtype(value)
        except TypeError as e:
            raise ValueError(f"unknown integer_type {value!r}: {e}")
        if dtype.kind != "i":
            raise ValueError(f"integer_type must be a signed integer dtype, got {value!r}")
        return value

    @field_validator("float_type")
    @classmethod
    def _check_float_type(cls, value: str) -> str:
        try:
            dtype = np.dtype(value)
        except TypeError as e:
            raise ValueError(f"unknown float_type {value!r}: {e}")
        if dtype.kind != "f":
            raise ValueError(f"float_type must be a floating point dtype, got {value!r}")
        return value

    @model_validator(mode="after")
    def _check_decimal_point_not_whitespace(self) -> "LocaleConfig":
        if self.decimal_point in self.whitespace:
            raise ValueError(f"decimal_point {self.decimal_point!r} is classified as whitespace")
        return self

    @property
    def integer_bounds(self) -> tuple[int, int]:
        """Inclusive (min, max) of the configured integer type."""
        info = np.iinfo(np.dtype(self.integer_type))
        return int(info.min), int(info.max)

    @property
    def float_max(self) -> float:
        """Largest finite magnitude of the configured float type."""
        return float(np.finfo(np.dtype(self.float_type)).max)
