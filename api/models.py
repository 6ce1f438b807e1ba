"""Pydantic models for API request/response validation.

Defines data structures for all API endpoints. Response field names
follow the meter's wire shape (camelCase flag keys).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from core.config import (
    DEFAULT_PASSWORD_LENGTH,
    MIN_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
    MAX_EVALUATE_LENGTH,
)
from core.scoring import EvaluationResult


class EvaluateRequest(BaseModel):
    """Request model for password evaluation."""
    password: Optional[str] = Field(
        default="",
        max_length=MAX_EVALUATE_LENGTH,
        description="Password to evaluate (null is treated as empty)"
    )


class GenerateRequest(BaseModel):
    """Request model for password generation."""
    length: int = Field(
        default=DEFAULT_PASSWORD_LENGTH,
        ge=MIN_PASSWORD_LENGTH,
        le=MAX_PASSWORD_LENGTH,
        description="Password length"
    )


class CharacterClassesModel(BaseModel):
    """Character classes present in a password."""
    lower: bool
    upper: bool
    digits: bool
    symbols: bool


class FlagsModel(BaseModel):
    """Weakness flags for an evaluated password."""
    model_config = ConfigDict(populate_by_name=True)

    is_common: bool = Field(alias="isCommon")
    repeated: bool
    sequential: bool
    length: int
    classes: CharacterClassesModel


class EvaluationResponse(BaseModel):
    """Response model for a password evaluation."""
    model_config = ConfigDict(populate_by_name=True)

    entropy: float
    score: int = Field(ge=0, le=100)
    rating: str
    suggestions: list[str]
    flags: FlagsModel
    classes_count: int = Field(alias="classesCount", ge=0, le=4)

    @classmethod
    def from_result(cls, result: EvaluationResult) -> "EvaluationResponse":
        """Build a response from a core evaluation result."""
        return cls.model_validate(result.to_dict())


class GenerateResponse(BaseModel):
    """Response model for a generated password."""
    password: str
    evaluation: EvaluationResponse


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    version: str
