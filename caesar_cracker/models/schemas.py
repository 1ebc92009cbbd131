from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


# ============================================================================
# Enums
# ============================================================================


class AttackType(str, Enum):
    """Supported key-recovery attacks."""

    DICTIONARY = "dictionary"
    FREQUENCY = "frequency"


# ============================================================================
# Crack Schemas
# ============================================================================


class KeyCandidate(BaseModel):
    """A recovered shift key and the plaintext it produces."""

    key: int = Field(ge=0, lt=128)
    score: int = Field(ge=0)
    plaintext: str


# ============================================================================
# Request Schemas
# ============================================================================


class CrackRequest(BaseModel):
    """Request schema for /crack endpoint."""

    ciphertext: str = Field(min_length=1, max_length=100_000)
    attack: AttackType = AttackType.FREQUENCY
    wordlist: list[str] | None = Field(
        default=None,
        description="Lowercase words for the dictionary attack; defaults to the configured wordlist.",
    )


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    plaintext: str = Field(min_length=1, max_length=100_000)
    key: int


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    ciphertext: str = Field(min_length=1, max_length=100_000)
    key: int


# ============================================================================
# Response Schemas
# ============================================================================


class CrackResponse(BaseModel):
    """Response schema for /crack endpoint."""

    attack: AttackType
    keys: list[int]
    scores: dict[int, int]
    candidates: list[KeyCandidate]
    explanation: str


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertext: str
    key_used: int


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str
    key_used: int


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
