"""
Accounts module data models.

These models define the data structures used by the accounts module
and exposed to other modules through the interface.
"""

from pydantic import BaseModel, Field


class Account(BaseModel):
    """
    A registered student.

    Accounts are created once and never updated or deleted. The credential
    is whatever the configured hasher produced, never the clear password.
    """

    email: str = Field(..., description="Lowercased student email (unique key)")
    credential: str = Field(..., description="Hashed credential")

    model_config = {"frozen": True}


class SessionRecord(BaseModel):
    """Persisted shape of the current session."""

    email: str = Field(..., description="Email of the signed-in account")
