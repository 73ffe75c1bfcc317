"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class SessionUser(BaseModel):
    """
    The signed-in student.

    Produced by the accounts module on register/login and passed explicitly
    to every listing operation that needs to know who is acting.
    """

    email: str = Field(..., description="Lowercased student email address")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
