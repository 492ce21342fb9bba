# app/models/auth_models.py
from typing import Optional

from pydantic import BaseModel


class AuthUser(BaseModel):
    """Identity decoded from a verified bearer token."""

    id: str
    email: str
    name: Optional[str] = None
