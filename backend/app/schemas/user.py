"""
Flavorbase Backend: User Profile and Note Response Schemas
============================================================
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from app.schemas.flavor import FlavorResponse


class UserProfileResponse(BaseModel):
    id: int
    name: str
    location: Optional[str] = None
    bio: Optional[str] = None

    model_config = {"from_attributes": True}


class UserFlavorNoteResponse(BaseModel):
    """
    What:  A user's note on a flavor, with the flavor and the author.
    Who:   Returned (as an array) by GET /flavor/{flavorId}/notes.
    """

    user_id: int
    flavor_id: int
    note: str
    created: datetime
    flavor: FlavorResponse
    user_profile: UserProfileResponse

    model_config = {"from_attributes": True}
