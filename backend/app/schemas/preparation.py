"""
Flavorbase Backend: Preparation Response Schema
=================================================
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class PreparationResponse(BaseModel):
    id: int
    user_id: Optional[int] = None
    name: str
    description: Optional[str] = None
    created: datetime

    model_config = {"from_attributes": True}
