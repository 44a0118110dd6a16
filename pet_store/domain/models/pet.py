import uuid
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class PetType(str, Enum):
    BIRD = "bird"
    CAT = "cat"
    DOG = "dog"
    REPTILE = "reptile"


class Pet(BaseModel):
    name: str
    type: PetType
    age: int
    cost: int
    id: Optional[uuid.UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
