import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pet_store.domain.models.pet import PetType


class PetSchema(BaseModel):
    name: str = Field(min_length=1)
    type: PetType
    age: int = Field(ge=0)
    cost: int = Field(ge=0, description="Price in cents")


class PetUpdateSchema(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    type: Optional[PetType] = None
    age: Optional[int] = Field(default=None, ge=0)
    cost: Optional[int] = Field(default=None, ge=0, description="Price in cents")


class PetPublic(BaseModel):
    id: uuid.UUID
    name: str
    type: PetType
    age: int
    cost: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class PetListWithCounts(BaseModel):
    total_count: int
    filtered_count: int
    data: List[PetPublic]
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
