from pydantic import BaseModel, Field


class PersonProjection(BaseModel):
    id: str = Field(..., description="Person id")
    name: str = Field(..., description="Name, capitalized")
    best_friend_id: str | None = Field(None, description="Id of the best friend, if any")


class CarProjection(BaseModel):
    id: str = Field(..., description="Car id")
    model: str = Field(..., description="Make and model")
    owner_id: str = Field(..., description="Id of the owner")
