from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

# --- Content ---

class Book(BaseModel):
    """A book content item. Frozen: drivers only ever read it."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    title: str = Field(min_length=1)
    author: str = ""
    cover_photo_url: str | None = None
    description: str = ""
