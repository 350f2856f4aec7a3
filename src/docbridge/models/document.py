"""Document models — Where documents live and what a hit says about them."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class IndexLocator(BaseModel):
    """The (index, type) pair addressing every document of one record kind."""

    model_config = ConfigDict(frozen=True)

    index: str = Field(description="Index name")
    type: str = Field(description="Type name, the record kind's table name")

    def as_params(self) -> dict[str, str]:
        """Return the locator as request parameters."""
        return {"index": self.index, "type": self.type}


class SearchHitMetadata(BaseModel):
    """Search metadata attached to a record built from a hit.

    Kept apart from the record's attributes so it is never written back to
    the index by a later ``add_to_index``. ``version`` is ``None`` when the
    hit carried no ``_version``, which is not the same as version 0.
    """

    model_config = ConfigDict(frozen=True)

    score: float | None = Field(default=None, description="Relevance score (_score)")
    version: int | None = Field(default=None, description="Document version (_version)")
    is_document: bool = Field(default=True, description="Record was built from a search hit")
