from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field


class Empty(BaseModel):
    """No payload received yet (or the fetch failed)."""

    kind: Literal["empty"] = "empty"


class Loaded(BaseModel):
    kind: Literal["loaded"] = "loaded"
    payload: Any = Field(..., description="Decoded metrics body, any JSON shape")


DashboardState = Annotated[Empty | Loaded, Field(discriminator="kind")]
