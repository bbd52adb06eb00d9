from pydantic import BaseModel, ConfigDict, Field


class Geo(BaseModel):
    """Coordinates captured once at startup and never changed afterwards."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
