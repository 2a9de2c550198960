from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator
from typing import Any, Dict, List, Literal, Optional, Tuple, Union
from enum import Enum

# Quality fields that only exist when the upstream model evaluated the event
MODEL_DATA_FIELDS = ("model_data", "quality", "quality_text", "cloud_cover")

# --- Enums ---
class SunEventType(str, Enum):
    SUNRISE = "sunrise"
    SUNSET = "sunset"

class QualityText(str, Enum):
    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"
    GREAT = "great"
    EXCELLENT = "excellent"

# --- Domain Models ---
class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

class MagicHours(BaseModel):
    """Photography windows around a sun event, each an ISO-8601 [start, end] pair."""
    model_config = ConfigDict(frozen=True)

    blue_hour: Tuple[str, str]
    golden_hour: Tuple[str, str]

class NoModelData(BaseModel):
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model_data: Literal[False] = False

class ModelData(BaseModel):
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model_data: Literal[True] = True
    quality: float = Field(..., ge=0.0, le=1.0)
    quality_text: QualityText
    cloud_cover: float = Field(..., ge=0.0, le=1.0)

class SunEvent(BaseModel):
    """
    One sunrise or sunset.

    On the wire the quality fields sit next to ``type`` and ``time``;
    internally they are grouped in ``model`` so an event either has all
    of them (``ModelData``) or none (``NoModelData``).
    """
    model_config = ConfigDict(frozen=True)

    type: SunEventType
    model: Union[ModelData, NoModelData]
    time: str
    direction: float = Field(..., ge=0.0, lt=360.0)
    magics: MagicHours

    @model_validator(mode="before")
    @classmethod
    def group_model_data(cls, data: Any) -> Any:
        if isinstance(data, dict) and "model" not in data:
            data = dict(data)
            data["model"] = {
                key: data.pop(key) for key in MODEL_DATA_FIELDS if key in data
            }
        return data

    @model_serializer(mode="wrap")
    def flatten_model_data(self, handler) -> Dict[str, Any]:
        data = handler(self)
        model = data.pop("model")
        # Keep the upstream key order: type, model_data, quality..., time, direction, magics
        return {"type": data.pop("type"), **model, **data}

    @property
    def has_model_data(self) -> bool:
        return isinstance(self.model, ModelData)

# --- Upstream (Sunsethue) Response ---
class ForecastResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: Location
    grid_location: Location
    data: List[SunEvent] = []

# --- API Response Models ---
class SimplifiedResponse(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    location: Location
    sunrise: Optional[SunEvent] = None
    sunset: Optional[SunEvent] = None
    fetched_at: str = Field(..., alias="fetchedAt")
