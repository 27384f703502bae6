from pydantic import BaseModel, Field
from typing import List, Literal, Optional, Dict, Any
from datetime import datetime

DeviceType = Literal["garmin", "apple_watch", "whoop", "oura", "polar", "fitbit"]

class WearableReading(BaseModel):
    device_type: DeviceType
    data_type: str = Field(..., min_length=1, max_length=50)
    value: float
    unit: str = Field(..., min_length=1, max_length=20)
    recorded_at: datetime
    metadata: Optional[Dict[str, Any]] = None

class WearableSyncRequest(BaseModel):
    readings: List[WearableReading] = Field(..., min_length=1, max_length=500)

class WearableSyncResponse(BaseModel):
    synced: int

class WearableDataResponse(BaseModel):
    id: int
    device_type: str
    data_type: str
    value: float
    unit: str
    recorded_at: datetime
    synced_at: Optional[datetime] = None
    metadata: Optional[Dict[str, Any]] = Field(None, validation_alias="extra")

    class Config:
        from_attributes = True
