from sqlalchemy.orm import Session
from typing import List, Optional
from runai.models.wearable_data import WearableData
from runai.schemas.wearable import WearableReading

def create_readings(db: Session, user_id: int, readings: List[WearableReading]) -> int:
    rows = [
        WearableData(
            user_id=user_id,
            device_type=r.device_type,
            data_type=r.data_type,
            value=r.value,
            unit=r.unit,
            recorded_at=r.recorded_at,
            extra=r.metadata,
        )
        for r in readings
    ]
    db.add_all(rows)
    db.commit()
    return len(rows)

def get_readings(db: Session, user_id: int, data_type: Optional[str] = None, limit: int = 50) -> List[WearableData]:
    query = db.query(WearableData).filter(WearableData.user_id == user_id)
    if data_type:
        query = query.filter(WearableData.data_type == data_type)
    return query.order_by(WearableData.recorded_at.desc()).limit(limit).all()
