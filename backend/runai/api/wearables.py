from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from runai.database import get_db
from runai.schemas.wearable import WearableDataResponse, WearableSyncRequest, WearableSyncResponse
from runai.crud import wearable_data as crud_wearable
from runai.models.user import User
from runai.api.auth import get_current_user

router = APIRouter(prefix="/wearables", tags=["Wearables"])

@router.post("/sync", response_model=WearableSyncResponse)
def sync_wearable_data(
    request: WearableSyncRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    synced = crud_wearable.create_readings(db, current_user.id, request.readings)
    return {"synced": synced}

@router.get("/data", response_model=List[WearableDataResponse])
def read_wearable_data(
    data_type: Optional[str] = None,
    limit: int = Query(50, ge=1, le=500),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return crud_wearable.get_readings(db, current_user.id, data_type=data_type, limit=limit)
