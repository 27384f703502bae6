from sqlalchemy.orm import Session
from datetime import date
from typing import List
from runai.models.recovery_metric import RecoveryMetric

def get_recent_metrics(db: Session, user_id: int, limit: int = 7) -> List[RecoveryMetric]:
    return db.query(RecoveryMetric).filter(
        RecoveryMetric.user_id == user_id
    ).order_by(RecoveryMetric.date.desc()).limit(limit).all()

def get_metric_on(db: Session, user_id: int, day: date):
    return db.query(RecoveryMetric).filter(
        RecoveryMetric.user_id == user_id,
        RecoveryMetric.date == day
    ).first()
