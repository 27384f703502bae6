from sqlalchemy.orm import Session
from runai.models.training_plan import TrainingPlan

"""
Training Plan CRUD
------------------
Pure database access for training plans.
Generation lives in runai.services.plan_service.
"""

def get_active_plan(db: Session, user_id: int):
    return db.query(TrainingPlan).filter(
        TrainingPlan.user_id == user_id,
        TrainingPlan.is_active.is_(True)
    ).order_by(TrainingPlan.id.desc()).first()

def count_active_plans(db: Session, user_id: int) -> int:
    return db.query(TrainingPlan).filter(
        TrainingPlan.user_id == user_id,
        TrainingPlan.is_active.is_(True)
    ).count()

def deactivate_other_plans(db: Session, user_id: int, keep_plan_id: int) -> int:
    """Flags every other plan of the user inactive. Does not commit."""
    return db.query(TrainingPlan).filter(
        TrainingPlan.user_id == user_id,
        TrainingPlan.id != keep_plan_id,
        TrainingPlan.is_active.is_(True)
    ).update({TrainingPlan.is_active: False}, synchronize_session=False)
