# Import all models here
from runai.models.user import User
from runai.models.profile import Profile
from runai.models.recovery_metric import RecoveryMetric
from runai.models.training_plan import TrainingPlan
from runai.models.workout import Workout
from runai.models.wearable_data import WearableData
