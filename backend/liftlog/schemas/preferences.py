from pydantic import BaseModel
from liftlog.utils.weights import WeightUnit

class WeightUnitPreference(BaseModel):
    unit: WeightUnit
