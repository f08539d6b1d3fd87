from fastapi import Request

from liftlog.preferences import get_weight_unit_preference
from liftlog.utils.weights import WeightUnit

def get_weight_unit(request: Request) -> WeightUnit:
    return get_weight_unit_preference(request)
