from fastapi import APIRouter, Depends, Response

from liftlog.actions.preferences import set_weight_unit_preference
from liftlog.deps.auth import get_current_user_id
from liftlog.deps.preferences import get_weight_unit
from liftlog.schemas.preferences import WeightUnitPreference
from liftlog.utils.weights import WeightUnit

router = APIRouter(prefix="/preferences", tags=["preferences"])

@router.get("/weight-unit", response_model=WeightUnitPreference, dependencies=[Depends(get_current_user_id)])
def read_weight_unit(unit: WeightUnit = Depends(get_weight_unit)):
    return WeightUnitPreference(unit=unit)

@router.put("/weight-unit", response_model=WeightUnitPreference, dependencies=[Depends(get_current_user_id)])
def write_weight_unit(payload: WeightUnitPreference, response: Response):
    result = set_weight_unit_preference(response, payload.unit)
    return WeightUnitPreference(unit=result.data)
