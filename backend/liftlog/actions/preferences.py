from fastapi import Response

from liftlog.actions.result import ActionResult
from liftlog.preferences import set_weight_unit_preference_cookie
from liftlog.utils.weights import WeightUnit

def set_weight_unit_preference(response: Response, unit: WeightUnit) -> ActionResult[WeightUnit]:
    """Store the unit; the next dashboard request reads it and renders in it."""
    set_weight_unit_preference_cookie(response, unit)
    return ActionResult.ok(unit)
