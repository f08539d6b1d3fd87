"""
Weight unit preference kept in a cookie.

Read once per request through ``deps.preferences.get_weight_unit`` and passed
down explicitly to whatever renders weights.
"""
from fastapi import Request, Response

from liftlog.settings import get_settings
from liftlog.utils.weights import WeightUnit, is_valid_weight_unit

COOKIE_NAME = "weight-unit"
DEFAULT_UNIT = WeightUnit.lbs
MAX_AGE_SECONDS = 60 * 60 * 24 * 365  # one year

def get_weight_unit_preference(request: Request) -> WeightUnit:
    value = request.cookies.get(COOKIE_NAME)
    if is_valid_weight_unit(value):
        return WeightUnit(value)
    return DEFAULT_UNIT

def set_weight_unit_preference_cookie(response: Response, unit: WeightUnit) -> None:
    response.set_cookie(
        COOKIE_NAME,
        WeightUnit(unit).value,
        path="/",
        max_age=MAX_AGE_SECONDS,
        samesite="lax",
        secure=get_settings().is_production,  # HTTPS only in production
    )
