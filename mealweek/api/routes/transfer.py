from fastapi import APIRouter, Body, Depends

from mealweek.api.dependencies import get_planner
from mealweek.api.routes.meals import meal_view
from mealweek.logic.planner import Planner
from mealweek.logic.transfer.drag import transfer_mode
from mealweek.utilities.validators import DropInput, TransferModeInput, parse_form

router = APIRouter(prefix="/api/transfer")


@router.post("/mode")
def mode(body: dict = Body(...)):
    data = parse_form(TransferModeInput, body)
    return {"mode": transfer_mode(data.source_has_date, data.copy_modifier).value}


@router.post("/drop")
def drop(body: dict = Body(...), planner: Planner = Depends(get_planner)):
    """Run one drag gesture (start -> drop) through the transfer state machine."""
    data = parse_form(DropInput, body)
    state = planner.start_drag(data.source.kind, data.source.id, data.copy_modifier)
    action, meal, report = planner.drop(state, data.target.kind, data.target.date)
    return {
        "status": "success",
        "mode": state.mode.value,
        "action": action.kind,
        "meal": meal_view(meal) if meal else None,
        "sync": report.to_dict(),
    }
