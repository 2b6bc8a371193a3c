"""
Cooking Controller

Support for cooking mode: which steps have a time in them, and timers
for those steps.

Timers are created here but not kept. The client owns the countdown
and throws timers away when the cooking session ends.
"""

from fastapi import APIRouter, HTTPException

from app.models import Instruction, Recipe, StepTiming, Timer
from app.services.cooking import create_step_timer, step_timings

router = APIRouter(prefix="/cooking", tags=["cooking"])


@router.post("/steps", response_model=list[StepTiming])
def get_step_timings(recipe: Recipe):
    """List every step with the minutes mentioned in it (null if none)."""
    return step_timings(recipe)


@router.post("/timers", response_model=Timer, status_code=201)
def create_timer(instruction: Instruction):
    """
    Create a paused timer for a step.

    Returns 422 when the step text doesn't mention a cooking time.
    """
    timer = create_step_timer(instruction)
    if timer is None:
        raise HTTPException(status_code=422, detail="No cooking time found in this step")
    return timer
