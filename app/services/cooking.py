"""
Cooking Service - helpers for step-by-step cooking mode.

Everything here is a pure function of its inputs. Timers and progress
are plain values: each operation returns an updated copy and the
caller decides where to keep it (browser state, a session, a test).
"""

import re
import uuid
from dataclasses import dataclass, field, replace
from typing import Optional

from app.models import Instruction, Recipe, StepTiming, Timer

TIME_PATTERN = re.compile(
    r"(\d+)\s*(minutes?|mins?|hours?|hrs?)\b",
    re.IGNORECASE,
)


def extract_minutes(instruction: str) -> Optional[int]:
    """
    Find the first cooking time mentioned in an instruction.

    "Simmer for 45 minutes" -> 45, "Bake for 1 hour" -> 60.
    Only the first mention counts; returns None when there is none.
    """
    match = TIME_PATTERN.search(instruction)
    if not match:
        return None

    value = int(match.group(1))
    unit = match.group(2).lower()
    if unit.startswith("h"):
        return value * 60
    return value


def step_timings(recipe: Recipe) -> list[StepTiming]:
    """List each instruction with the minutes found in its text."""
    return [
        StepTiming(
            step=instruction.step,
            description=instruction.description,
            minutes=extract_minutes(instruction.description),
        )
        for instruction in recipe.instructions
    ]


# ============================================
# Timers
# ============================================

def create_step_timer(instruction: Instruction) -> Optional[Timer]:
    """Build a paused timer for a step, or None if the step has no time."""
    minutes = extract_minutes(instruction.description)
    if not minutes:
        return None

    seconds = minutes * 60
    return Timer(
        id=str(uuid.uuid4()),
        label=f"Step {instruction.step}",
        duration=seconds,
        remaining=seconds,
        is_active=False,
    )


def toggle_timer(timer: Timer) -> Timer:
    """Start a paused timer or pause a running one."""
    return timer.model_copy(update={"is_active": not timer.is_active})


def reset_timer(timer: Timer) -> Timer:
    return timer.model_copy(update={"remaining": timer.duration, "is_active": False})


def tick_timer(timer: Timer, seconds: int = 1) -> Timer:
    """
    Count a running timer down.

    Paused timers are returned unchanged. A timer that reaches zero
    stops itself.
    """
    if not timer.is_active or timer.remaining == 0:
        return timer

    remaining = max(0, timer.remaining - seconds)
    return timer.model_copy(update={"remaining": remaining, "is_active": remaining > 0})


def timer_progress(timer: Timer) -> float:
    """Elapsed share of the timer as a percentage."""
    return (timer.duration - timer.remaining) / timer.duration * 100


# ============================================
# Step navigation
# ============================================

@dataclass(frozen=True)
class CookingProgress:
    """Where the cook is in the recipe. Step positions are 0-based."""
    total_steps: int
    current_step: int = 0
    completed_steps: frozenset[int] = field(default_factory=frozenset)

    def go_to_step(self, step_index: int) -> "CookingProgress":
        last = max(0, self.total_steps - 1)
        return replace(self, current_step=max(0, min(step_index, last)))

    def complete_step(self) -> "CookingProgress":
        """Mark the current step done and move on, staying put on the last one."""
        completed = self.completed_steps | {self.current_step}
        next_step = self.current_step
        if self.current_step < self.total_steps - 1:
            next_step += 1
        return replace(self, current_step=next_step, completed_steps=completed)

    @property
    def progress_percent(self) -> float:
        if self.total_steps == 0:
            return 0.0
        return (self.current_step + 1) / self.total_steps * 100

    @property
    def is_complete(self) -> bool:
        return len(self.completed_steps) >= self.total_steps


def start_cooking(recipe: Recipe) -> CookingProgress:
    return CookingProgress(total_steps=len(recipe.instructions))
