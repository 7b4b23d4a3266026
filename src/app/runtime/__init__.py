"""Runtime: tasks destacadas (fire-and-forget) do processo."""

from app.runtime.background import (
    active_task_count,
    drain_background_tasks,
    schedule_background_task,
)

__all__ = [
    "active_task_count",
    "drain_background_tasks",
    "schedule_background_task",
]
