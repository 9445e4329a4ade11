"""Shared builders for tests."""
from datetime import datetime

from planner.entities import Task


def make_task(task_id, title, start, end, dependencies=None):
    """Task from "YYYY-MM-DD HH:MM" strings."""
    return Task(task_id, title,
                datetime.strptime(start, "%Y-%m-%d %H:%M"),
                datetime.strptime(end, "%Y-%m-%d %H:%M"),
                dependencies)
