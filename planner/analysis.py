# planner/analysis.py
"""
Consultas derivadas sobre un Project cargado.

Todas son funciones puras: no imprimen ni modifican el proyecto y no fallan
sobre datos ya cargados (la entrada mal formada se rechaza al parsear).
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from .entities import Task, Resource
from .project import Project


@dataclass(frozen=True)
class OverlapPair:
    """Par no ordenado de tareas solapadas. 'first' es la tarea insertada antes."""
    first: Task
    second: Task


def project_completion_time(project: Project) -> Optional[datetime]:
    """Mayor hora de fin entre todas las tareas, o None si no hay tareas."""
    if not project.tasks:
        return None
    return max(task.end_time for task in project.tasks.values())


def find_overlapping_tasks(project: Project) -> List[OverlapPair]:
    """Cada par (i < j en orden de inserción) cuyos intervalos cerrados se intersectan, una sola vez."""
    tasks = project.get_all_tasks()
    overlaps: List[OverlapPair] = []
    for i, task1 in enumerate(tasks):
        for task2 in tasks[i + 1:]:
            if task1.is_overlapping(task2):
                overlaps.append(OverlapPair(task1, task2))
    return overlaps


def find_team_for_task(project: Project, task_id: int) -> List[str]:
    """
    Nombres de los recursos asignados a la tarea, en orden de inserción.
    Un ID que no corresponde a ninguna tarea cargada devuelve lista vacía.
    """
    if task_id not in project.tasks:
        return []
    return [resource.name for resource in project.resources.values()
            if task_id in resource.task_allocations]


def calculate_effort(resource: Resource, tasks: Dict[int, Task]) -> int:
    return resource.total_effort(tasks)


def calculate_effort_per_resource(project: Project) -> Dict[str, int]:
    """Horas de esfuerzo por recurso (orden de inserción)."""
    return {resource.name: calculate_effort(resource, project.tasks)
            for resource in project.resources.values()}
