# planner/report/formatter.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

import pandas as pd

from planner.analysis import (
    OverlapPair,
    calculate_effort_per_resource,
    find_overlapping_tasks,
    find_team_for_task,
    project_completion_time,
)
from planner.entities import Task
from planner.project import Project

EFFORT_COLUMNS = ['resource', 'total_effort_hours']


@dataclass
class ProjectReport:
    """Resultados estructurados de las cuatro consultas, listos para presentar."""
    completion_time: Optional[datetime]
    overlaps: List[OverlapPair] = field(default_factory=list)
    team_task: Optional[Task] = None # None si el ID consultado no es una tarea cargada
    team: List[str] = field(default_factory=list)
    effort_per_resource: Dict[str, int] = field(default_factory=dict)

    def effort_table(self) -> pd.DataFrame:
        if not self.effort_per_resource:
            return pd.DataFrame(columns=EFFORT_COLUMNS)
        return pd.DataFrame(list(self.effort_per_resource.items()), columns=EFFORT_COLUMNS)


def build_report(project: Project, team_lookup_task_id: int) -> ProjectReport:
    return ProjectReport(
        completion_time=project_completion_time(project),
        overlaps=find_overlapping_tasks(project),
        team_task=project.get_task(team_lookup_task_id),
        team=find_team_for_task(project, team_lookup_task_id),
        effort_per_resource=calculate_effort_per_resource(project),
    )


def format_completion_time(value: Optional[datetime]) -> str:
    if value is None:
        return "no tasks loaded"
    return value.isoformat(timespec="minutes")


def render_report(report: ProjectReport) -> List[str]:
    """
    Texto del informe, en orden fijo: fin del proyecto, solapamientos
    (tarea insertada antes primero), equipo de la tarea consultada (se omite
    si la tarea no existe) y esfuerzo por recurso.
    """
    lines = [f"Project Completion Time: {format_completion_time(report.completion_time)}"]
    for pair in report.overlaps:
        lines.append(f"Overlapping tasks: {pair.first.title} and {pair.second.title}")
    if report.team_task is not None:
        lines.append(f"Resources for task {report.team_task.title}:")
        lines.extend(report.team)
    for name, effort in report.effort_per_resource.items():
        lines.append(f"Total effort required by {name}: {effort} hours")
    return lines
