# planner/entities.py
from datetime import datetime
from typing import List, Dict, Optional

# Nota sobre calidad de datos: las dependencias, los porcentajes de asignación y
# el orden inicio/fin se guardan tal cual se leen. No se validan ni se corrigen
# (una tarea con fin anterior al inicio es válida y produce duraciones negativas).


# Clase Task
class Task:
    def __init__(self, task_id: int, title: str, start_time: datetime, end_time: datetime,
                 dependencies: Optional[List[int]] = None):
        self.id = task_id # Clave única dentro del proyecto
        self.title = title
        self.start_time = start_time
        self.end_time = end_time
        # IDs de tareas predecesoras. Solo se almacenan, ninguna consulta las usa.
        self.dependencies: List[int] = list(dependencies) if dependencies else []

    def is_overlapping(self, other: 'Task') -> bool:
        """Intervalos cerrados: se solapan si ninguno termina antes de que empiece el otro."""
        return self.end_time >= other.start_time and self.start_time <= other.end_time

    def duration_hours(self) -> int:
        """Horas completas entre inicio y fin, truncando hacia cero (puede ser negativo)."""
        seconds = int((self.end_time - self.start_time).total_seconds())
        hours = abs(seconds) // 3600
        return hours if seconds >= 0 else -hours

    def __repr__(self):
        deps_str = f" deps={self.dependencies}" if self.dependencies else ""
        return (f"Task(id={self.id}, '{self.title}', "
                f"start={self.start_time:%Y-%m-%d %H:%M}, end={self.end_time:%Y-%m-%d %H:%M}, "
                f"dur={self.duration_hours()}h{deps_str})")


# Clase Resource
class Resource:
    """Representa un recurso (persona, equipo) con asignaciones porcentuales a tareas."""
    def __init__(self, name: str):
        self.name = name # Clave única del recurso
        self.task_allocations: Dict[int, int] = {} # Task ID -> porcentaje (sin rango impuesto)

    def add_allocation(self, task_id: int, percentage: int):
        """Añade o sobrescribe la asignación a una tarea."""
        self.task_allocations[task_id] = percentage

    def total_effort(self, tasks: Dict[int, Task]) -> int:
        """
        Esfuerzo total en horas: suma de floor(horas_tarea * porcentaje / 100)
        por asignación. Las asignaciones a tareas inexistentes se ignoran.
        """
        total_effort = 0
        for task_id, percentage in self.task_allocations.items():
            task = tasks.get(task_id)
            if task is None:
                continue
            total_effort += (task.duration_hours() * percentage) // 100
        return total_effort

    def __repr__(self):
        alloc_str = ", ".join(f"{tid}:{pct}%" for tid, pct in self.task_allocations.items())
        return f"Resource(name='{self.name}', allocations=[{alloc_str}])"
