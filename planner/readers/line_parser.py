# planner/readers/line_parser.py
"""
Conversión entre líneas de texto plano y registros Task / Resource.

Formatos (campos separados por ", "):
    tareas:   id, título, yyyyMMdd+HHmm, yyyyMMdd+HHmm[, depId]*
    recursos: nombre[, taskId:porcentaje]*

Los format_* son el inverso exacto de los parse_* para las líneas que generan.
"""
import re
from datetime import datetime
from typing import List

from planner.entities import Task, Resource
from planner.errors import ParseError

FIELD_SEPARATOR = ", "
ALLOCATION_SEPARATOR = ":"
TIMESTAMP_FORMAT = "%Y%m%d+%H%M"

# strptime acepta dígitos sin relleno ("2024011+900"), por eso se valida antes el patrón
_TIMESTAMP_RE = re.compile(r"[0-9]{8}\+[0-9]{4}")
_INT_RE = re.compile(r"[+-]?[0-9]+")

TASK_MIN_FIELDS = 4


def split_fields(line: str) -> List[str]:
    """Separa por ", " descartando los campos vacíos finales ('Alice, 1:50, ' -> ['Alice', '1:50'])."""
    parts = line.split(FIELD_SEPARATOR)
    while len(parts) > 1 and not parts[-1]:
        parts.pop()
    return parts


def parse_int(value: str, field_name: str) -> int:
    """Entero con signo opcional y solo dígitos ASCII (sin espacios ni '_')."""
    if not _INT_RE.fullmatch(value):
        raise ParseError(f"Campo '{field_name}' no numérico: {value!r}")
    return int(value)


def parse_timestamp(value: str) -> datetime:
    if not _TIMESTAMP_RE.fullmatch(value):
        raise ParseError(f"Timestamp con formato inválido (se espera yyyyMMdd+HHmm): {value!r}")
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError as e:
        # Patrón correcto pero fecha/hora imposible (ej. 20241301+2500)
        raise ParseError(f"Timestamp inválido {value!r}: {e}") from e


def format_timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)


def parse_task_line(line: str) -> Task:
    """Convierte una línea del archivo de tareas en un Task."""
    parts = split_fields(line)
    if len(parts) < TASK_MIN_FIELDS:
        raise ParseError(f"Línea de tarea incompleta ({len(parts)} campos, mínimo {TASK_MIN_FIELDS}): {line!r}")
    task_id = parse_int(parts[0], "id")
    title = parts[1]
    start_time = parse_timestamp(parts[2])
    end_time = parse_timestamp(parts[3])
    dependencies: List[int] = [parse_int(dep, "dependencia") for dep in parts[TASK_MIN_FIELDS:]]
    return Task(task_id, title, start_time, end_time, dependencies)


def format_task_line(task: Task) -> str:
    fields = [str(task.id), task.title, format_timestamp(task.start_time), format_timestamp(task.end_time)]
    fields.extend(str(dep) for dep in task.dependencies)
    return FIELD_SEPARATOR.join(fields)


def parse_allocation(value: str):
    """'taskId:porcentaje' -> (task_id, porcentaje)."""
    task_part, sep, pct_part = value.partition(ALLOCATION_SEPARATOR)
    if not sep:
        raise ParseError(f"Asignación sin separador '{ALLOCATION_SEPARATOR}': {value!r}")
    # "1:50:3" deja "50:3" como porcentaje y falla como no numérico
    return parse_int(task_part, "task id"), parse_int(pct_part, "porcentaje")


def parse_resource_line(line: str) -> Resource:
    """Convierte una línea del archivo de recursos en un Resource (asignaciones en orden de archivo)."""
    parts = split_fields(line)
    resource = Resource(parts[0])
    for allocation in parts[1:]:
        task_id, percentage = parse_allocation(allocation)
        resource.add_allocation(task_id, percentage)
    return resource


def format_resource_line(resource: Resource) -> str:
    fields = [resource.name]
    fields.extend(f"{task_id}{ALLOCATION_SEPARATOR}{pct}" for task_id, pct in resource.task_allocations.items())
    return FIELD_SEPARATOR.join(fields)
