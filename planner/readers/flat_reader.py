# planner/readers/flat_reader.py
import os
from typing import Callable, Dict, Iterator, List, Tuple, TypeVar

# --- Importaciones del Proyecto ---
from planner.project import Project
from planner.entities import Task, Resource
from planner.errors import FileAccessError, ParseError
from .base_reader import ProjectReader
from .line_parser import parse_task_line, parse_resource_line
# --- Fin Importaciones ---

T = TypeVar("T")


class FlatFileProjectReader(ProjectReader):
    """
    Lector de archivos de texto plano (una tarea o un recurso por línea).
    Lee primero el archivo de tareas completo y después el de recursos.
    Cualquier línea mal formada aborta la carga (sin carga parcial).
    Las líneas vacías se ignoran.
    """

    def __init__(self, verbose: bool = False, encoding: str = "utf-8"):
        self.verbose = verbose
        self.encoding = encoding

    def _log(self, message: str):
        if self.verbose:
            print(f"Info (FlatReader): {message}")

    def _read_lines(self, file_path: str) -> List[Tuple[int, str]]:
        """Devuelve (número de línea base 1, contenido sin fin de línea) de las líneas no vacías."""
        if not os.path.isfile(file_path):
            raise FileAccessError(f"FlatReader: Archivo no encontrado: {file_path}", file_path)
        try:
            with open(file_path, "r", encoding=self.encoding, newline=None) as f:
                # solo \n, \r y \r\n cortan líneas; U+2028 o \x85 pueden ir en el título
                raw_lines = [line.rstrip("\r\n") for line in f]
        except (OSError, UnicodeDecodeError) as e:
            raise FileAccessError(f"FlatReader: No se pudo leer '{file_path}': {e}", file_path) from e
        return [(n, line) for n, line in enumerate(raw_lines, start=1) if line.strip()]

    def _parse_file(self, file_path: str, parse_line: Callable[[str], T]) -> Iterator[T]:
        for line_number, line in self._read_lines(file_path):
            try:
                yield parse_line(line)
            except ParseError as e:
                e.file_path = file_path
                e.line_number = line_number
                raise

    def read_tasks(self, file_path: str) -> List[Task]:
        tasks = list(self._parse_file(file_path, parse_task_line))
        self._log(f"{len(tasks)} tareas leídas de '{file_path}'.")
        return tasks

    def read_resources(self, file_path: str) -> Dict[str, Resource]:
        """Recursos por nombre; un nombre repetido sustituye al anterior."""
        resources: Dict[str, Resource] = {}
        for resource in self._parse_file(file_path, parse_resource_line):
            resources[resource.name] = resource
        self._log(f"{len(resources)} recursos leídos de '{file_path}'.")
        return resources

    def load(self, tasks_file_path: str, resources_file_path: str) -> Project:
        self._log(f"Cargando proyecto desde '{tasks_file_path}' y '{resources_file_path}'...")
        tasks = self.read_tasks(tasks_file_path)
        resources = self.read_resources(resources_file_path)

        project = Project(project_name=os.path.splitext(os.path.basename(tasks_file_path))[0])
        for task in tasks:
            project.add_task(task)
        for resource in resources.values():
            project.add_resource(resource)
        self._log(f"Proyecto cargado: {project}")
        return project
