# planner/project.py
from typing import Dict, List, Optional
# Usar importación relativa dentro del mismo paquete 'planner'
from .entities import Task, Resource

class Project:
    """Representa el proyecto, conteniendo tareas y recursos."""
    def __init__(self, project_name: Optional[str] = None):
        """Inicializa un proyecto vacío."""
        self.tasks: Dict[int, Task] = {} # Diccionario: Task ID -> Objeto Task
        self.resources: Dict[str, Resource] = {} # Diccionario: nombre -> Objeto Resource
        self.project_name: Optional[str] = project_name

    def add_task(self, task: Task):
        """Añade o reemplaza una tarea (gana la última con el mismo ID)."""
        if not isinstance(task, Task):
            raise TypeError("El objeto añadido debe ser una instancia de Task.")
        self.tasks[task.id] = task

    def add_resource(self, resource: Resource):
        """Añade o reemplaza un recurso (gana el último con el mismo nombre)."""
        if not isinstance(resource, Resource):
            raise TypeError("El objeto añadido debe ser una instancia de Resource.")
        self.resources[resource.name] = resource

    def get_task(self, task_id: int) -> Optional[Task]:
        return self.tasks.get(task_id)

    def get_resource(self, name: str) -> Optional[Resource]:
        """Obtiene un recurso por su nombre."""
        return self.resources.get(name)

    def get_all_tasks(self) -> List[Task]:
        """Devuelve una lista de todas las tareas en orden de inserción."""
        return list(self.tasks.values())

    def get_all_resources(self) -> List[Resource]:
        """Devuelve una lista de todos los recursos en orden de inserción."""
        return list(self.resources.values())

    def __repr__(self):
        return (f"Project(name='{self.project_name}', tasks={len(self.tasks)}, "
                f"resources={len(self.resources)})")
