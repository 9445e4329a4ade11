# planner/readers/base_reader.py
from abc import ABC, abstractmethod
from planner.project import Project

class ProjectReader(ABC):
    """Interfaz abstracta para lectores de archivos de proyecto."""

    @abstractmethod
    def load(self, tasks_file_path: str, resources_file_path: str) -> Project:
        """
        Carga datos de proyecto desde los archivos de tareas y de recursos.

        Args:
            tasks_file_path: Ruta al archivo de tareas.
            resources_file_path: Ruta al archivo de recursos.

        Returns:
            Una instancia de Project poblada con tareas y recursos.

        Raises:
            FileAccessError: Si algún archivo no existe o no se puede leer.
            ParseError: Si alguna línea está mal formada. No hay carga parcial.
        """
        pass
