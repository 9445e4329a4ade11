# planner/report/config.py
from dataclasses import dataclass
from typing import Optional


@dataclass
class ReportConfig:
    """Define la configuración de una ejecución del informe."""
    # Entradas
    tasks_file_name: str = "tasks.txt"
    resources_file_name: str = "resources.txt"
    data_folder_relative_path: str = "."
    base_dir: Optional[str] = None # None = directorio de trabajo actual
    # Consultas
    team_lookup_task_id: int = 5 # Tarea de ejemplo para el bloque de equipo
    # Salida tabular (CSV del esfuerzo por recurso)
    export_results: bool = False
    output_folder_relative_path: str = "generated"
    output_filename_base: str = "effort_per_resource"
    add_timestamp_to_filename: bool = True
    # --- Opciones de Visualización ---
    verbose: bool = False                 # Mensajes "Info (...)" de progreso
    show_loaded_tasks: bool = False       # Mostrar tareas cargadas antes del informe
    show_loaded_resources: bool = False   # Mostrar recursos cargados antes del informe
    display_limit: int = 20               # Límite de items a mostrar para tareas/recursos
