# report_examples/report_example_01.py
"""
Ejemplo de Ejecución del Informe de Planificación.
--------------------------------------------------
Lee 'data/tasks.txt' y 'data/resources.txt' (junto a este script), calcula
fin del proyecto, solapamientos, equipo de una tarea y esfuerzo por recurso.
Modifica los valores en la sección '--- CONFIGURACIÓN DEL INFORME ---'.
"""
import os
import sys

# --- Configuración del Entorno (Importante para encontrar 'planner') ---
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.normpath(os.path.join(current_dir, '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)
# --- Fin Configuración del Entorno ---

from planner.report.config import ReportConfig
from planner.report.runner import ReportRunner


# --- CONFIGURACIÓN DEL INFORME ---
report_settings = ReportConfig(
    # --- Archivos de Entrada ---
    tasks_file_name="tasks.txt",
    resources_file_name="resources.txt",
    base_dir=current_dir,
    data_folder_relative_path="data",

    # --- Consultas ---
    team_lookup_task_id=5,          # Tarea cuyo equipo se muestra

    # --- Salida ---
    export_results=False,           # Guardar CSV con el esfuerzo por recurso?
    output_folder_relative_path="generated",
    output_filename_base="effort_per_resource",

    # --- Opciones de Visualización en Consola ---
    verbose=True,
    show_loaded_tasks=True,
    show_loaded_resources=True,
    display_limit=15,
)
# --- FIN DE LA CONFIGURACIÓN ---

if __name__ == "__main__":
    sys.exit(ReportRunner(config=report_settings).run())
