# planner/report/runner.py
import os
import sys
import traceback
from datetime import datetime
from typing import Optional

import pandas as pd

from planner.errors import FileAccessError, ParseError
from planner.project import Project
from planner.readers.base_reader import ProjectReader
from planner.readers.flat_reader import FlatFileProjectReader
from planner.report.config import ReportConfig
from planner.report.formatter import ProjectReport, build_report, render_report

EXIT_OK = 0
EXIT_FAILURE = 1


class ReportRunner:
    def __init__(self, config: ReportConfig, reader: Optional[ProjectReader] = None):
        if not isinstance(config, ReportConfig):
            raise TypeError("El argumento 'config' debe ser una instancia de ReportConfig")
        self.config = config
        self.reader: ProjectReader = reader or FlatFileProjectReader(verbose=config.verbose)
        self.project: Optional[Project] = None
        self.report: Optional[ProjectReport] = None
        self._setup_paths()

    def _log(self, message: str):
        if self.config.verbose:
            print(f"Info (Runner): {message}")

    def _setup_paths(self):
        base_dir = self.config.base_dir or os.getcwd()
        data_dir = os.path.normpath(os.path.join(base_dir, self.config.data_folder_relative_path))
        self.tasks_file_path = os.path.join(data_dir, self.config.tasks_file_name)
        self.resources_file_path = os.path.join(data_dir, self.config.resources_file_name)
        self.output_dir = os.path.normpath(os.path.join(base_dir, self.config.output_folder_relative_path))
        output_filename = f"{self.config.output_filename_base}.csv"
        if self.config.add_timestamp_to_filename:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            output_filename = f"{self.config.output_filename_base}_{timestamp}.csv"
        self.output_filepath = os.path.join(self.output_dir, output_filename)

    def _prepare_project(self):
        self._log(f"Preparando proyecto desde '{self.tasks_file_path}' y '{self.resources_file_path}'...")
        self.project = self.reader.load(self.tasks_file_path, self.resources_file_path)
        self._log(f"Proyecto '{self.project.project_name}' cargado ({len(self.project.tasks)} tareas, "
                  f"{len(self.project.resources)} recursos).")

        display_limit = self.config.display_limit
        if self.config.show_loaded_tasks:
            print(f"\n--- Lista de Tareas Cargadas (max {display_limit}) ---")
            if self.project.tasks:
                for i, task in enumerate(self.project.get_all_tasks()):
                    if i >= display_limit: print(f"  ... y {len(self.project.tasks) - display_limit} tareas más."); break
                    dep_str = f"Deps: {len(task.dependencies)}"
                    print(f"  - ID: {task.id:<5} | Título: {task.title[:35]:<35} | "
                          f"{task.start_time:%Y-%m-%d %H:%M} -> {task.end_time:%Y-%m-%d %H:%M} | "
                          f"Dur: {task.duration_hours():<5}h | {dep_str}")
            else: print("  (No hay tareas cargadas)")
            print("-" * 86)

        if self.config.show_loaded_resources:
            print(f"\n--- Lista de Recursos Cargados (max {display_limit}) ---")
            if self.project.resources:
                for i, resource in enumerate(self.project.get_all_resources()):
                    if i >= display_limit: print(f"  ... y {len(self.project.resources) - display_limit} recursos más."); break
                    print(f"  - Nombre: {resource.name[:40]:<40} | Asignaciones: {len(resource.task_allocations)}")
            else: print("  (No hay recursos cargados)")
            print("-" * 86)

    def run(self) -> int:
        """
        Carga ambos archivos, calcula las consultas e imprime el informe.
        Un error de lectura o de formato aborta antes de imprimir el informe.
        Devuelve el código de salida del proceso (0 = éxito).
        """
        try:
            self._prepare_project()
            self.report = build_report(self.project, self.config.team_lookup_task_id)
        except FileAccessError as e:
            print(f"Error Fatal: No se pudieron leer los archivos de entrada: {e}")
            return EXIT_FAILURE
        except ParseError as e:
            print(f"Error Fatal: Formato inválido en {e}")
            return EXIT_FAILURE
        except Exception as e:
            print(f"\n!!! Error Inesperado durante la ejecución del Runner !!!")
            print(f"  Tipo de Error: {type(e).__name__}")
            print(f"  Mensaje      : {e}")
            print("  -------------------- Traceback --------------------")
            traceback.print_exc()
            print("  ---------------------------------------------------")
            return EXIT_FAILURE

        for line in render_report(self.report):
            print(line)

        if self.config.export_results:
            self.save_results()
        return EXIT_OK

    def get_results(self) -> Optional[pd.DataFrame]:
        if self.report is None:
            return None
        return self.report.effort_table()

    def save_results(self, output_filepath: Optional[str] = None) -> Optional[str]:
        results = self.get_results()
        if results is None:
            print("Adv (Runner): No hay resultados para guardar.")
            return None
        if output_filepath is None: output_filepath = self.output_filepath
        try:
            output_dir = os.path.dirname(output_filepath)
            if output_dir: os.makedirs(output_dir, exist_ok=True)
            results.to_csv(output_filepath, index=False)
            self._log(f"Esfuerzo por recurso guardado en '{output_filepath}'.")
            return output_filepath
        except OSError as e:
            print(f"Error (Runner): Falló al guardar resultados en '{output_filepath}': {e}")
            return None


def main():
    """Punto de entrada de consola: lee tasks.txt y resources.txt del directorio actual."""
    sys.exit(ReportRunner(ReportConfig()).run())
