# planner/errors.py
from typing import Optional


class PlannerError(Exception):
    """Error base del planificador."""


class FileAccessError(PlannerError, OSError):
    """El archivo de entrada no existe o no se puede leer."""
    def __init__(self, message: str, file_path: Optional[str] = None):
        super().__init__(message)
        self.file_path = file_path


class ParseError(PlannerError, ValueError):
    """
    Línea de entrada mal formada (campo numérico inválido, timestamp con
    formato incorrecto, asignación sin ':' ...).
    Los lectores de archivo completan file_path y line_number (base 1).
    """
    def __init__(self, message: str, file_path: Optional[str] = None, line_number: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.file_path = file_path
        self.line_number = line_number

    def __str__(self):
        if self.file_path is not None and self.line_number is not None:
            return f"{self.file_path}, línea {self.line_number}: {self.message}"
        if self.line_number is not None:
            return f"línea {self.line_number}: {self.message}"
        return self.message
