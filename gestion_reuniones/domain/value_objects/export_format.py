from enum import Enum
from typing import List


class ExportFormat(Enum):
    """Formatos en los que se puede exportar un listado de reuniones."""

    TEXT = "text"
    CSV = "csv"
    JSON = "json"
    EXCEL = "excel"

    @classmethod
    def from_string(cls, format_str: str) -> 'ExportFormat':
        """Convierte una cadena ('csv', 'Excel', 'xlsx'...) a un enum ExportFormat.

        Raises:
            ValueError: Si la cadena no corresponde a un formato soportado
        """
        format_str_lower = format_str.strip().lower()
        if format_str_lower in ('xlsx', 'xls'):
            return cls.EXCEL
        if format_str_lower == 'txt':
            return cls.TEXT
        for export_format in cls:
            if export_format.value == format_str_lower:
                return export_format
        raise ValueError(f"'{format_str}' no es un formato de exportación válido")

    def to_string(self) -> str:
        return self.value

    def get_file_extension(self) -> str:
        """Extensión de fichero habitual para el formato."""
        return {
            ExportFormat.TEXT: ".txt",
            ExportFormat.CSV: ".csv",
            ExportFormat.JSON: ".json",
            ExportFormat.EXCEL: ".xlsx",
        }[self]

    @classmethod
    def get_all_formats(cls) -> List['ExportFormat']:
        return list(cls)
