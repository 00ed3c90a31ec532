from abc import ABC, abstractmethod
from typing import List, Optional, Union

from gestion_reuniones.domain.models.meeting import Meeting
from gestion_reuniones.domain.value_objects.export_format import ExportFormat


class MeetingExportPort(ABC):
    """Puerto de salida para la exportación de reuniones.

    Define la interfaz que los adaptadores de salida utilizarán para exportar
    listados de reuniones a diferentes formatos.
    """

    @abstractmethod
    def export_meetings(self,
                        meetings: List[Meeting],
                        export_format: Union[ExportFormat, str],
                        output_path: Optional[str] = None) -> str:
        """Exporta un listado de reuniones a un formato específico.

        Args:
            meetings: Reuniones a exportar
            export_format: Formato de exportación como enum ExportFormat o string
                           (text, csv, json, excel)
            output_path: Fichero de destino. Si se omite se devuelve el contenido
                         (obligatorio para excel)

        Returns:
            Contenido exportado, o la ruta del fichero si se indicó output_path

        Raises:
            ValueError: Si el formato no está soportado
        """
        pass

    @abstractmethod
    def get_supported_formats(self) -> List[str]:
        """Obtiene la lista de formatos de exportación soportados.

        Returns:
            Lista de formatos soportados
        """
        pass
