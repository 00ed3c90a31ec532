"""Puerto de entrada para la configuración de datos de demostración."""

from abc import ABC, abstractmethod
from typing import Dict, Any

from gestion_reuniones.domain.repositories.meeting_repository import MeetingRepository


class DemoDataSetupPort(ABC):
    """Puerto para poblar el sistema con reuniones de ejemplo."""

    @abstractmethod
    def setup_demo_data(self, config: Dict[str, Any] = None) -> MeetingRepository:
        """
        Configura reuniones de ejemplo.

        Args:
            config: Configuración opcional con parámetros para la generación de datos

        Returns:
            Repositorio de reuniones poblado
        """
        pass

    @abstractmethod
    def get_default_config(self) -> Dict[str, Any]:
        """
        Obtiene la configuración por defecto para la generación de datos.

        Returns:
            Diccionario con la configuración por defecto
        """
        pass
