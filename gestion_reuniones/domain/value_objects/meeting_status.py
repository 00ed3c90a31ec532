from enum import Enum
from typing import List


class MeetingStatus(Enum):
    """Estados del ciclo de vida de una reunión.

    El orden de los valores es el orden en que avanza una reunión:
    borrador, programada, en curso y finalizada. Cancelada es un estado
    terminal alternativo.
    """

    DRAFT = 1
    SCHEDULED = 2
    ONGOING = 3
    FINISHED = 4
    CANCELLED = 5

    @classmethod
    def from_string(cls, status_str: str) -> 'MeetingStatus':
        """Convierte una cadena de texto a un enum MeetingStatus.

        Acepta el nombre en inglés ('scheduled') o en español ('programada').

        Args:
            status_str: Cadena de texto que representa un estado

        Returns:
            Enum MeetingStatus correspondiente

        Raises:
            ValueError: Si la cadena no corresponde a un estado válido
        """
        status_str_lower = status_str.strip().lower()

        if status_str_lower in ('draft', 'borrador'):
            return cls.DRAFT
        elif status_str_lower in ('scheduled', 'programada'):
            return cls.SCHEDULED
        elif status_str_lower in ('ongoing', 'en curso'):
            return cls.ONGOING
        elif status_str_lower in ('finished', 'finalizada'):
            return cls.FINISHED
        elif status_str_lower in ('cancelled', 'canceled', 'cancelada'):
            return cls.CANCELLED
        else:
            raise ValueError(f"'{status_str}' no es un estado de reunión válido")

    def to_string(self) -> str:
        """Nombre legible del estado."""
        if self == self.DRAFT:
            return "Borrador"
        elif self == self.SCHEDULED:
            return "Programada"
        elif self == self.ONGOING:
            return "En curso"
        elif self == self.FINISHED:
            return "Finalizada"
        elif self == self.CANCELLED:
            return "Cancelada"

    def is_terminal(self) -> bool:
        """Indica si desde este estado ya no se permite ninguna transición."""
        return self in (self.FINISHED, self.CANCELLED)

    @classmethod
    def get_all_statuses(cls) -> List['MeetingStatus']:
        """Obtiene todos los estados en orden de avance."""
        return [cls.DRAFT, cls.SCHEDULED, cls.ONGOING, cls.FINISHED, cls.CANCELLED]
