from dataclasses import dataclass

from gestion_reuniones.domain.value_objects.bounded_text import BoundedText


@dataclass(frozen=True, order=True)
class MeetingDescription(BoundedText):
    """Descripción libre de una reunión (5-700 caracteres)."""

    LABEL = "El texto de la descripción"
    MIN_LENGTH = 5
    MAX_LENGTH = 700
