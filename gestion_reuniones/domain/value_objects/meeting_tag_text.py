from dataclasses import dataclass

from gestion_reuniones.domain.value_objects.bounded_text import BoundedText


@dataclass(frozen=True, order=True)
class MeetingTagText(BoundedText):
    """Texto de una etiqueta (3-15 caracteres)."""

    LABEL = "El texto de la etiqueta"
    MIN_LENGTH = 3
    MAX_LENGTH = 15
