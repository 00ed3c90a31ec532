from dataclasses import dataclass

from gestion_reuniones.domain.value_objects.bounded_text import BoundedText


@dataclass(frozen=True, order=True)
class CommentText(BoundedText):
    """Texto de un comentario de reunión (5-1000 caracteres)."""

    LABEL = "El texto del comentario"
    MIN_LENGTH = 5
    MAX_LENGTH = 1000
