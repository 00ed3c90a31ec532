import re
from dataclasses import dataclass

from gestion_reuniones.domain.value_objects.bounded_text import BoundedText


@dataclass(frozen=True, order=True)
class MeetingTitle(BoundedText):
    """Título de una reunión.

    Solo admite letras ASCII, dígitos y espacios, entre 5 y 200 caracteres.
    """

    LABEL = "El título de la reunión"
    MIN_LENGTH = 5
    MAX_LENGTH = 200
    PATTERN = re.compile(r"[a-zA-Z0-9 ]+")
    PATTERN_MESSAGE = "El título de la reunión solo puede contener letras, números y espacios."
