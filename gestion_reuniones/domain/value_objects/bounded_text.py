import re
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from gestion_reuniones.domain.exceptions.meeting_error import MeetingError


@dataclass(frozen=True, order=True)
class BoundedText:
    """Texto no vacío cuya longitud está acotada.

    Plantilla común de los objetos de valor basados en cadenas: rechaza valores
    nulos o en blanco, longitudes fuera del rango inclusivo
    [MIN_LENGTH, MAX_LENGTH] y, si la subclase define PATTERN, el contenido que
    no encaje con el patrón.
    """

    LABEL: ClassVar[str] = "El texto"
    MIN_LENGTH: ClassVar[int] = 1
    MAX_LENGTH: ClassVar[int] = 255
    PATTERN: ClassVar[Optional[re.Pattern]] = None
    PATTERN_MESSAGE: ClassVar[str] = ""

    value: str = field(
        metadata={"description": "Texto validado"}
    )

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise MeetingError(f"{self.LABEL} no puede estar vacío.")

        if len(self.value) < self.MIN_LENGTH or len(self.value) > self.MAX_LENGTH:
            raise MeetingError(
                f"{self.LABEL} debe tener entre {self.MIN_LENGTH} y {self.MAX_LENGTH} caracteres."
            )

        if self.PATTERN is not None and not self.PATTERN.fullmatch(self.value):
            raise MeetingError(self.PATTERN_MESSAGE or f"{self.LABEL} contiene caracteres no permitidos.")

    @classmethod
    def from_string(cls, value: str) -> "BoundedText":
        """Convierte una cadena en el objeto de valor concreto.

        Args:
            value: Cadena a validar

        Returns:
            Instancia validada de la subclase

        Raises:
            MeetingError: Si la cadena está vacía, tiene una longitud fuera de
                rango o no cumple el patrón
        """
        return cls(value)

    def to_string(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value