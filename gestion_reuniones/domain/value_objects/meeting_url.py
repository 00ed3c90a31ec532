from dataclasses import dataclass, field
from urllib.parse import urlparse

from gestion_reuniones.domain.exceptions.meeting_error import MeetingError


ALLOWED_SCHEMES = ("http", "https")


@dataclass(frozen=True, order=True)
class MeetingUrl:
    """Enlace absoluto HTTP/HTTPS asociado a una reunión (p. ej. una videollamada).

    No se limita la longitud del enlace.
    """

    value: str = field(
        metadata={"description": "URL absoluta con esquema http o https"}
    )

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise MeetingError("La url de la reunión no puede estar vacía.")

        if not _is_absolute_http(self.value):
            raise MeetingError("La url de la reunión debe ser un enlace absoluto HTTP/HTTPS válido.")

    @classmethod
    def create(cls, value: str) -> 'MeetingUrl':
        """Valida la cadena y crea el enlace.

        Raises:
            MeetingError: Si la cadena está vacía o no es una URL http/https absoluta
        """
        return cls(value)

    def __str__(self) -> str:
        return self.value


def _is_absolute_http(value: str) -> bool:
    try:
        parsed = urlparse(value)
        # Un puerto no numérico solo se detecta al leerlo
        parsed.port
    except ValueError:
        return False

    if parsed.scheme.lower() not in ALLOWED_SCHEMES or not parsed.hostname:
        return False
    return not any(c.isspace() for c in parsed.netloc)
