from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import ClassVar, Union

from gestion_reuniones.domain.exceptions.meeting_error import MeetingError


@dataclass(frozen=True, order=True)
class MeetingDate:
    """Marca temporal asociada a una reunión.

    Acepta un datetime o una cadena ISO 8601 ('2025-04-01T10:00:00'). Las fechas sin
    zona horaria se interpretan como UTC, así que todas las fechas son comparables.
    """

    LABEL: ClassVar[str] = "La fecha"

    value: datetime = field(
        metadata={"description": "Instante representado"}
    )

    def __post_init__(self):
        value = self.value
        if isinstance(value, str):
            try:
                value = datetime.fromisoformat(value.strip())
            except ValueError:
                raise MeetingError(f"{self.LABEL} '{self.value}' no tiene un formato ISO 8601 válido.")
        if not isinstance(value, datetime):
            raise MeetingError(f"{self.LABEL} debe ser un datetime.")
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        object.__setattr__(self, "value", value)

    @classmethod
    def from_value(cls, value: Union["MeetingDate", datetime, str]) -> "MeetingDate":
        """Construye la fecha a partir de un datetime, una cadena ISO u otra fecha."""
        if isinstance(value, MeetingDate):
            value = value.value
        return cls(value)

    @classmethod
    def now(cls) -> "MeetingDate":
        """Fecha con el instante actual en UTC."""
        return cls(datetime.now(timezone.utc))

    def __str__(self) -> str:
        # Formato "universal ordenable": 2025-04-01 10:00:00Z
        return self.value.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%SZ")
