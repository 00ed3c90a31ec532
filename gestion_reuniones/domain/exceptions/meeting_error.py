"""Excepciones del dominio de reuniones."""

from typing import Any, Optional


class MeetingError(ValueError):
    """Error de validación del dominio de reuniones.

    Es el único tipo de error que lanza el dominio: se produce en el momento
    exacto en que se viola una invariante y nunca se reintenta. Hereda de
    ValueError para que los llamadores puedan tratarlo como una entrada inválida.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class MeetingNotFoundError(MeetingError):
    """La reunión solicitada no existe en el repositorio."""

    def __init__(self, meeting_id: Any, message: Optional[str] = None):
        self.meeting_id = meeting_id
        super().__init__(message or f"No existe ninguna reunión con id {meeting_id}")
