from dataclasses import dataclass

from gestion_reuniones.domain.value_objects.meeting_date import MeetingDate


@dataclass(frozen=True, order=True)
class StartAtDate(MeetingDate):
    """Fecha de inicio de una reunión."""

    LABEL = "La fecha de inicio"
