from dataclasses import dataclass

from gestion_reuniones.domain.value_objects.meeting_date import MeetingDate


@dataclass(frozen=True, order=True)
class EndAtDate(MeetingDate):
    """Fecha de finalización de una reunión."""

    LABEL = "La fecha de finalización"
