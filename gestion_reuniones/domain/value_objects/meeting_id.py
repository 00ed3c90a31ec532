from dataclasses import dataclass

from gestion_reuniones.domain.value_objects.entity_id import EntityId


@dataclass(frozen=True, order=True)
class MeetingId(EntityId):
    """Identificador de una reunión."""

    LABEL = "El id de la reunión"
