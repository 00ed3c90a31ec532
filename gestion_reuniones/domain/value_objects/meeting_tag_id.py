from dataclasses import dataclass

from gestion_reuniones.domain.value_objects.entity_id import EntityId


@dataclass(frozen=True, order=True)
class MeetingTagId(EntityId):
    """Identificador de una etiqueta de reunión."""

    LABEL = "El id de la etiqueta"
