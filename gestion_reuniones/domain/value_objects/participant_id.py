from dataclasses import dataclass

from gestion_reuniones.domain.value_objects.entity_id import EntityId


@dataclass(frozen=True, order=True)
class ParticipantId(EntityId):
    """Identificador de un participante (o del anfitrión) de una reunión."""

    LABEL = "El id del participante"
