from dataclasses import dataclass

from gestion_reuniones.domain.value_objects.entity_id import EntityId


@dataclass(frozen=True, order=True)
class MeetingCommentId(EntityId):
    """Identificador de un comentario de reunión."""

    LABEL = "El id del comentario"
