from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Union
from uuid import UUID

from gestion_reuniones.domain.exceptions.meeting_error import MeetingError
from gestion_reuniones.domain.value_objects.comment_text import CommentText
from gestion_reuniones.domain.value_objects.meeting_comment_id import MeetingCommentId
from gestion_reuniones.domain.value_objects.meeting_id import MeetingId
from gestion_reuniones.domain.value_objects.participant_id import ParticipantId


@dataclass
class MeetingComment:
    """Comentario escrito por un participante en una reunión.

    La igualdad es estructural: dos comentarios son iguales si coinciden todos
    sus campos, incluidas las marcas de tiempo.
    """

    id: MeetingCommentId = field(
        metadata={"description": "Identificador único del comentario"}
    )
    meeting_id: MeetingId = field(
        metadata={"description": "Reunión en la que se publicó el comentario"}
    )
    author_id: ParticipantId = field(
        metadata={"description": "Participante que escribió el comentario"}
    )
    text: CommentText = field(
        metadata={"description": "Contenido del comentario"}
    )
    created_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc),
        metadata={"description": "Momento de creación (UTC)"}
    )
    updated_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc),
        metadata={"description": "Momento de la última edición (UTC)"}
    )

    @classmethod
    def create(cls,
               comment_id: Union[MeetingCommentId, UUID, str],
               meeting_id: Union[MeetingId, UUID, str],
               author_id: Union[ParticipantId, UUID, str],
               text: Union[CommentText, str],
               created_at: Optional[datetime] = None) -> 'MeetingComment':
        """Crea un comentario nuevo.

        Args:
            comment_id: Identificador del comentario
            meeting_id: Identificador de la reunión
            author_id: Identificador del autor
            text: Contenido del comentario
            created_at: Momento de creación; por defecto, el instante actual en UTC.
                Se usa también como fecha de última edición.

        Returns:
            Comentario validado

        Raises:
            MeetingError: Si algún identificador está vacío, el texto no es válido
                o created_at no es un datetime
        """
        _validate_timestamp(created_at)
        timestamp = created_at or datetime.now(timezone.utc)
        return cls(
            id=MeetingCommentId.from_value(comment_id),
            meeting_id=MeetingId.from_value(meeting_id),
            author_id=ParticipantId.from_value(author_id),
            text=text if isinstance(text, CommentText) else CommentText(text),
            created_at=timestamp,
            updated_at=timestamp
        )

    def update(self, text: Union[CommentText, str], updated_at: Optional[datetime] = None) -> None:
        """Sustituye el contenido del comentario.

        Args:
            text: Nuevo contenido
            updated_at: Momento de la edición; por defecto, el instante actual en UTC

        Raises:
            MeetingError: Si el nuevo texto o la fecha no son válidos (el comentario no cambia)
        """
        _validate_timestamp(updated_at)
        new_text = text if isinstance(text, CommentText) else CommentText(text)
        self.text = new_text
        self.updated_at = updated_at or datetime.now(timezone.utc)


def _validate_timestamp(value: Optional[datetime]) -> None:
    if value is not None and not isinstance(value, datetime):
        raise MeetingError("La fecha del comentario debe ser un datetime.")
