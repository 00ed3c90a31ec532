from dataclasses import dataclass, field
from uuid import UUID
from typing import Union

from gestion_reuniones.domain.value_objects.meeting_id import MeetingId
from gestion_reuniones.domain.value_objects.meeting_tag_id import MeetingTagId
from gestion_reuniones.domain.value_objects.meeting_tag_text import MeetingTagText


@dataclass(frozen=True)
class MeetingTag:
    """Etiqueta que clasifica una reunión."""

    id: MeetingTagId = field(
        metadata={"description": "Identificador único de la etiqueta"}
    )
    meeting_id: MeetingId = field(
        metadata={"description": "Reunión a la que pertenece la etiqueta"}
    )
    text: MeetingTagText = field(
        metadata={"description": "Texto de la etiqueta"}
    )

    @classmethod
    def create(cls,
               tag_id: Union[MeetingTagId, UUID, str],
               meeting_id: Union[MeetingId, UUID, str],
               text: Union[MeetingTagText, str]) -> 'MeetingTag':
        """Crea una etiqueta validando cada uno de sus componentes.

        Raises:
            MeetingError: Si algún identificador está vacío o el texto no es válido
        """
        return cls(
            id=MeetingTagId.from_value(tag_id),
            meeting_id=MeetingId.from_value(meeting_id),
            text=text if isinstance(text, MeetingTagText) else MeetingTagText(text)
        )
