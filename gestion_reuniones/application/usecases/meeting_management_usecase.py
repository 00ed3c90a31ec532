"""Caso de uso para la gestión del ciclo de vida de las reuniones."""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Union

from gestion_reuniones.application.ports.input.meeting_service_port import IdLike, MeetingServicePort
from gestion_reuniones.domain.exceptions.meeting_error import MeetingError, MeetingNotFoundError
from gestion_reuniones.domain.models.meeting import Meeting
from gestion_reuniones.domain.models.meeting_comment import MeetingComment
from gestion_reuniones.domain.models.meeting_tag import MeetingTag
from gestion_reuniones.domain.repositories.meeting_repository import MeetingRepository
from gestion_reuniones.domain.value_objects.meeting_comment_id import MeetingCommentId
from gestion_reuniones.domain.value_objects.meeting_id import MeetingId
from gestion_reuniones.domain.value_objects.meeting_location import MeetingLocation
from gestion_reuniones.domain.value_objects.meeting_status import MeetingStatus
from gestion_reuniones.domain.value_objects.meeting_tag_id import MeetingTagId
from gestion_reuniones.domain.value_objects.meeting_tag_text import MeetingTagText

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MeetingManagementUseCase(MeetingServicePort):
    """Implementación del caso de uso de gestión de reuniones.

    Se encarga de todo lo que el agregado no hace por sí mismo: generar
    identificadores, aportar la hora actual y cargar y guardar las reuniones
    en el repositorio. Las reglas de negocio se delegan siempre en Meeting.
    """

    def __init__(self,
                 meeting_repository: MeetingRepository,
                 clock: Optional[Callable[[], datetime]] = None):
        self.meeting_repository = meeting_repository
        self.clock = clock or utc_now

    def _load(self, meeting_id: IdLike) -> Meeting:
        meeting = self.meeting_repository.get_by_id(MeetingId.from_value(meeting_id))
        if meeting is None:
            raise MeetingNotFoundError(meeting_id)
        return meeting

    def create_meeting(self,
                       host_id: IdLike,
                       title: str,
                       description: str,
                       start_at: datetime,
                       end_at: datetime) -> Meeting:
        meeting = Meeting.create(
            meeting_id=MeetingId.generate(),
            host_id=host_id,
            title=title,
            description=description,
            start_at=start_at,
            end_at=end_at
        )
        self.meeting_repository.save(meeting)
        logger.info(f"Reunión creada: {meeting.id} ('{meeting.title}') por el anfitrión {meeting.host_id}")
        return meeting

    def get_meeting(self, meeting_id: IdLike) -> Meeting:
        return self._load(meeting_id)

    def list_meetings(self, status: Optional[Union[MeetingStatus, str]] = None) -> List[Meeting]:
        if status is None:
            return self.meeting_repository.get_all()
        if isinstance(status, str):
            status = MeetingStatus.from_string(status)
        return self.meeting_repository.get_by_status(status)

    def add_information(self,
                        meeting_id: IdLike,
                        location: Optional[MeetingLocation],
                        max_participants: int,
                        is_private: bool) -> Meeting:
        meeting = self._load(meeting_id)
        meeting.add_information(location, max_participants, is_private)
        self.meeting_repository.save(meeting)
        logger.info(f"Información actualizada en la reunión {meeting.id}: "
                    f"aforo {max_participants}, privada={meeting.is_private}")
        return meeting

    def rename_meeting(self, meeting_id: IdLike, title: str) -> Meeting:
        meeting = self._load(meeting_id)
        meeting.change_title(title)
        self.meeting_repository.save(meeting)
        logger.info(f"Reunión {meeting.id} renombrada a '{meeting.title}'")
        return meeting

    def change_description(self, meeting_id: IdLike, description: str) -> Meeting:
        meeting = self._load(meeting_id)
        meeting.change_description(description)
        self.meeting_repository.save(meeting)
        logger.info(f"Descripción actualizada en la reunión {meeting.id}")
        return meeting

    def join_meeting(self, meeting_id: IdLike, participant_id: IdLike) -> Meeting:
        meeting = self._load(meeting_id)
        meeting.add_participant(participant_id)
        self.meeting_repository.save(meeting)

        if meeting.max_participants and len(meeting.participants) > meeting.max_participants:
            # El aforo es orientativo: se avisa pero no se impide la inscripción
            logger.warning(f"La reunión {meeting.id} supera su aforo: "
                           f"{len(meeting.participants)} > {meeting.max_participants}")

        logger.info(f"Participante {participant_id} inscrito en la reunión {meeting.id}")
        return meeting

    def leave_meeting(self, meeting_id: IdLike, participant_id: IdLike) -> Meeting:
        meeting = self._load(meeting_id)
        meeting.remove_participant(participant_id)
        self.meeting_repository.save(meeting)
        logger.info(f"Participante {participant_id} dado de baja de la reunión {meeting.id}")
        return meeting

    def add_comment(self, meeting_id: IdLike, author_id: IdLike, text: str) -> MeetingComment:
        meeting = self._load(meeting_id)
        comment = MeetingComment.create(
            comment_id=MeetingCommentId.generate(),
            meeting_id=meeting.id,
            author_id=author_id,
            text=text,
            created_at=self.clock()
        )
        meeting.add_comment(comment)
        self.meeting_repository.save(meeting)
        logger.info(f"Comentario {comment.id} publicado en la reunión {meeting.id}")
        return comment

    def _load_comment(self, meeting: Meeting, comment_id: IdLike) -> MeetingComment:
        comment = meeting.find_comment(comment_id)
        if comment is None:
            raise MeetingError("El comentario no existe en la reunión.")
        return comment

    def edit_comment(self, meeting_id: IdLike, comment_id: IdLike, text: str) -> MeetingComment:
        meeting = self._load(meeting_id)
        comment = self._load_comment(meeting, comment_id)
        comment.update(text, updated_at=self.clock())
        self.meeting_repository.save(meeting)
        logger.info(f"Comentario {comment.id} editado en la reunión {meeting.id}")
        return comment

    def delete_comment(self, meeting_id: IdLike, comment_id: IdLike) -> None:
        meeting = self._load(meeting_id)
        comment = self._load_comment(meeting, comment_id)
        meeting.remove_comment(comment)
        self.meeting_repository.save(meeting)
        logger.info(f"Comentario {comment.id} eliminado de la reunión {meeting.id}")

    def add_tag(self, meeting_id: IdLike, text: str) -> MeetingTag:
        meeting = self._load(meeting_id)
        tag_text = MeetingTagText(text)

        # Cada etiqueta nueva recibe un id distinto, así que el texto repetido
        # se detecta aquí y no en el agregado
        if any(t.text == tag_text for t in meeting.tags):
            raise MeetingError("La etiqueta ya existe en la reunión.")

        tag = MeetingTag.create(MeetingTagId.generate(), meeting.id, tag_text)
        meeting.add_tag(tag)
        self.meeting_repository.save(meeting)
        logger.info(f"Etiqueta '{tag.text}' añadida a la reunión {meeting.id}")
        return tag

    def remove_tag(self, meeting_id: IdLike, tag_id: IdLike) -> None:
        meeting = self._load(meeting_id)
        tag = meeting.find_tag(tag_id)
        if tag is None:
            raise MeetingError("La etiqueta no existe en la reunión.")
        meeting.remove_tag(tag)
        self.meeting_repository.save(meeting)
        logger.info(f"Etiqueta '{tag.text}' eliminada de la reunión {meeting.id}")

    def change_status(self, meeting_id: IdLike, status: Union[MeetingStatus, str]) -> Meeting:
        if isinstance(status, str):
            status = MeetingStatus.from_string(status)

        meeting = self._load(meeting_id)
        previous = meeting.status

        if status == MeetingStatus.SCHEDULED:
            meeting.schedule()
        elif status == MeetingStatus.ONGOING:
            meeting.start()
        elif status == MeetingStatus.FINISHED:
            meeting.finish()
        elif status == MeetingStatus.CANCELLED:
            meeting.cancel()
        else:
            raise MeetingError("Una reunión no puede volver al estado borrador.")

        self.meeting_repository.save(meeting)
        logger.info(f"Reunión {meeting.id}: {previous.to_string()} -> {meeting.status.to_string()}")
        return meeting

    def delete_meeting(self, meeting_id: IdLike) -> None:
        meeting = self._load(meeting_id)
        self.meeting_repository.delete(meeting.id)
        logger.info(f"Reunión {meeting.id} eliminada")
