from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Union
from uuid import UUID

from gestion_reuniones.domain.models.meeting import Meeting
from gestion_reuniones.domain.models.meeting_comment import MeetingComment
from gestion_reuniones.domain.models.meeting_tag import MeetingTag
from gestion_reuniones.domain.value_objects.meeting_location import MeetingLocation
from gestion_reuniones.domain.value_objects.meeting_status import MeetingStatus


IdLike = Union[UUID, str]


class MeetingServicePort(ABC):
    """Puerto de entrada para la gestión de reuniones.

    Define la interfaz que los adaptadores de entrada (API, CLI, tareas
    programadas) utilizarán para crear y modificar reuniones. Los
    identificadores se reciben como valores primitivos y los errores de
    validación se propagan como MeetingError.
    """

    @abstractmethod
    def create_meeting(self,
                       host_id: IdLike,
                       title: str,
                       description: str,
                       start_at: datetime,
                       end_at: datetime) -> Meeting:
        """Crea una reunión en borrador y la guarda.

        Args:
            host_id: Identificador del anfitrión
            title: Título de la reunión
            description: Descripción de la reunión
            start_at: Fecha de inicio
            end_at: Fecha de finalización

        Returns:
            Reunión creada, con un identificador nuevo
        """
        pass

    @abstractmethod
    def get_meeting(self, meeting_id: IdLike) -> Meeting:
        """Obtiene una reunión.

        Raises:
            MeetingNotFoundError: Si la reunión no existe
        """
        pass

    @abstractmethod
    def list_meetings(self, status: Optional[Union[MeetingStatus, str]] = None) -> List[Meeting]:
        """Lista las reuniones, opcionalmente filtradas por estado."""
        pass

    @abstractmethod
    def add_information(self,
                        meeting_id: IdLike,
                        location: Optional[MeetingLocation],
                        max_participants: int,
                        is_private: bool) -> Meeting:
        """Completa la ubicación, el aforo y la privacidad de una reunión."""
        pass

    @abstractmethod
    def rename_meeting(self, meeting_id: IdLike, title: str) -> Meeting:
        pass

    @abstractmethod
    def change_description(self, meeting_id: IdLike, description: str) -> Meeting:
        pass

    @abstractmethod
    def join_meeting(self, meeting_id: IdLike, participant_id: IdLike) -> Meeting:
        """Inscribe un participante en una reunión."""
        pass

    @abstractmethod
    def leave_meeting(self, meeting_id: IdLike, participant_id: IdLike) -> Meeting:
        """Da de baja a un participante de una reunión."""
        pass

    @abstractmethod
    def add_comment(self, meeting_id: IdLike, author_id: IdLike, text: str) -> MeetingComment:
        """Publica un comentario nuevo en una reunión."""
        pass

    @abstractmethod
    def edit_comment(self, meeting_id: IdLike, comment_id: IdLike, text: str) -> MeetingComment:
        pass

    @abstractmethod
    def delete_comment(self, meeting_id: IdLike, comment_id: IdLike) -> None:
        pass

    @abstractmethod
    def add_tag(self, meeting_id: IdLike, text: str) -> MeetingTag:
        """Añade una etiqueta nueva a una reunión."""
        pass

    @abstractmethod
    def remove_tag(self, meeting_id: IdLike, tag_id: IdLike) -> None:
        pass

    @abstractmethod
    def change_status(self, meeting_id: IdLike, status: Union[MeetingStatus, str]) -> Meeting:
        """Hace avanzar el ciclo de vida de una reunión hasta el estado indicado.

        Args:
            meeting_id: Identificador de la reunión
            status: Estado destino como enum MeetingStatus o string
                    ('scheduled', 'ongoing', 'finished', 'cancelled')

        Raises:
            MeetingError: Si la transición no está permitida desde el estado actual
        """
        pass

    @abstractmethod
    def delete_meeting(self, meeting_id: IdLike) -> None:
        pass
