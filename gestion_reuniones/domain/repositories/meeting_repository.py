from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.meeting import Meeting
from ..value_objects.meeting_id import MeetingId
from ..value_objects.meeting_status import MeetingStatus
from ..value_objects.participant_id import ParticipantId


class MeetingRepository(ABC):
    """Interfaz de repositorio para el agregado Reunión."""

    @abstractmethod
    def get_by_id(self, meeting_id: MeetingId) -> Optional[Meeting]:
        """Obtener una reunión por su ID."""
        pass

    @abstractmethod
    def get_all(self) -> List[Meeting]:
        """Obtener todas las reuniones."""
        pass

    @abstractmethod
    def save(self, meeting: Meeting) -> Meeting:
        """Guardar una reunión (crear o actualizar)."""
        pass

    @abstractmethod
    def delete(self, meeting_id: MeetingId) -> None:
        """Eliminar una reunión."""
        pass

    @abstractmethod
    def get_by_host(self, host_id: ParticipantId) -> List[Meeting]:
        """Obtener todas las reuniones organizadas por un anfitrión."""
        pass

    @abstractmethod
    def get_by_participant(self, participant_id: ParticipantId) -> List[Meeting]:
        """Obtener todas las reuniones en las que está inscrito un participante."""
        pass

    @abstractmethod
    def get_by_status(self, status: MeetingStatus) -> List[Meeting]:
        """Obtener todas las reuniones que están en un estado concreto."""
        pass
