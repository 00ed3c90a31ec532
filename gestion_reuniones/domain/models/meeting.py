from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Tuple, Union
from uuid import UUID

from gestion_reuniones.domain.exceptions.meeting_error import MeetingError
from gestion_reuniones.domain.models.meeting_comment import MeetingComment
from gestion_reuniones.domain.models.meeting_tag import MeetingTag
from gestion_reuniones.domain.value_objects.end_at_date import EndAtDate
from gestion_reuniones.domain.value_objects.meeting_comment_id import MeetingCommentId
from gestion_reuniones.domain.value_objects.meeting_description import MeetingDescription
from gestion_reuniones.domain.value_objects.meeting_id import MeetingId
from gestion_reuniones.domain.value_objects.meeting_location import MeetingLocation
from gestion_reuniones.domain.value_objects.meeting_status import MeetingStatus
from gestion_reuniones.domain.value_objects.meeting_tag_id import MeetingTagId
from gestion_reuniones.domain.value_objects.meeting_title import MeetingTitle
from gestion_reuniones.domain.value_objects.participant_id import ParticipantId
from gestion_reuniones.domain.value_objects.start_at_date import StartAtDate


# Estados desde los que cada transición falla, con el motivo del fallo.
# Cualquier estado que no aparezca en la tabla permite la transición.
SCHEDULE_FORBIDDEN: Dict[MeetingStatus, str] = {
    MeetingStatus.SCHEDULED: "La reunión ya está programada.",
    MeetingStatus.ONGOING: "La reunión ya está en curso.",
    MeetingStatus.FINISHED: "La reunión está finalizada.",
    MeetingStatus.CANCELLED: "La reunión está cancelada.",
}

START_FORBIDDEN: Dict[MeetingStatus, str] = {
    MeetingStatus.DRAFT: "La reunión es un borrador.",
    MeetingStatus.ONGOING: "La reunión ya está en curso.",
    MeetingStatus.FINISHED: "La reunión está finalizada.",
    MeetingStatus.CANCELLED: "La reunión está cancelada.",
}

FINISH_FORBIDDEN: Dict[MeetingStatus, str] = {
    MeetingStatus.DRAFT: "La reunión es un borrador.",
    MeetingStatus.FINISHED: "La reunión ya está finalizada.",
    MeetingStatus.CANCELLED: "La reunión está cancelada.",
}

# Un borrador no se puede cancelar: solo se cancelan reuniones ya programadas
CANCEL_FORBIDDEN: Dict[MeetingStatus, str] = {
    MeetingStatus.DRAFT: "La reunión es un borrador.",
    MeetingStatus.FINISHED: "La reunión está finalizada.",
    MeetingStatus.CANCELLED: "La reunión ya está cancelada.",
}


@dataclass(eq=False)
class Meeting:
    """Raíz del agregado reunión.

    Es el único punto de entrada para modificar una reunión y sus entidades
    hijas (participantes, comentarios y etiquetas). Cada operación comprueba
    todas sus invariantes antes de mutar el estado, de modo que una operación
    que falla deja la reunión intacta.
    """

    id: MeetingId = field(
        metadata={"description": "Identificador único de la reunión"}
    )
    host_id: ParticipantId = field(
        metadata={"description": "Anfitrión de la reunión; nunca figura entre los participantes"}
    )
    title: MeetingTitle = field(
        metadata={"description": "Título de la reunión"}
    )
    description: MeetingDescription = field(
        metadata={"description": "Descripción de la reunión"}
    )
    start_at: StartAtDate = field(
        metadata={"description": "Fecha de inicio; no puede ser posterior a la de finalización"}
    )
    end_at: EndAtDate = field(
        metadata={"description": "Fecha de finalización"}
    )
    location: Optional[MeetingLocation] = field(
        default=None,
        metadata={"description": "Lugar de la reunión, si es presencial"}
    )
    max_participants: int = field(
        default=0,
        metadata={
            "description": "Aforo orientativo de la reunión. No se aplica al añadir "
                        "participantes"
        }
    )
    is_private: bool = field(
        default=False,
        metadata={"description": "Indica si la reunión es privada"}
    )
    status: MeetingStatus = field(
        default=MeetingStatus.DRAFT,
        metadata={"description": "Estado del ciclo de vida"}
    )
    _participants: List[ParticipantId] = field(
        init=False,
        default_factory=list,
        repr=False
    )
    _comments: List[MeetingComment] = field(
        init=False,
        default_factory=list,
        repr=False
    )
    _tags: List[MeetingTag] = field(
        init=False,
        default_factory=list,
        repr=False
    )

    def __post_init__(self):
        self.id = MeetingId.from_value(self.id)
        self.host_id = ParticipantId.from_value(self.host_id)
        if not isinstance(self.title, MeetingTitle):
            self.title = MeetingTitle(self.title)
        if not isinstance(self.description, MeetingDescription):
            self.description = MeetingDescription(self.description)
        self.start_at = StartAtDate.from_value(self.start_at)
        self.end_at = EndAtDate.from_value(self.end_at)

        if self.start_at > self.end_at:
            raise MeetingError("La fecha de inicio debe ser anterior a la fecha de finalización de la reunión.")

        self._validate_location(self.location)
        self._validate_max_participants(self.max_participants)
        self.status = self._coerce_status(self.status)

    @classmethod
    def create(cls,
               meeting_id: Union[MeetingId, UUID, str],
               host_id: Union[ParticipantId, UUID, str],
               title: Union[MeetingTitle, str],
               description: Union[MeetingDescription, str],
               start_at: Union[StartAtDate, datetime, str],
               end_at: Union[EndAtDate, datetime, str]) -> 'Meeting':
        """Crea una reunión nueva en estado borrador.

        Args:
            meeting_id: Identificador de la reunión
            host_id: Identificador del anfitrión
            title: Título (5-200 caracteres, solo letras, números y espacios)
            description: Descripción (5-700 caracteres)
            start_at: Fecha de inicio
            end_at: Fecha de finalización

        Returns:
            Reunión en estado DRAFT, sin participantes, comentarios ni etiquetas

        Raises:
            MeetingError: Si algún dato no es válido o el inicio es posterior al final
        """
        return cls(
            id=meeting_id,
            host_id=host_id,
            title=title,
            description=description,
            start_at=start_at,
            end_at=end_at
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Meeting):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def participants(self) -> Tuple[ParticipantId, ...]:
        """Participantes en orden de inscripción (sin incluir al anfitrión)."""
        return tuple(self._participants)

    @property
    def comments(self) -> Tuple[MeetingComment, ...]:
        return tuple(self._comments)

    @property
    def tags(self) -> Tuple[MeetingTag, ...]:
        return tuple(self._tags)

    @staticmethod
    def _coerce_status(status: Union[MeetingStatus, str]) -> MeetingStatus:
        if isinstance(status, str):
            try:
                return MeetingStatus.from_string(status)
            except ValueError:
                raise MeetingError(f"'{status}' no es un estado de reunión válido.")
        if not isinstance(status, MeetingStatus):
            raise MeetingError("El estado de la reunión debe ser un MeetingStatus.")
        return status

    @staticmethod
    def _validate_location(location: Optional[MeetingLocation]) -> None:
        if location is not None and not isinstance(location, MeetingLocation):
            raise MeetingError("La ubicación de la reunión debe ser un MeetingLocation.")

    @staticmethod
    def _validate_max_participants(max_participants: int) -> None:
        if isinstance(max_participants, bool) or not isinstance(max_participants, int):
            raise MeetingError("El número máximo de participantes debe ser un entero.")
        if max_participants < 0:
            raise MeetingError("El número máximo de participantes no puede ser negativo.")

    def add_information(self,
                        location: Optional[MeetingLocation],
                        max_participants: int,
                        is_private: bool) -> None:
        """Completa los datos opcionales de la reunión.

        Args:
            location: Ubicación de la reunión (None si no es presencial)
            max_participants: Aforo orientativo, mayor o igual que cero
            is_private: Si la reunión es privada

        Raises:
            MeetingError: Si la ubicación no es un MeetingLocation o max_participants es negativo
        """
        self._validate_location(location)
        self._validate_max_participants(max_participants)

        self.location = location
        self.max_participants = max_participants
        self.is_private = bool(is_private)

    def has_participant(self, participant_id: Union[ParticipantId, UUID, str]) -> bool:
        return ParticipantId.from_value(participant_id) in self._participants

    def add_participant(self, participant_id: Union[ParticipantId, UUID, str]) -> None:
        """Inscribe un participante en la reunión.

        El aforo (max_participants) no se comprueba aquí.

        Raises:
            MeetingError: Si el participante es el anfitrión o ya está inscrito
        """
        participant = ParticipantId.from_value(participant_id)

        if participant == self.host_id:
            raise MeetingError("El anfitrión no puede ser participante de la reunión.")

        if participant in self._participants:
            raise MeetingError("El participante ya está inscrito en la reunión.")

        self._participants.append(participant)

    def remove_participant(self, participant_id: Union[ParticipantId, UUID, str]) -> None:
        """Da de baja a un participante.

        Raises:
            MeetingError: Si el participante es el anfitrión o no está inscrito
        """
        participant = ParticipantId.from_value(participant_id)

        if participant == self.host_id:
            raise MeetingError("El anfitrión no puede ser participante de la reunión.")

        if participant not in self._participants:
            raise MeetingError("El participante no está inscrito en la reunión.")

        self._participants.remove(participant)

    def add_comment(self, comment: MeetingComment) -> None:
        if comment in self._comments:
            raise MeetingError("El comentario ya existe en la reunión.")

        self._comments.append(comment)

    def remove_comment(self, comment: MeetingComment) -> None:
        if comment not in self._comments:
            raise MeetingError("El comentario no existe en la reunión.")

        self._comments.remove(comment)

    def find_comment(self, comment_id: Union[MeetingCommentId, UUID, str]) -> Optional[MeetingComment]:
        """Busca un comentario por su identificador."""
        wanted = MeetingCommentId.from_value(comment_id)
        return next((c for c in self._comments if c.id == wanted), None)

    def get_author_comments(self, author_id: Union[ParticipantId, UUID, str]) -> List[MeetingComment]:
        """Obtener todos los comentarios escritos por un participante."""
        author = ParticipantId.from_value(author_id)
        return [c for c in self._comments if c.author_id == author]

    def add_tag(self, tag: MeetingTag) -> None:
        if tag in self._tags:
            raise MeetingError("La etiqueta ya existe en la reunión.")

        self._tags.append(tag)

    def remove_tag(self, tag: MeetingTag) -> None:
        if tag not in self._tags:
            raise MeetingError("La etiqueta no existe en la reunión.")

        self._tags.remove(tag)

    def find_tag(self, tag_id: Union[MeetingTagId, UUID, str]) -> Optional[MeetingTag]:
        """Busca una etiqueta por su identificador."""
        wanted = MeetingTagId.from_value(tag_id)
        return next((t for t in self._tags if t.id == wanted), None)

    def change_title(self, title: Union[MeetingTitle, str]) -> None:
        self.title = title if isinstance(title, MeetingTitle) else MeetingTitle(title)

    def change_description(self, description: Union[MeetingDescription, str]) -> None:
        self.description = (description if isinstance(description, MeetingDescription)
                            else MeetingDescription(description))

    def _transition_to(self, target: MeetingStatus, forbidden: Dict[MeetingStatus, str]) -> None:
        if not isinstance(self.status, MeetingStatus):
            raise MeetingError(f"La reunión tiene un estado desconocido: {self.status!r}.")
        if self.status in forbidden:
            raise MeetingError(forbidden[self.status])
        self.status = target

    def schedule(self) -> None:
        """Programa un borrador.

        Raises:
            MeetingError: Si la reunión no está en borrador
        """
        self._transition_to(MeetingStatus.SCHEDULED, SCHEDULE_FORBIDDEN)

    def start(self) -> None:
        """Marca como en curso una reunión programada.

        Raises:
            MeetingError: Si la reunión no está programada
        """
        self._transition_to(MeetingStatus.ONGOING, START_FORBIDDEN)

    def finish(self) -> None:
        """Finaliza una reunión programada o en curso.

        Raises:
            MeetingError: Si la reunión es un borrador, ya finalizó o está cancelada
        """
        self._transition_to(MeetingStatus.FINISHED, FINISH_FORBIDDEN)

    def cancel(self) -> None:
        """Cancela una reunión programada o en curso.

        Raises:
            MeetingError: Si la reunión es un borrador, está finalizada o ya está cancelada
        """
        self._transition_to(MeetingStatus.CANCELLED, CANCEL_FORBIDDEN)
