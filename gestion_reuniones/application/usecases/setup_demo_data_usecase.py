"""Caso de uso para configuración de datos de demostración."""

import numpy as np
import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, Any, List
from uuid import UUID

from gestion_reuniones.domain.models.meeting import Meeting
from gestion_reuniones.domain.models.meeting_comment import MeetingComment
from gestion_reuniones.domain.models.meeting_tag import MeetingTag
from gestion_reuniones.domain.value_objects.meeting_location import MeetingLocation
from gestion_reuniones.domain.value_objects.participant_id import ParticipantId
from gestion_reuniones.domain.repositories.meeting_repository import MeetingRepository
from gestion_reuniones.infrastructure.repositories.in_memory_meeting_repository import InMemoryMeetingRepository
from gestion_reuniones.application.ports.input.demo_data_setup_port import DemoDataSetupPort

logger = logging.getLogger(__name__)


TOPICS = [
    "Sprint Planning", "Design Review", "Weekly Sync", "Retrospective",
    "Product Demo", "Budget Review", "Hiring Committee", "Architecture Forum"
]

TAGS = ["backend", "frontend", "producto", "urgente", "remoto", "trimestral", "equipo"]

COMMENTS = [
    "Llevaré la agenda impresa.",
    "¿Podemos empezar diez minutos más tarde?",
    "Revisad el documento antes de la reunión.",
    "Confirmo asistencia.",
    "Subiré las notas al finalizar.",
]

LOCATIONS = [
    ("España", "Madrid", "Madrid", "Gran Vía", "28", None, 40.4203, -3.7058),
    ("España", "Cataluña", "Barcelona", "Passeig de Gràcia", "92", "3", 41.3954, 2.1619),
    ("US", None, "Austin", "Main St", "12", None, 30.2672, -97.7431),
    ("Chile", "Región Metropolitana", "Santiago", "Av. Providencia", "1208", "501", -33.4263, -70.6166),
]

# Estados que alcanza cada reunión generada, como secuencia de transiciones
STATUS_PATHS = [
    [],
    ["schedule"],
    ["schedule", "start"],
    ["schedule", "start", "finish"],
    ["schedule", "cancel"],
]


class SetupDemoDataUseCase(DemoDataSetupPort):
    """Implementación del caso de uso para configuración de datos de demostración.

    Genera reuniones aleatorias pero siempre válidas: cada reunión se construye
    a través del agregado, así que cualquier dato que viole una invariante
    haría fallar la generación.
    """

    def get_default_config(self) -> Dict[str, Any]:
        """Obtiene la configuración por defecto para la generación de datos."""
        return {
            "NUM_MEETINGS": 12,
            "NUM_PARTICIPANTS": 25,
            "MAX_PARTICIPANTS_PER_MEETING": 10,
            "MAX_COMMENTS_PER_MEETING": 4,
            "MAX_TAGS_PER_MEETING": 3,
            "PRIVATE_PROBABILITY": 0.3,
            "MIN_DURATION_HOURS": 0.5,
            "MAX_DURATION_HOURS": 3.0,
            "BASE_DATE": datetime(2025, 1, 6, tzinfo=timezone.utc),
            "SEED": None
        }

    def setup_demo_data(self, config: Dict[str, Any] = None) -> MeetingRepository:
        """Configura reuniones de ejemplo en un repositorio en memoria."""
        defaults = self.get_default_config()
        if config is None:
            config = defaults

        # Extraer configuración
        NUM_MEETINGS = config.get("NUM_MEETINGS", defaults["NUM_MEETINGS"])
        NUM_PARTICIPANTS = config.get("NUM_PARTICIPANTS", defaults["NUM_PARTICIPANTS"])
        MAX_PARTICIPANTS_PER_MEETING = config.get("MAX_PARTICIPANTS_PER_MEETING",
                                                  defaults["MAX_PARTICIPANTS_PER_MEETING"])
        MAX_COMMENTS_PER_MEETING = config.get("MAX_COMMENTS_PER_MEETING",
                                              defaults["MAX_COMMENTS_PER_MEETING"])
        MAX_TAGS_PER_MEETING = config.get("MAX_TAGS_PER_MEETING", defaults["MAX_TAGS_PER_MEETING"])
        PRIVATE_PROBABILITY = config.get("PRIVATE_PROBABILITY", defaults["PRIVATE_PROBABILITY"])
        MIN_DURATION_HOURS = config.get("MIN_DURATION_HOURS", defaults["MIN_DURATION_HOURS"])
        MAX_DURATION_HOURS = config.get("MAX_DURATION_HOURS", defaults["MAX_DURATION_HOURS"])
        BASE_DATE = config.get("BASE_DATE", defaults["BASE_DATE"])
        SEED = config.get("SEED", defaults["SEED"])

        if NUM_PARTICIPANTS < 1:
            raise ValueError("NUM_PARTICIPANTS debe ser al menos 1 (el anfitrión)")
        if MIN_DURATION_HOURS < 0 or MAX_DURATION_HOURS < MIN_DURATION_HOURS:
            raise ValueError("El rango de duración de las reuniones no es válido")

        rng = np.random.default_rng(SEED)
        meeting_repo = InMemoryMeetingRepository()

        people = [ParticipantId(self._random_uuid(rng)) for _ in range(NUM_PARTICIPANTS)]

        for index in range(NUM_MEETINGS):
            host = people[int(rng.integers(len(people)))]
            topic = TOPICS[int(rng.integers(len(TOPICS)))]

            start_at = BASE_DATE + timedelta(
                days=int(rng.integers(0, 30)),
                hours=int(rng.integers(8, 18))
            )
            duration = float(rng.uniform(MIN_DURATION_HOURS, MAX_DURATION_HOURS))

            meeting = Meeting.create(
                meeting_id=self._random_uuid(rng),
                host_id=host,
                title=f"{topic} {index + 1}",
                description=f"Reunión de demostración {index + 1}: {topic.lower()}.",
                start_at=start_at,
                end_at=start_at + timedelta(hours=duration)
            )

            max_participants = int(rng.integers(0, MAX_PARTICIPANTS_PER_MEETING + 1))
            meeting.add_information(
                location=self._random_location(rng),
                max_participants=max_participants,
                is_private=bool(rng.random() < PRIVATE_PROBABILITY)
            )

            candidates = [p for p in people if p != host]
            participant_count = int(rng.integers(0, min(max_participants, len(candidates)) + 1))
            if participant_count > 0:
                for i in rng.choice(len(candidates), size=participant_count, replace=False):
                    meeting.add_participant(candidates[int(i)])

            self._add_comments(rng, meeting, MAX_COMMENTS_PER_MEETING)
            self._add_tags(rng, meeting, MAX_TAGS_PER_MEETING)

            for transition in STATUS_PATHS[int(rng.integers(len(STATUS_PATHS)))]:
                getattr(meeting, transition)()

            meeting_repo.save(meeting)

        logger.info(f"Configuradas {NUM_MEETINGS} reuniones de prueba con {NUM_PARTICIPANTS} personas")

        return meeting_repo

    @staticmethod
    def _random_uuid(rng: np.random.Generator) -> UUID:
        # Derivado del generador para que la semilla haga reproducibles también los ids
        return UUID(bytes=rng.bytes(16), version=4)

    def _random_location(self, rng: np.random.Generator):
        """Devuelve una ubicación aleatoria, o None para reuniones en línea."""
        choice = int(rng.integers(len(LOCATIONS) + 1))
        if choice == len(LOCATIONS):
            return None
        return MeetingLocation.create(*LOCATIONS[choice])

    def _add_comments(self, rng: np.random.Generator, meeting: Meeting, max_comments: int) -> None:
        authors: List[ParticipantId] = [meeting.host_id] + list(meeting.participants)
        for _ in range(int(rng.integers(0, max_comments + 1))):
            written_at = meeting.start_at.value - timedelta(hours=int(rng.integers(1, 72)))
            meeting.add_comment(MeetingComment.create(
                comment_id=self._random_uuid(rng),
                meeting_id=meeting.id,
                author_id=authors[int(rng.integers(len(authors)))],
                text=COMMENTS[int(rng.integers(len(COMMENTS)))],
                created_at=written_at
            ))

    def _add_tags(self, rng: np.random.Generator, meeting: Meeting, max_tags: int) -> None:
        tag_count = int(rng.integers(0, min(max_tags, len(TAGS)) + 1))
        if tag_count == 0:
            return
        for i in rng.choice(len(TAGS), size=tag_count, replace=False):
            meeting.add_tag(MeetingTag.create(self._random_uuid(rng), meeting.id, TAGS[int(i)]))
