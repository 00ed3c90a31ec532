from typing import Dict, List, Optional

from ...domain.models.meeting import Meeting
from ...domain.repositories.meeting_repository import MeetingRepository
from ...domain.value_objects.meeting_id import MeetingId
from ...domain.value_objects.meeting_status import MeetingStatus
from ...domain.value_objects.participant_id import ParticipantId


class InMemoryMeetingRepository(MeetingRepository):
    """Implementación en memoria del repositorio de reuniones para pruebas y desarrollo.

    Los listados se devuelven ordenados por fecha de inicio.
    """

    def __init__(self):
        self.meetings: Dict[MeetingId, Meeting] = {}

    def _sorted(self, meetings: List[Meeting]) -> List[Meeting]:
        return sorted(meetings, key=lambda m: m.start_at)

    def get_by_id(self, meeting_id: MeetingId) -> Optional[Meeting]:
        return self.meetings.get(MeetingId.from_value(meeting_id))

    def get_all(self) -> List[Meeting]:
        return self._sorted(list(self.meetings.values()))

    def save(self, meeting: Meeting) -> Meeting:
        self.meetings[meeting.id] = meeting
        return meeting

    def delete(self, meeting_id: MeetingId) -> None:
        meeting_id = MeetingId.from_value(meeting_id)
        if meeting_id in self.meetings:
            del self.meetings[meeting_id]

    def get_by_host(self, host_id: ParticipantId) -> List[Meeting]:
        host_id = ParticipantId.from_value(host_id)
        return self._sorted([m for m in self.meetings.values() if m.host_id == host_id])

    def get_by_participant(self, participant_id: ParticipantId) -> List[Meeting]:
        return self._sorted([
            meeting for meeting in self.meetings.values()
            if meeting.has_participant(participant_id)
        ])

    def get_by_status(self, status: MeetingStatus) -> List[Meeting]:
        if isinstance(status, str):
            status = MeetingStatus.from_string(status)
        return self._sorted([m for m in self.meetings.values() if m.status == status])
