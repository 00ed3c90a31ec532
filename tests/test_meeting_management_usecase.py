"""Pruebas del caso de uso de gestión de reuniones."""

import logging
from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from gestion_reuniones.domain.exceptions.meeting_error import MeetingError, MeetingNotFoundError
from gestion_reuniones.domain.value_objects.meeting_location import MeetingLocation
from gestion_reuniones.domain.value_objects.meeting_status import MeetingStatus
from gestion_reuniones.domain.value_objects.participant_id import ParticipantId


@pytest.fixture
def created(usecase, host_uuid, start_at, end_at):
    return usecase.create_meeting(host_uuid, "Weekly Sync", "Revisión semanal del equipo.", start_at, end_at)


# ── Creación y consulta ──────────────────────────────────────────────────────


def test_create_meeting_generates_id_and_persists(usecase, repository, created):
    assert created.status is MeetingStatus.DRAFT
    assert repository.get_by_id(created.id) is created
    assert usecase.get_meeting(str(created.id)) is created


def test_create_meeting_propagates_domain_errors(usecase, repository, start_at):
    with pytest.raises(MeetingError):
        usecase.create_meeting(uuid4(), "Weekly Sync", "Revisión.", start_at, start_at - timedelta(hours=1))
    assert repository.get_all() == []


def test_unknown_meeting_raises_not_found(usecase):
    missing = uuid4()
    with pytest.raises(MeetingNotFoundError) as excinfo:
        usecase.get_meeting(missing)
    assert excinfo.value.meeting_id == missing
    with pytest.raises(MeetingError):
        usecase.join_meeting(missing, uuid4())


def test_list_meetings_with_naive_and_aware_dates(usecase, created):
    naive_start = datetime(2025, 3, 31, 10)
    earlier = usecase.create_meeting(uuid4(), "Design Review", "Revisión del diseño.",
                                     naive_start, naive_start + timedelta(hours=1))

    assert usecase.list_meetings() == [earlier, created]


def test_list_meetings_by_status(usecase, created):
    assert usecase.list_meetings() == [created]
    assert usecase.list_meetings("scheduled") == []
    usecase.change_status(created.id.value, MeetingStatus.SCHEDULED)
    assert usecase.list_meetings(MeetingStatus.SCHEDULED) == [created]


# ── Modificaciones ───────────────────────────────────────────────────────────


def test_information_title_and_description(usecase, created):
    location = MeetingLocation.create("US", None, "Austin", "Main St", "12", None, 30.2, -97.7)
    usecase.add_information(created.id.value, location, 10, True)
    usecase.rename_meeting(created.id.value, "Design Review")
    usecase.change_description(created.id.value, "Revisión del diseño.")

    assert created.location == location
    assert created.max_participants == 10
    assert created.title.value == "Design Review"
    assert created.description.value == "Revisión del diseño."


def test_join_and_leave(usecase, created, host_uuid):
    guest = uuid4()
    usecase.join_meeting(created.id.value, guest)
    assert created.participants == (ParticipantId(guest),)

    with pytest.raises(MeetingError, match="anfitrión"):
        usecase.join_meeting(created.id.value, host_uuid)

    usecase.leave_meeting(created.id.value, guest)
    assert created.participants == ()


def test_join_over_capacity_only_warns(usecase, created, caplog):
    usecase.add_information(created.id.value, None, 1, False)
    usecase.join_meeting(created.id.value, uuid4())

    with caplog.at_level(logging.WARNING):
        usecase.join_meeting(created.id.value, uuid4())

    assert len(created.participants) == 2
    assert "supera su aforo" in caplog.text


def test_comment_lifecycle_uses_clock(usecase, created):
    author = uuid4()
    comment = usecase.add_comment(created.id.value, author, "Llevaré la agenda.")
    assert comment.created_at == usecase.clock()
    assert comment.meeting_id == created.id
    assert created.comments == (comment,)

    edited = usecase.edit_comment(created.id.value, comment.id.value, "Llevaré la agenda y el café.")
    assert edited is comment
    assert comment.text.value == "Llevaré la agenda y el café."

    usecase.delete_comment(created.id.value, comment.id.value)
    assert created.comments == ()

    with pytest.raises(MeetingError, match="no existe"):
        usecase.delete_comment(created.id.value, comment.id.value)


def test_tags_reject_repeated_text(usecase, created):
    tag = usecase.add_tag(created.id.value, "backend")
    with pytest.raises(MeetingError, match="ya existe"):
        usecase.add_tag(created.id.value, "backend")

    usecase.remove_tag(created.id.value, tag.id.value)
    assert created.tags == ()
    with pytest.raises(MeetingError, match="no existe"):
        usecase.remove_tag(created.id.value, tag.id.value)


# ── Estados ──────────────────────────────────────────────────────────────────


def test_change_status_walks_lifecycle(usecase, created):
    for status in ("scheduled", "ongoing", "finished"):
        usecase.change_status(created.id.value, status)
    assert created.status is MeetingStatus.FINISHED


def test_change_status_keeps_domain_rules(usecase, created):
    with pytest.raises(MeetingError, match="borrador"):
        usecase.change_status(created.id.value, "cancelled")
    with pytest.raises(MeetingError, match="borrador"):
        usecase.change_status(created.id.value, MeetingStatus.DRAFT)
    assert created.status is MeetingStatus.DRAFT


def test_change_status_logs_transition(usecase, created, caplog):
    with caplog.at_level(logging.INFO):
        usecase.change_status(created.id.value, "scheduled")
    assert "Borrador -> Programada" in caplog.text


def test_delete_meeting(usecase, repository, created):
    usecase.delete_meeting(created.id.value)
    assert repository.get_all() == []
    with pytest.raises(MeetingNotFoundError):
        usecase.delete_meeting(created.id.value)
