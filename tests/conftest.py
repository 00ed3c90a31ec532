"""Fixtures compartidas para las pruebas del dominio de reuniones."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from gestion_reuniones.application.usecases.meeting_management_usecase import MeetingManagementUseCase
from gestion_reuniones.domain.models.meeting import Meeting
from gestion_reuniones.infrastructure.repositories.in_memory_meeting_repository import InMemoryMeetingRepository


FIXED_NOW = datetime(2025, 3, 10, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def start_at():
    return datetime(2025, 4, 1, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def end_at(start_at):
    return start_at + timedelta(hours=2)


@pytest.fixture
def host_uuid():
    return uuid4()


@pytest.fixture
def meeting(host_uuid, start_at, end_at):
    """Reunión válida recién creada (estado borrador)."""
    return Meeting.create(
        meeting_id=uuid4(),
        host_id=host_uuid,
        title="Weekly Sync",
        description="Revisión semanal del equipo.",
        start_at=start_at,
        end_at=end_at,
    )


@pytest.fixture
def repository():
    return InMemoryMeetingRepository()


@pytest.fixture
def usecase(repository):
    return MeetingManagementUseCase(repository, clock=lambda: FIXED_NOW)
