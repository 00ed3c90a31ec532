"""Pruebas de las entidades hijas MeetingComment y MeetingTag."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from gestion_reuniones.domain.exceptions.meeting_error import MeetingError
from gestion_reuniones.domain.models.meeting_comment import MeetingComment
from gestion_reuniones.domain.models.meeting_tag import MeetingTag
from gestion_reuniones.domain.value_objects.comment_text import CommentText
from gestion_reuniones.domain.value_objects.meeting_tag_text import MeetingTagText


CREATED = datetime(2025, 3, 1, 8, 0, tzinfo=timezone.utc)


def test_comment_create_sets_both_timestamps():
    comment = MeetingComment.create(uuid4(), uuid4(), uuid4(), "Confirmo asistencia.", created_at=CREATED)
    assert comment.created_at == CREATED
    assert comment.updated_at == CREATED
    assert comment.text == CommentText("Confirmo asistencia.")


def test_comment_create_defaults_to_current_utc_time():
    before = datetime.now(timezone.utc)
    comment = MeetingComment.create(uuid4(), uuid4(), uuid4(), "Confirmo asistencia.")
    assert before <= comment.created_at <= datetime.now(timezone.utc)


def test_comment_update_replaces_text_and_touches_updated_at():
    comment = MeetingComment.create(uuid4(), uuid4(), uuid4(), "Primer texto", created_at=CREATED)
    edited_at = datetime(2025, 3, 2, tzinfo=timezone.utc)

    comment.update("Texto corregido", updated_at=edited_at)

    assert comment.text.value == "Texto corregido"
    assert comment.updated_at == edited_at
    assert comment.created_at == CREATED


def test_invalid_comment_update_keeps_previous_state():
    comment = MeetingComment.create(uuid4(), uuid4(), uuid4(), "Primer texto", created_at=CREATED)
    with pytest.raises(MeetingError):
        comment.update("No")
    assert comment.text.value == "Primer texto"
    assert comment.updated_at == CREATED


def test_comment_timestamps_must_be_datetimes():
    with pytest.raises(MeetingError, match="datetime"):
        MeetingComment.create(uuid4(), uuid4(), uuid4(), "Confirmo asistencia.", created_at="ayer")

    comment = MeetingComment.create(uuid4(), uuid4(), uuid4(), "Primer texto", created_at=CREATED)
    with pytest.raises(MeetingError, match="datetime"):
        comment.update("Texto corregido", updated_at=1700000000)
    assert comment.text.value == "Primer texto"


@pytest.mark.parametrize("comment_id, meeting_id, author_id, text", [
    (None, uuid4(), uuid4(), "Texto válido"),
    (uuid4(), "", uuid4(), "Texto válido"),
    (uuid4(), uuid4(), "xyz", "Texto válido"),
    (uuid4(), uuid4(), uuid4(), "Hey"),
])
def test_comment_create_validates_inputs(comment_id, meeting_id, author_id, text):
    with pytest.raises(MeetingError):
        MeetingComment.create(comment_id, meeting_id, author_id, text)


def test_tag_create_and_structural_equality():
    tag_id, meeting_id = uuid4(), uuid4()
    tag = MeetingTag.create(tag_id, meeting_id, "remoto")
    assert tag.text == MeetingTagText("remoto")
    assert tag == MeetingTag.create(str(tag_id), str(meeting_id), MeetingTagText("remoto"))
    assert tag != MeetingTag.create(uuid4(), meeting_id, "remoto")


@pytest.mark.parametrize("text", ["ab", "x" * 16, "   "])
def test_tag_rejects_invalid_text(text):
    with pytest.raises(MeetingError):
        MeetingTag.create(uuid4(), uuid4(), text)
