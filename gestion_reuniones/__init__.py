"""Módulo principal para el dominio de gestión de reuniones."""

# Para facilitar los imports
from .domain.exceptions.meeting_error import MeetingError, MeetingNotFoundError
from .domain.models.meeting import Meeting
from .domain.models.meeting_comment import MeetingComment
from .domain.models.meeting_tag import MeetingTag
# Imports de value_objects
from .domain.value_objects.meeting_id import MeetingId
from .domain.value_objects.participant_id import ParticipantId
from .domain.value_objects.meeting_comment_id import MeetingCommentId
from .domain.value_objects.meeting_tag_id import MeetingTagId
from .domain.value_objects.meeting_title import MeetingTitle
from .domain.value_objects.meeting_description import MeetingDescription
from .domain.value_objects.comment_text import CommentText
from .domain.value_objects.meeting_tag_text import MeetingTagText
from .domain.value_objects.start_at_date import StartAtDate
from .domain.value_objects.end_at_date import EndAtDate
from .domain.value_objects.meeting_location import MeetingLocation
from .domain.value_objects.meeting_url import MeetingUrl
from .domain.value_objects.meeting_status import MeetingStatus
from .domain.value_objects.export_format import ExportFormat
