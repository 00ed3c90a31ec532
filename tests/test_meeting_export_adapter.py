"""Pruebas del adaptador de exportación de reuniones."""

import json
from io import StringIO
from uuid import uuid4

import pandas as pd
import pytest

from gestion_reuniones.domain.models.meeting_comment import MeetingComment
from gestion_reuniones.domain.models.meeting_tag import MeetingTag
from gestion_reuniones.domain.value_objects.export_format import ExportFormat
from gestion_reuniones.domain.value_objects.meeting_location import MeetingLocation
from gestion_reuniones.infrastructure.adapters.output.meeting_export_adapter import MeetingExportAdapter


@pytest.fixture
def adapter():
    return MeetingExportAdapter()


@pytest.fixture
def full_meeting(meeting):
    meeting.add_information(
        MeetingLocation.create("España", "Madrid", "Madrid", "Gran Vía", "28", None, 40.42, -3.70),
        max_participants=5,
        is_private=True,
    )
    meeting.add_participant(uuid4())
    meeting.add_comment(MeetingComment.create(uuid4(), meeting.id, meeting.host_id, "Confirmo asistencia."))
    meeting.add_tag(MeetingTag.create(uuid4(), meeting.id, "backend"))
    meeting.schedule()
    return meeting


def test_supported_formats(adapter):
    assert adapter.get_supported_formats() == ["text", "csv", "json", "excel"]


def test_unsupported_format_raises(adapter, meeting):
    with pytest.raises(ValueError, match="Formato no soportado"):
        adapter.export_meetings([meeting], "pdf")


# ── JSON ─────────────────────────────────────────────────────────────────────


def test_json_contains_nested_children(adapter, full_meeting):
    data = json.loads(adapter.export_meetings([full_meeting], ExportFormat.JSON))

    assert data["total"] == 1
    document = data["meetings"][0]
    assert document["id"] == str(full_meeting.id)
    assert document["status"] == "scheduled"
    assert document["location"] == "España, Madrid, Madrid, Gran Vía 28"
    assert document["coordinates"] == {"latitude": 40.42, "longitude": -3.70}
    assert document["tags"][0]["text"] == "backend"
    assert document["comments"][0]["text"] == "Confirmo asistencia."
    assert len(document["participants"]) == 1


def test_json_written_to_file(adapter, full_meeting, tmp_path):
    path = str(tmp_path / "reuniones.json")
    assert adapter.export_meetings([full_meeting], "json", path) == path
    with open(path, encoding="utf-8") as f:
        assert json.load(f)["total"] == 1


# ── Formatos tabulares ───────────────────────────────────────────────────────


def test_csv_has_one_row_per_meeting(adapter, full_meeting):
    df = pd.read_csv(StringIO(adapter.export_meetings([full_meeting], "csv")))

    assert len(df) == 1
    row = df.iloc[0]
    assert row["title"] == "Weekly Sync"
    assert row["participants"] == 1
    assert row["comments"] == 1
    assert row["tags"] == "backend"


def test_excel_requires_output_path(adapter, meeting):
    with pytest.raises(ValueError, match="ruta de salida"):
        adapter.export_meetings([meeting], ExportFormat.EXCEL)


def test_excel_written_to_file(adapter, full_meeting, tmp_path):
    path = str(tmp_path / "reuniones.xlsx")
    adapter.export_meetings([full_meeting], "xlsx", path)

    df = pd.read_excel(path, sheet_name="Reuniones")
    assert list(df["id"]) == [str(full_meeting.id)]


# ── Texto ────────────────────────────────────────────────────────────────────


def test_text_groups_by_status(adapter, full_meeting):
    text = adapter.export_meetings([full_meeting], "text")

    assert "Estado: Programada (1)" in text
    assert "Weekly Sync [privada]" in text
    assert "Lugar: España, Madrid, Madrid, Gran Vía 28" in text
    assert "Etiquetas: backend" in text
    assert text.endswith("Total de reuniones: 1")


def test_text_without_meetings(adapter):
    assert adapter.export_meetings([], "text") == "No hay reuniones para exportar"
