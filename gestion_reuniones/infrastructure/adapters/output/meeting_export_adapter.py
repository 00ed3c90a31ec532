import json
import pandas as pd
from typing import Dict, Any, List, Optional, Union
import logging

from gestion_reuniones.application.ports.output.meeting_export_port import MeetingExportPort
from gestion_reuniones.domain.models.meeting import Meeting
from gestion_reuniones.domain.value_objects.export_format import ExportFormat
from gestion_reuniones.domain.value_objects.meeting_status import MeetingStatus


logger = logging.getLogger(__name__)

# Columnas de las exportaciones tabulares (csv, excel)
TABLE_COLUMNS = [
    "id", "title", "host_id", "status", "start_at", "end_at", "location",
    "max_participants", "is_private", "participants", "comments", "tags"
]


class MeetingExportAdapter(MeetingExportPort):
    """Adaptador de salida para exportar listados de reuniones.

    Implementa el puerto de salida MeetingExportPort. Los formatos tabulares
    se generan con pandas; JSON incluye además los comentarios y etiquetas
    completos de cada reunión.
    """

    def __init__(self):
        self.supported_formats = [f.to_string() for f in ExportFormat.get_all_formats()]

    def get_supported_formats(self) -> List[str]:
        """Obtiene la lista de formatos de exportación soportados."""
        return self.supported_formats

    def _convert_to_format_enum(self, export_format: Union[ExportFormat, str]) -> ExportFormat:
        if isinstance(export_format, ExportFormat):
            return export_format
        try:
            return ExportFormat.from_string(export_format)
        except (ValueError, AttributeError):
            raise ValueError(f"Formato no soportado: {export_format}. "
                             f"Opciones: {', '.join(self.supported_formats)}")

    def export_meetings(self,
                        meetings: List[Meeting],
                        export_format: Union[ExportFormat, str],
                        output_path: Optional[str] = None) -> str:
        """Exporta un listado de reuniones a varios formatos."""
        format_enum = self._convert_to_format_enum(export_format)

        if format_enum == ExportFormat.JSON:
            return self._export_to_json(meetings, output_path)
        elif format_enum == ExportFormat.CSV:
            return self._export_to_csv(meetings, output_path)
        elif format_enum == ExportFormat.EXCEL:
            return self._export_to_excel(meetings, output_path)
        elif format_enum == ExportFormat.TEXT:
            return self._export_to_text(meetings, output_path)

        raise NotImplementedError(f"Exportación a {format_enum.to_string()} no implementada")

    def _meeting_to_row(self, meeting: Meeting) -> Dict[str, Any]:
        """Fila plana con los datos principales de una reunión."""
        return {
            "id": str(meeting.id),
            "title": meeting.title.value,
            "host_id": str(meeting.host_id),
            "status": meeting.status.name.lower(),
            "start_at": meeting.start_at.value.isoformat(),
            "end_at": meeting.end_at.value.isoformat(),
            "location": meeting.location.formatted if meeting.location else None,
            "max_participants": meeting.max_participants,
            "is_private": meeting.is_private,
            "participants": len(meeting.participants),
            "comments": len(meeting.comments),
            "tags": ", ".join(t.text.value for t in meeting.tags)
        }

    def _meeting_to_document(self, meeting: Meeting) -> Dict[str, Any]:
        """Representación anidada de una reunión para JSON."""
        document = self._meeting_to_row(meeting)
        document["description"] = meeting.description.value
        document["participants"] = [str(p) for p in meeting.participants]
        document["tags"] = [{"id": str(t.id), "text": t.text.value} for t in meeting.tags]
        document["comments"] = [
            {
                "id": str(c.id),
                "author_id": str(c.author_id),
                "text": c.text.value,
                "created_at": c.created_at.isoformat(),
                "updated_at": c.updated_at.isoformat()
            }
            for c in meeting.comments
        ]
        if meeting.location is not None:
            document["coordinates"] = {
                "latitude": meeting.location.latitude,
                "longitude": meeting.location.longitude
            }
        return document

    def _write(self, content: str, output_path: str, format_name: str) -> str:
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(content)
        logger.info(f"Reuniones exportadas a {format_name}: {output_path}")
        return output_path

    def _export_to_json(self, meetings: List[Meeting], output_path: Optional[str] = None) -> str:
        data = {
            "meetings": [self._meeting_to_document(m) for m in meetings],
            "total": len(meetings)
        }
        json_str = json.dumps(data, indent=2, ensure_ascii=False)

        if output_path:
            return self._write(json_str, output_path, "JSON")
        return json_str

    def _to_dataframe(self, meetings: List[Meeting]) -> pd.DataFrame:
        return pd.DataFrame([self._meeting_to_row(m) for m in meetings], columns=TABLE_COLUMNS)

    def _export_to_csv(self, meetings: List[Meeting], output_path: Optional[str] = None) -> str:
        df = self._to_dataframe(meetings)

        if output_path:
            df.to_csv(output_path, index=False)
            logger.info(f"Reuniones exportadas a CSV: {output_path}")
            return output_path

        return df.to_csv(index=False)

    def _export_to_excel(self, meetings: List[Meeting], output_path: Optional[str] = None) -> str:
        if not output_path:
            raise ValueError("Se requiere una ruta de salida para exportar a Excel")

        df = self._to_dataframe(meetings)
        df.to_excel(output_path, index=False, sheet_name="Reuniones")
        logger.info(f"Reuniones exportadas a Excel: {output_path}")

        return output_path

    def _export_to_text(self, meetings: List[Meeting], output_path: Optional[str] = None) -> str:
        """Exporta las reuniones a texto legible, agrupadas por estado."""
        if not meetings:
            return "No hay reuniones para exportar"

        lines = ["Reuniones:", "-" * 40]

        for status in MeetingStatus.get_all_statuses():
            in_status = sorted((m for m in meetings if m.status == status), key=lambda m: m.start_at)
            if not in_status:
                continue

            lines.append(f"\nEstado: {status.to_string()} ({len(in_status)})")
            lines.append("-" * 40)

            for meeting in in_status:
                place = meeting.location.formatted if meeting.location else "En línea"
                privacy = " [privada]" if meeting.is_private else ""
                lines.append(f"  {meeting.start_at} - {meeting.end_at}: {meeting.title}{privacy}")
                lines.append(f"    Lugar: {place}")
                lines.append(f"    Participantes: {len(meeting.participants)}"
                             f"/{meeting.max_participants or '-'}, "
                             f"comentarios: {len(meeting.comments)}")
                if meeting.tags:
                    lines.append(f"    Etiquetas: {', '.join(t.text.value for t in meeting.tags)}")

        lines.append("\n" + "-" * 40)
        lines.append(f"Total de reuniones: {len(meetings)}")

        text = "\n".join(lines)
        if output_path:
            return self._write(text, output_path, "texto")
        return text
