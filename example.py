#!/usr/bin/env python
"""
Ejemplo de uso del dominio de gestión de reuniones.

Este script genera reuniones de demostración, recorre el ciclo de vida
completo de una reunión nueva a través del caso de uso de gestión y exporta
el resultado en texto y CSV.
"""

import os
import logging
import sys
from datetime import datetime, timedelta, timezone

from gestion_reuniones.domain.exceptions.meeting_error import MeetingError
from gestion_reuniones.domain.value_objects.meeting_location import MeetingLocation
from gestion_reuniones.domain.value_objects.participant_id import ParticipantId
from gestion_reuniones.application.usecases.setup_demo_data_usecase import SetupDemoDataUseCase
from gestion_reuniones.application.usecases.meeting_management_usecase import MeetingManagementUseCase
from gestion_reuniones.infrastructure.adapters.output.meeting_export_adapter import MeetingExportAdapter


def main():
    """Función principal del ejemplo."""
    # 1. Configurar logging básico antes de iniciar cualquier componente
    os.makedirs('./assets/logs', exist_ok=True)
    os.makedirs('./assets/exports', exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler("./assets/logs/gestion-reuniones.log"),
            logging.StreamHandler(sys.stdout)
        ]
    )
    logger = logging.getLogger(__name__)
    logger.info("Iniciando ejemplo de gestión de reuniones")

    # 2. Poblar un repositorio con reuniones de demostración
    demo_data_usecase = SetupDemoDataUseCase()
    config = demo_data_usecase.get_default_config()
    config["SEED"] = 42
    meeting_repo = demo_data_usecase.setup_demo_data(config)

    # 3. Crear el caso de uso de gestión sobre ese repositorio
    meetings = MeetingManagementUseCase(meeting_repository=meeting_repo)
    export_adapter = MeetingExportAdapter()

    # 4. Recorrer el ciclo de vida de una reunión nueva
    host = ParticipantId.generate()
    guest = ParticipantId.generate()
    start_at = datetime.now(timezone.utc) + timedelta(days=1)

    meeting = meetings.create_meeting(
        host_id=host.value,
        title="Quarterly Planning",
        description="Revisión de objetivos del próximo trimestre.",
        start_at=start_at,
        end_at=start_at + timedelta(hours=2)
    )
    meetings.add_information(
        meeting.id.value,
        location=MeetingLocation.create("US", None, "Austin", "Main St", "12", None, 30.2672, -97.7431),
        max_participants=8,
        is_private=False
    )
    meetings.join_meeting(meeting.id.value, guest.value)
    meetings.add_comment(meeting.id.value, guest.value, "Llevaré las métricas del trimestre.")
    meetings.add_tag(meeting.id.value, "planificacion")

    # Un borrador no puede cancelarse: el dominio lo rechaza
    try:
        meetings.change_status(meeting.id.value, "cancelled")
    except MeetingError as e:
        logger.warning(f"Transición rechazada: {e}")

    for status in ("scheduled", "ongoing", "finished"):
        meetings.change_status(meeting.id.value, status)

    # 5. Exportar
    all_meetings = meetings.list_meetings()
    print(export_adapter.export_meetings(all_meetings, "text"))
    export_adapter.export_meetings(all_meetings, "csv", "./assets/exports/reuniones.csv")

    logger.info("Ejemplo completado con éxito.")


if __name__ == "__main__":
    main()
