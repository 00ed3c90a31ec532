from dataclasses import dataclass, field
from typing import ClassVar, Union
from uuid import UUID, uuid4

from gestion_reuniones.domain.exceptions.meeting_error import MeetingError


@dataclass(frozen=True, order=True)
class EntityId:
    """Identificador opaco de 128 bits compartido por todas las entidades.

    Acepta un UUID o su representación en cadena. El UUID nulo se rechaza
    porque no identifica nada.
    """

    LABEL: ClassVar[str] = "El id de la entidad"

    value: UUID = field(
        metadata={"description": "UUID que identifica a la entidad"}
    )

    def __post_init__(self):
        value = self.value
        if value is None or (isinstance(value, str) and not value.strip()):
            raise MeetingError(f"{self.LABEL} no puede estar vacío.")
        if isinstance(value, str):
            try:
                value = UUID(value.strip())
            except ValueError:
                raise MeetingError(f"{self.LABEL} '{self.value}' no es un UUID válido.")
        if not isinstance(value, UUID):
            raise MeetingError(f"{self.LABEL} '{self.value}' no es un UUID válido.")
        if value.int == 0:
            raise MeetingError(f"{self.LABEL} no puede estar vacío.")
        # frozen: la normalización se hace antes de exponer el objeto
        object.__setattr__(self, "value", value)

    @classmethod
    def from_value(cls, value: Union["EntityId", UUID, str]) -> "EntityId":
        """Construye el identificador a partir de un valor primitivo o de otro identificador.

        Args:
            value: UUID, cadena con un UUID o una instancia de la misma clase.
                Un identificador de otro tipo de entidad se rechaza.

        Returns:
            Instancia validada de la clase concreta

        Raises:
            MeetingError: Si el valor está vacío, no es un UUID válido o es otro tipo de id
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, EntityId):
            raise MeetingError(f"{cls.LABEL} no puede tomarse de un {type(value).__name__}.")
        return cls(value)

    @classmethod
    def generate(cls) -> "EntityId":
        """Genera un identificador nuevo (uuid4)."""
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.value)
