from dataclasses import dataclass, field
from functools import total_ordering
from typing import List, Optional

from gestion_reuniones.domain.exceptions.meeting_error import MeetingError


APARTMENT_PREFIX = "кв. "


@total_ordering
@dataclass(frozen=True)
class MeetingLocation:
    """Dirección estructurada donde se celebra una reunión.

    La igualdad compara todos los componentes de la dirección y las
    coordenadas. El orden se establece por la dirección formateada sin
    distinguir mayúsculas de minúsculas.
    """

    country: str = field(
        metadata={"description": "País"}
    )
    latitude: float = field(
        metadata={"description": "Latitud en grados decimales, entre -90 y 90"}
    )
    longitude: float = field(
        metadata={"description": "Longitud en grados decimales, entre -180 y 180"}
    )
    region: Optional[str] = field(
        default=None,
        metadata={"description": "Región, provincia o estado"}
    )
    city: Optional[str] = field(
        default=None,
        metadata={"description": "Ciudad"}
    )
    street: Optional[str] = field(
        default=None,
        metadata={"description": "Calle"}
    )
    house_number: Optional[str] = field(
        default=None,
        metadata={"description": "Número del portal"}
    )
    apartment: Optional[str] = field(
        default=None,
        metadata={"description": "Número de piso o apartamento"}
    )
    provider_id: Optional[str] = field(
        default=None,
        metadata={
            "description": "Identificador del lugar en el proveedor externo de mapas "
                        "que resolvió la dirección"
        }
    )
    formatted: str = field(
        init=False,
        compare=False,
        metadata={"description": "Dirección legible derivada de los componentes"}
    )

    def __post_init__(self):
        if not isinstance(self.country, str) or not self.country.strip():
            raise MeetingError("El país de la ubicación no puede estar vacío.")

        self._validate_coordinate("latitud", self.latitude, 90.0)
        self._validate_coordinate("longitud", self.longitude, 180.0)

        object.__setattr__(self, "formatted", self.to_formatted(
            self.country,
            self.region,
            self.city,
            self.street,
            self.house_number,
            self.apartment
        ))

    @staticmethod
    def _validate_coordinate(name: str, value: float, limit: float) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise MeetingError(f"La {name} de la ubicación debe ser un número.")
        if not -limit <= value <= limit:
            raise MeetingError(f"La {name} de la ubicación debe estar entre {-limit:g} y {limit:g}.")

    @classmethod
    def create(cls,
               country: str,
               region: Optional[str],
               city: Optional[str],
               street: Optional[str],
               house_number: Optional[str],
               apartment: Optional[str],
               latitude: float,
               longitude: float,
               provider_id: Optional[str] = None) -> 'MeetingLocation':
        """Crea una ubicación con los componentes en el orden habitual de una dirección.

        Args:
            country: País
            region: Región (opcional)
            city: Ciudad (opcional)
            street: Calle (opcional)
            house_number: Número del portal (opcional)
            apartment: Apartamento (opcional)
            latitude: Latitud
            longitude: Longitud
            provider_id: Identificador del proveedor de mapas (opcional)

        Returns:
            Ubicación validada con su dirección formateada

        Raises:
            MeetingError: Si el país está vacío o las coordenadas están fuera de rango
        """
        return cls(
            country=country,
            latitude=latitude,
            longitude=longitude,
            region=region,
            city=city,
            street=street,
            house_number=house_number,
            apartment=apartment,
            provider_id=provider_id
        )

    @staticmethod
    def to_formatted(country: Optional[str],
                     region: Optional[str] = None,
                     city: Optional[str] = None,
                     street: Optional[str] = None,
                     house_number: Optional[str] = None,
                     apartment: Optional[str] = None) -> str:
        """Compone la dirección legible a partir de sus partes.

        Las partes en blanco se omiten y el resto se unen con ", " en el orden
        país, región, ciudad, "calle número" y "кв. apartamento".
        La parte "calle número" se recorta: una calle sin número no deja un
        espacio antes del separador ("US, Main St, кв. 5", no "US, Main St , кв. 5").

        Returns:
            Dirección formateada, sin separador final
        """
        parts: List[str] = []

        for part in (country, region, city):
            if _has_text(part):
                parts.append(part)

        if _has_text(street) or _has_text(house_number):
            parts.append(f"{street or ''} {house_number or ''}".strip())

        if _has_text(apartment):
            parts.append(f"{APARTMENT_PREFIX}{apartment}")

        return ", ".join(parts).rstrip(", ")

    def __lt__(self, other: 'MeetingLocation') -> bool:
        if not isinstance(other, MeetingLocation):
            return NotImplemented
        return self.formatted.casefold() < other.formatted.casefold()

    def __str__(self) -> str:
        return self.formatted


def _has_text(value: Optional[str]) -> bool:
    return value is not None and bool(value.strip())
