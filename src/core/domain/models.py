"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Modelos inmutables (`frozen`) con igualdad por campos, sin escribir
  `__eq__`/`__hash__` a mano.
- El dominio no conoce la consola ni la CLI: solo el resultado de un cobro.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.errors import ChargeErrorKind


class ChargeOutcome(BaseModel):
    """Resultado de un intento de cobro: éxito o fallo con motivo."""

    model_config = ConfigDict(frozen=True)

    error: ChargeErrorKind | None = Field(
        default=None,
        description="Motivo del fallo; `None` si el cobro fue exitoso.",
    )

    @classmethod
    def success(cls) -> "ChargeOutcome":
        return cls()

    @classmethod
    def failure(cls, error: ChargeErrorKind) -> "ChargeOutcome":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str | None:
        """Mensaje legible del fallo (o `None` en caso de éxito)."""

        return None if self.error is None else self.error.message
