"""Contrato de métodos de pago (la "estrategia").

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Los métodos concretos son modelos Pydantic; heredar de un Protocol y de
  `BaseModel` a la vez choca en la metaclase, así que basta con cumplir la
  forma del contrato.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from core.domain.models import ChargeOutcome

if TYPE_CHECKING:
    from rich.console import Console

    from core.config import AppSettings


@runtime_checkable
class PaymentMethod(Protocol):
    """Contrato mínimo de una estrategia de pago.

    Reglas de diseño:
    - `attempt_charge` es síncrono: no hay I/O real, solo una simulación.
    - Un fallo se devuelve como valor (`ChargeOutcome`), nunca como excepción.
    - `console`/`settings` son opcionales; sin ellos se usan la consola del
      proceso y `AppSettings()`.
    """

    def attempt_charge(
        self,
        amount: float,
        *,
        console: Console | None = None,
        settings: AppSettings | None = None,
    ) -> ChargeOutcome:
        """Intenta cobrar `amount` y devuelve el resultado del intento."""

        ...
