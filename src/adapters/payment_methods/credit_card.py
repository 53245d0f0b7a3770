"""Estrategia de pago: tarjeta de crédito.

Simulación:
- No hay pasarela real; solo se validan el número (no vacío) y el vencimiento.
- El vencimiento se compara como texto contra el "mes actual" simulado de
  `AppSettings.simulated_current_expiration` (por defecto `"12/24"`).
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict
from rich.console import Console

from core.config import AppSettings
from core.domain.errors import ChargeErrorKind
from core.domain.models import ChargeOutcome
from core.formatting import format_amount
from core.output import print_plain


class CreditCard(BaseModel):
    """Tarjeta de crédito usada como estrategia de pago."""

    model_config = ConfigDict(frozen=True)

    number: str = Field(
        ...,
        description="Número de tarjeta (texto libre, sin validar formato).",
    )
    holder_name: str = Field(
        ...,
        description="Nombre del titular tal como figura en la tarjeta.",
    )
    expiration: str = Field(
        ...,
        description="Vencimiento en formato MM/YY.",
    )

    def attempt_charge(
        self,
        amount: float,
        *,
        console: Console | None = None,
        settings: AppSettings | None = None,
    ) -> ChargeOutcome:
        settings = settings or AppSettings()

        print_plain(
            f"Procesando pago de {settings.currency_symbol}{format_amount(amount)} "
            f"con tarjeta de crédito a nombre de {self.holder_name} "
            f"(vencimiento: {self.expiration})",
            console,
        )

        if not self.number:
            return ChargeOutcome.failure(ChargeErrorKind.INVALID_CARD)
        if self.expiration != settings.simulated_current_expiration:
            return ChargeOutcome.failure(ChargeErrorKind.EXPIRED_CARD)
        return ChargeOutcome.success()
