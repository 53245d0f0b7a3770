"""Estrategia de pago: PayPal."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict
from rich.console import Console

from core.config import AppSettings
from core.domain.errors import ChargeErrorKind
from core.domain.models import ChargeOutcome
from core.formatting import format_amount
from core.output import print_plain


class PayPalAccount(BaseModel):
    """Cuenta de PayPal identificada por su email."""

    model_config = ConfigDict(frozen=True)

    email: str = Field(
        ...,
        description="Email de la cuenta (sin validar formato).",
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
            f"a través de PayPal con la cuenta {self.email}",
            console,
        )

        if not self.email:
            return ChargeOutcome.failure(ChargeErrorKind.INVALID_ACCOUNT)
        return ChargeOutcome.success()
