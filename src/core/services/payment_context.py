"""Contexto del patrón Strategy: procesar un pago.

El contexto no sabe qué método concreto recibe; solo que cumple
`PaymentMethod`. Todo resultado se resuelve aquí imprimiéndolo: un cobro
fallido nunca se propaga como excepción al llamador.
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console

from core.config import AppSettings
from core.domain.models import ChargeOutcome
from core.interfaces.payment_method import PaymentMethod
from core.output import print_plain

SUCCESS_MESSAGE = "Pago procesado exitosamente."
ERROR_PREFIX = "Hubo un error al procesar el pago: "


def outcome_line(outcome: ChargeOutcome) -> str:
    """Línea de resultado que se muestra tras cada intento de cobro."""

    if outcome.ok:
        return SUCCESS_MESSAGE
    return f"{ERROR_PREFIX}{outcome.message}"


def _charge(
    method: PaymentMethod,
    amount: float,
    *,
    console: Console | None,
    settings: AppSettings | None,
) -> ChargeOutcome:
    outcome = method.attempt_charge(amount, console=console, settings=settings)
    print_plain(outcome_line(outcome), console)
    return outcome


def process(
    method: PaymentMethod,
    amount: float,
    *,
    console: Console | None = None,
    settings: AppSettings | None = None,
) -> None:
    """Intenta cobrar `amount` con `method` e imprime el resultado."""

    _charge(method, amount, console=console, settings=settings)


def process_all(
    charges: Iterable[tuple[PaymentMethod, float]],
    *,
    console: Console | None = None,
    settings: AppSettings | None = None,
) -> list[ChargeOutcome]:
    """Procesa `(método, monto)` en orden y devuelve los resultados.

    La salida por consola es idéntica a llamar `process` para cada par; los
    resultados se devuelven para resúmenes (CLI) sin re-parsear texto.
    """

    settings = settings or AppSettings()
    return [
        _charge(method, amount, console=console, settings=settings)
        for method, amount in charges
    ]
