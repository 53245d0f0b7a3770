"""Comandos de la CLI.

- `pagos` / `pagos demo`: procesa las dos estrategias de ejemplo.
- `pagos tarjeta ...` / `pagos paypal ...`: procesa un único cobro.

Sin instalar, desde `src/`: `python -m cli.main`.

Un cobro fallido es un resultado impreso, no un error: el código de salida
es siempre 0.
"""

from __future__ import annotations

import sys
from typing import Optional

import typer

from adapters.payment_methods import CreditCard, PayPalAccount
from cli.ui_components import build_outcomes_table, print_banner
from core.config import AppSettings
from core.formatting import format_amount
from core.interfaces.payment_method import PaymentMethod
from core.output import get_console
from core.services.payment_context import process, process_all

app = typer.Typer(
    help="Procesamiento de pagos simulado (patrón Strategy).",
    add_completion=False,
)


def demo_charges() -> list[tuple[str, PaymentMethod, float]]:
    """Estrategias concretas de ejemplo: `(etiqueta, método, monto)`."""

    tarjeta = CreditCard(
        number="1234-5678-9012-3456",
        holder_name="Juan Pérez",
        expiration="12/24",
    )
    paypal = PayPalAccount(email="juan.perez@email.com")
    return [
        ("Tarjeta de crédito", tarjeta, 100.0),
        ("PayPal", paypal, 200.0),
    ]


def _run_demo(settings: AppSettings, *, resumen: bool) -> None:
    console = get_console()
    charges = demo_charges()
    outcomes = process_all(
        ((method, amount) for _, method, amount in charges),
        console=console,
        settings=settings,
    )
    if resumen:
        rows = [
            (label, f"{settings.currency_symbol}{format_amount(amount)}", outcome)
            for (label, _, amount), outcome in zip(charges, outcomes)
        ]
        console.print(build_outcomes_table(rows))


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    banner: Optional[bool] = typer.Option(
        None,
        "--banner/--no-banner",
        help="Mostrar el banner antes de procesar (por defecto: PAGOS_SHOW_BANNER).",
    ),
) -> None:
    """Sin subcomando, ejecuta la demo."""

    settings = AppSettings()
    ctx.obj = settings

    show_banner = settings.show_banner if banner is None else banner
    if show_banner:
        print_banner(get_console())

    if ctx.invoked_subcommand is None:
        _run_demo(settings, resumen=False)


@app.command()
def demo(
    ctx: typer.Context,
    resumen: bool = typer.Option(False, "--resumen", help="Mostrar una tabla resumen al final."),
) -> None:
    """Procesa una tarjeta de crédito ($100) y una cuenta PayPal ($200)."""

    _run_demo(ctx.obj, resumen=resumen)


@app.command()
def tarjeta(
    ctx: typer.Context,
    numero: str = typer.Option(..., "--numero", help="Número de tarjeta."),
    titular: str = typer.Option(..., "--titular", help="Nombre del titular."),
    vencimiento: str = typer.Option(..., "--vencimiento", help="Vencimiento (MM/YY)."),
    monto: float = typer.Option(..., "--monto", help="Monto a cobrar."),
) -> None:
    """Procesa un cobro con tarjeta de crédito."""

    card = CreditCard(number=numero, holder_name=titular, expiration=vencimiento)
    process(card, monto, console=get_console(), settings=ctx.obj)


@app.command()
def paypal(
    ctx: typer.Context,
    email: str = typer.Option(..., "--email", help="Email de la cuenta PayPal."),
    monto: float = typer.Option(..., "--monto", help="Monto a cobrar."),
) -> None:
    """Procesa un cobro con PayPal."""

    account = PayPalAccount(email=email)
    process(account, monto, console=get_console(), settings=ctx.obj)


def run() -> None:
    # Los mensajes llevan acentos (é, ú); en Windows la consola suele ser cp1252.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    app()


if __name__ == "__main__":
    run()
