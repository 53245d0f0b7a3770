"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Mantiene el Core libre de tablas/paneles: el contexto solo imprime texto plano.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import ChargeOutcome


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué opcional:
    - La salida por defecto es exactamente dos líneas por pago; el banner
      solo aparece con `--banner` o `PAGOS_SHOW_BANNER=true`.
    """

    title = Text("Estrategia de Pagos", style="bold cyan")
    subtitle = Text("Patrón Strategy • Tarjeta de crédito • PayPal", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_outcomes_table(rows: Iterable[tuple[str, str, ChargeOutcome]]) -> Table:
    """Tabla resumen con `(método, monto, resultado)` por cada cobro."""

    table = Table(title="Resumen de pagos")
    table.add_column("Método", style="cyan", no_wrap=True)
    table.add_column("Monto", style="white", justify="right")
    table.add_column("Estado", style="green")
    table.add_column("Error", style="red")

    for label, amount, outcome in rows:
        table.add_row(
            Text(label),
            Text(amount),
            "OK" if outcome.ok else "FALLO",
            Text(outcome.message or ""),
        )
    return table
