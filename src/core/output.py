"""Salida de texto plano por consola (Rich).

Por qué un helper:
- Los mensajes llevan datos del usuario (nombres, emails) que deben salir
  tal cual. El render de Rich (`Console.print`/`Console.out`) pasa por `Text`:
  sustituye códigos `:emoji:`, expande tabuladores y elimina caracteres de
  control, así que aquí se escribe directo sobre `console.file`.
- La consola sigue siendo la de Rich para que tablas/paneles de la CLI y estas
  líneas compartan destino (stdout, archivo de test, etc.).
"""

from __future__ import annotations

from rich.console import Console

_console = Console()


def get_console() -> Console:
    return _console


def print_plain(text: str, console: Console | None = None) -> None:
    """Imprime `text` byte a byte, seguido de un salto de línea."""

    file = (console or _console).file
    file.write(f"{text}\n")
    file.flush()
