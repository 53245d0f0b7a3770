"""Configuración compartida de los tests.

Por qué un conftest raíz:
- Aísla `AppSettings` del entorno del desarrollador (env vars, `.env`).
- Ofrece una consola Rich en memoria para comparar la salida exacta.
"""

from __future__ import annotations

import io
import os

import pytest
from rich.console import Console


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Evita que `AppSettings` lea variables `PAGOS_*` o archivos `.env` reales."""

    for key in list(os.environ):
        if key.upper().startswith("PAGOS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)


class BufferConsole:
    """Consola Rich que escribe en memoria, con helpers para leer lo impreso."""

    def __init__(self) -> None:
        self.buffer = io.StringIO()
        self.console = Console(file=self.buffer, color_system=None, width=60)

    def lines(self) -> list[str]:
        return self.buffer.getvalue().splitlines()


@pytest.fixture
def out() -> BufferConsole:
    return BufferConsole()
