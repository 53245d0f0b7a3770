"""Errores de cobro del dominio.

Cada variante lleva como valor el mensaje literal que ve el usuario, de modo
que el texto de consola no cambia aunque el llamador use el enum.
"""

from __future__ import annotations

from enum import Enum


class ChargeErrorKind(str, Enum):
    """Motivos por los que un intento de cobro puede fallar."""

    INVALID_CARD = "Número de tarjeta inválido."
    EXPIRED_CARD = "La tarjeta ha expirado."
    INVALID_ACCOUNT = "Cuenta de PayPal inválida."

    @property
    def message(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value
