"""Formato de montos para la salida de consola."""

from __future__ import annotations

import math
from decimal import Decimal


def format_amount(amount: float) -> str:
    """Representa `amount` como el display por defecto de un float.

    Sin ceros decimales sobrantes ni notación exponencial: `100.0` -> `"100"`,
    `100.5` -> `"100.5"`, `1e21` -> `"1000000000000000000000"`.
    """

    if math.isnan(amount):
        return "NaN"
    if math.isinf(amount):
        return "inf" if amount > 0 else "-inf"
    if amount == 0:
        return "-0" if math.copysign(1.0, amount) < 0 else "0"
    # repr() da el decimal más corto que reproduce el float.
    return format(Decimal(repr(float(amount))).normalize(), "f")
