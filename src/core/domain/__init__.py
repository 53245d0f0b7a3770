"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras e inmutables (Pydantic v2).
- El dominio no conoce la CLI ni la consola: solo conceptos del problema.
"""

from core.domain.errors import ChargeErrorKind
from core.domain.models import ChargeOutcome

__all__ = ["ChargeErrorKind", "ChargeOutcome"]
