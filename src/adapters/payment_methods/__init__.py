"""Métodos de pago (estrategias concretas).

Por qué un paquete:
- Agrupa un módulo por método de pago.
- Cada módulo cumple `core.interfaces.payment_method.PaymentMethod`.
"""

from adapters.payment_methods.credit_card import CreditCard
from adapters.payment_methods.paypal import PayPalAccount

__all__ = [
	"CreditCard",
	"PayPalAccount",
]
