"""Tests del contexto de pago (`process` / `process_all`).

Por qué un método de pago falso:
- El contexto no inspecciona el tipo concreto; cualquier objeto con
  `attempt_charge` compatible sirve como estrategia.
"""

from adapters.payment_methods import CreditCard, PayPalAccount
from core.domain.errors import ChargeErrorKind
from core.domain.models import ChargeOutcome
from core.services.payment_context import outcome_line, process, process_all


class RecordingMethod:
    """Estrategia mínima que registra los montos recibidos."""

    def __init__(self, outcome: ChargeOutcome) -> None:
        self.outcome = outcome
        self.amounts: list[float] = []

    def attempt_charge(self, amount, *, console=None, settings=None):
        self.amounts.append(amount)
        return self.outcome


class TestOutcomeLine:
    def test_success(self):
        assert outcome_line(ChargeOutcome.success()) == "Pago procesado exitosamente."

    def test_failure_is_prefixed(self):
        line = outcome_line(ChargeOutcome.failure(ChargeErrorKind.EXPIRED_CARD))

        assert line == "Hubo un error al procesar el pago: La tarjeta ha expirado."


class TestProcess:
    def test_scenario_a_credit_card_success(self, out):
        card = CreditCard(number="1234-5678-9012-3456", holder_name="Juan Pérez", expiration="12/24")

        result = process(card, 100.0, console=out.console)

        assert result is None
        assert out.lines() == [
            "Procesando pago de $100 con tarjeta de crédito a nombre de Juan Pérez (vencimiento: 12/24)",
            "Pago procesado exitosamente.",
        ]

    def test_scenario_b_paypal_success(self, out):
        process(PayPalAccount(email="juan.perez@email.com"), 200.0, console=out.console)

        assert out.lines() == [
            "Procesando pago de $200 a través de PayPal con la cuenta juan.perez@email.com",
            "Pago procesado exitosamente.",
        ]

    def test_scenario_c_invalid_card(self, out):
        process(CreditCard(number="", holder_name="X", expiration="12/24"), 10.0, console=out.console)

        assert out.lines()[-1] == "Hubo un error al procesar el pago: Número de tarjeta inválido."

    def test_scenario_d_expired_card(self, out):
        process(CreditCard(number="1111", holder_name="X", expiration="01/25"), 10.0, console=out.console)

        assert out.lines()[-1] == "Hubo un error al procesar el pago: La tarjeta ha expirado."

    def test_invalid_paypal_account(self, out):
        process(PayPalAccount(email=""), 1.0, console=out.console)

        assert out.lines()[-1] == "Hubo un error al procesar el pago: Cuenta de PayPal inválida."

    def test_dispatches_to_any_compatible_strategy(self, out):
        method = RecordingMethod(ChargeOutcome.failure(ChargeErrorKind.INVALID_ACCOUNT))

        process(method, 42.0, console=out.console)

        assert method.amounts == [42.0]
        assert out.lines() == ["Hubo un error al procesar el pago: Cuenta de PayPal inválida."]

    def test_writes_to_stdout_by_default(self, capsys):
        process(PayPalAccount(email="a@b.c"), 1.0)

        captured = capsys.readouterr()
        assert captured.out.splitlines() == [
            "Procesando pago de $1 a través de PayPal con la cuenta a@b.c",
            "Pago procesado exitosamente.",
        ]


class TestProcessAll:
    def test_processes_in_order_and_returns_outcomes(self, out):
        charges = [
            (CreditCard(number="1111", holder_name="X", expiration="01/25"), 10.0),
            (PayPalAccount(email="juan.perez@email.com"), 200.0),
        ]

        outcomes = process_all(charges, console=out.console)

        assert [o.error for o in outcomes] == [ChargeErrorKind.EXPIRED_CARD, None]
        assert out.lines() == [
            "Procesando pago de $10 con tarjeta de crédito a nombre de X (vencimiento: 01/25)",
            "Hubo un error al procesar el pago: La tarjeta ha expirado.",
            "Procesando pago de $200 a través de PayPal con la cuenta juan.perez@email.com",
            "Pago procesado exitosamente.",
        ]

    def test_a_failure_does_not_stop_later_charges(self, out):
        first = RecordingMethod(ChargeOutcome.failure(ChargeErrorKind.INVALID_CARD))
        second = RecordingMethod(ChargeOutcome.success())

        outcomes = process_all([(first, 1.0), (second, 2.0)], console=out.console)

        assert [o.ok for o in outcomes] == [False, True]
        assert second.amounts == [2.0]

    def test_empty_input(self, out):
        assert process_all([], console=out.console) == []
        assert out.lines() == []


def test_user_data_reaches_the_console_unchanged(out):
    process(PayPalAccount(email=":smile:\ta@b.c"), 1.0, console=out.console)

    assert out.buffer.getvalue() == (
        "Procesando pago de $1 a través de PayPal con la cuenta :smile:\ta@b.c\n"
        "Pago procesado exitosamente.\n"
    )
