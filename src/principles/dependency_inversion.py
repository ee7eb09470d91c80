"""Dependency Inversion Principle (DIP).

High-level modules should not depend on low-level implementations but on
abstractions. The violating checkout is typed against one concrete payment
class; the compliant checkout only knows the `PaymentMethod` capability.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from adapters.console_output import default_output
from core.config import AppSettings
from core.domain.principle import Principle
from core.interfaces.demonstration import Demonstration
from core.interfaces.output import Output


# Violation ------------------------------------------------------------------


class PaymentViaCreditCard:
    def __init__(self, output: Output) -> None:
        self._output = output

    def payment(self) -> None:
        self._output.emit("Payment through credit card")


class PaymentViaDebitCard:
    def __init__(self, output: Output) -> None:
        self._output = output

    def payment(self) -> None:
        self._output.emit("Payment through debit card")


class PaymentViaOnlineBanking:
    def __init__(self, output: Output) -> None:
        self._output = output

    def payment(self) -> None:
        self._output.emit("Payment through online banking")


class CheckOut:
    """Checkout bound to the concrete `PaymentViaCreditCard`.

    Switching to a debit card or online banking means editing this signature.
    """

    def check_out(self, payment_via_credit_card: PaymentViaCreditCard) -> None:
        payment_via_credit_card.payment()


# Compliant ------------------------------------------------------------------


@runtime_checkable
class PaymentMethod(Protocol):
    """Anything that can perform a payment."""

    def pay(self) -> None:
        ...


class CreditCardPayment(PaymentMethod):
    def __init__(self, output: Output) -> None:
        self._output = output

    def pay(self) -> None:
        self._output.emit("Payment done using credit card")


class DebitCardPayment(PaymentMethod):
    def __init__(self, output: Output) -> None:
        self._output = output

    def pay(self) -> None:
        self._output.emit("Payment done using debit card")


class OnlineBankingPayment(PaymentMethod):
    def __init__(self, output: Output) -> None:
        self._output = output

    def pay(self) -> None:
        self._output.emit("Payment done using online banking")


class CheckOutPayment:
    """Checkout depending only on the `PaymentMethod` abstraction."""

    def check_out(self, payment_method: PaymentMethod) -> None:
        payment_method.pay()


class DependencyInversionDemo(Demonstration):
    principle = Principle.DEPENDENCY_INVERSION
    title = "Dependency Inversion"
    summary = "Checkout depends on a PaymentMethod abstraction, not on a card class."

    def run_violation(self, output: Output, settings: AppSettings) -> None:
        CheckOut().check_out(PaymentViaCreditCard(output))

    def run_compliant(self, output: Output, settings: AppSettings) -> None:
        checkout = CheckOutPayment()
        for method in (
            CreditCardPayment(output),
            DebitCardPayment(output),
            OnlineBankingPayment(output),
        ):
            checkout.check_out(method)


def main() -> None:
    CheckOutPayment().check_out(DebitCardPayment(default_output()))


if __name__ == "__main__":
    main()
