# tests/test_dependency_inversion.py
"""Tests for the Dependency Inversion demonstration."""

from __future__ import annotations

import pytest

from principles.dependency_inversion import (
    CheckOut,
    CheckOutPayment,
    CreditCardPayment,
    DebitCardPayment,
    DependencyInversionDemo,
    OnlineBankingPayment,
    PaymentMethod,
    PaymentViaCreditCard,
    main,
)


@pytest.mark.parametrize(
    "method_cls, expected",
    [
        (CreditCardPayment, "Payment done using credit card"),
        (DebitCardPayment, "Payment done using debit card"),
        (OnlineBankingPayment, "Payment done using online banking"),
    ],
)
def test_checkout_calls_only_the_supplied_method(recorder, method_cls, expected):
    CheckOutPayment().check_out(method_cls(recorder))

    assert recorder.lines == [expected]


def test_every_compliant_variant_is_a_payment_method(recorder):
    for method in (CreditCardPayment(recorder), DebitCardPayment(recorder), OnlineBankingPayment(recorder)):
        assert isinstance(method, PaymentMethod)


def test_checkout_never_inspects_concrete_type(recorder):
    """Any object with `pay()` works, even one the checkout has never seen."""

    class VoucherPayment:
        def pay(self) -> None:
            recorder.emit("Payment done using voucher")

    CheckOutPayment().check_out(VoucherPayment())

    assert recorder.lines == ["Payment done using voucher"]


def test_violating_checkout_is_bound_to_credit_card(recorder):
    CheckOut().check_out(PaymentViaCreditCard(recorder))

    assert recorder.lines == ["Payment through credit card"]
    assert CheckOut.check_out.__annotations__["payment_via_credit_card"] == "PaymentViaCreditCard"


def test_demo_runs_every_method_in_order(recorder, settings):
    DependencyInversionDemo().run_compliant(recorder, settings)

    assert recorder.lines == [
        "Payment done using credit card",
        "Payment done using debit card",
        "Payment done using online banking",
    ]


def test_main_pays_with_debit_card(capsys):
    main()

    assert capsys.readouterr().out.splitlines() == ["Payment done using debit card"]
