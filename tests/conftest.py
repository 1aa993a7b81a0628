from datetime import date

import pytest

from models.data import FailedPaymentData


def _make_data(**overrides) -> FailedPaymentData:
    payload = {
        "customerType": "PERSONAL",
        "cardProvider": "CREDIT_CARD",
        "cardDetails": None,
        "items": [{"quantity": 1, "productName": "AppCode"}],
        "subscriptionPack": {"billingPeriod": "ANNUAL", "totalLicenses": 1},
        "paymentDeadline": date(2026, 11, 1),
    }
    payload.update(overrides)
    return FailedPaymentData.model_validate(payload)


@pytest.fixture
def personal_data():
    return _make_data()


@pytest.fixture
def organization_data():
    return _make_data(
        customerType="ORGANIZATION",
        cardProvider="PAY_PAL",
        cardDetails="Visa **** 4242",
        items=[
            {"quantity": 2, "productName": "IntelliJ IDEA", "description": "IntelliJ IDEA Ultimate"},
            {"quantity": 3, "productName": "PyCharm"},
        ],
        subscriptionPack={"billingPeriod": "MONTHLY", "totalLicenses": 5, "subPackRef": "42"},
    )


@pytest.fixture
def make_data():
    return _make_data
