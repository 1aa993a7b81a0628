from datetime import date
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Optional

class Language(str, Enum):
    EN = "en"
    RU = "ru"
    DE = "de"

class CustomerType(str, Enum):
    PERSONAL = "PERSONAL"
    ORGANIZATION = "ORGANIZATION"

class CardProvider(str, Enum):
    CREDIT_CARD = "CREDIT_CARD"
    PAY_PAL = "PAY_PAL"

class BillingPeriod(str, Enum):
    MONTHLY = "MONTHLY"
    ANNUAL = "ANNUAL"
    OTHER = "OTHER"

class Item(BaseModel):
    model_config = ConfigDict(frozen=True)

    quantity: int = Field(gt=0)
    productName: str
    description: str

    @model_validator(mode="before")
    @classmethod
    def default_description(cls, values):
        # La descripción cae en el nombre del producto si no viene informada
        if isinstance(values, dict) and not values.get("description"):
            values = {**values, "description": values.get("productName")}
        return values

class SubscriptionPack(BaseModel):
    model_config = ConfigDict(frozen=True)

    billingPeriod: BillingPeriod
    totalLicenses: int = Field(gt=0)
    subPackRef: Optional[str] = None

class FailedPaymentData(BaseModel):
    model_config = ConfigDict(frozen=True)

    customerType: CustomerType
    cardProvider: CardProvider
    cardDetails: Optional[str] = None
    items: List[Item] = Field(min_length=1)
    subscriptionPack: SubscriptionPack
    paymentDeadline: date

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)

class mailInput(BaseModel):
    language: str
    data: FailedPaymentData

class mailOutput(BaseModel):
    email_body: str
    email_subject: str

class languageOutput(BaseModel):
    language: str
    supported: bool
