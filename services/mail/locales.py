"""
Textos del correo de pago fallido, uno por idioma.

Cada `LanguageLocale` se construye con los datos del pago y calcula todos
sus fragmentos en el momento: no se reutiliza entre correos.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from babel.dates import format_date

from models.data import BillingPeriod, FailedPaymentData, Language
from services.language import UnsupportedLanguageError
from services.mail.pluralize import pluralize

logger = logging.getLogger(__name__)

DEADLINE_PATTERN = "MMM dd, yyyy"


@dataclass(frozen=True)
class LanguageLocale:
    language: Language
    subject: str
    greeting: str
    unfortunately: str
    personalCustomer: str
    organizationCustomer: str
    toEnsure: str
    hRefSentence: str
    till: str
    doubleCheck: str
    creditCardReasons: List[str]
    paypalCardReasons: List[str]


def _pack_ref(ref: Optional[str]) -> str:
    return f" #{ref}" if ref else ""


def _product_names(data: FailedPaymentData) -> str:
    return ", ".join(item.productName for item in data.items)


def _deadline(data: FailedPaymentData, locale: str) -> str:
    return format_date(data.paymentDeadline, DEADLINE_PATTERN, locale=locale)


def en_locale(data: FailedPaymentData) -> LanguageLocale:
    pack = data.subscriptionPack
    subscriptions = pluralize("subscription", pack.totalLicenses, Language.EN)
    period = {
        BillingPeriod.MONTHLY: "month",
        BillingPeriod.ANNUAL: "year",
    }.get(pack.billingPeriod, "period")

    return LanguageLocale(
        language=Language.EN,
        subject="Your JetBrains payment could not be processed",
        greeting="Thank you for staying with JetBrains.",
        # "your" no se pluraliza en inglés
        unfortunately=(
            f"Unfortunately, we were not able to charge {data.cardDetails or 'your card'} for your "
        ),
        personalCustomer=(
            f"{pack.billingPeriod.name.lower()} subscription to {_product_names(data)}."
        ),
        organizationCustomer=(
            pluralize("subscription", data.total_quantity, Language.EN)
            + f" as part of Subscription Pack{_pack_ref(pack.subPackRef)} for the next {period}: "
        ),
        toEnsure=(
            f"To ensure uninterrupted access to your {subscriptions}, please "
            f"follow the link and renew your {subscriptions} "
        ),
        hRefSentence="manually",
        till=f" till {_deadline(data, 'en_US')}",
        doubleCheck=(
            "You can double-check and try your existing payment card again, use another card, "
            "or choose a different payment method."
        ),
        creditCardReasons=[
            "Common reasons for failed credit card payments include:",
            "- The card is expired, or the expiration date was entered incorrectly;",
            "- Insufficient funds or payment limit on the card; or",
            "- The card is not set up for international/overseas transactions, or the issuing "
            "bank has rejected the transaction.",
        ],
        paypalCardReasons=[
            "Please make sure that your PayPal account is not closed or deleted. "
            "The credit card connected to your PayPal account should be active. "
            "Common reasons for failed card payments include:",
            "- The card is not confirmed in your PayPal account;",
            "- The card details (Number, Expiration date, CVC, Billing address) are incomplete "
            "or were entered incorrectly;",
            "- The card is expired; or",
            "- Insufficient funds or payment limit on the card.",
        ],
    )


def ru_locale(data: FailedPaymentData) -> LanguageLocale:
    pack = data.subscriptionPack
    licenses = pack.totalLicenses
    period = {
        BillingPeriod.MONTHLY: "месяца",
        BillingPeriod.ANNUAL: "года",
    }.get(pack.billingPeriod, "периода")

    return LanguageLocale(
        language=Language.RU,
        subject="Не удалось провести платеж JetBrains",
        greeting="Спасибо, что остаетесь с JetBrains.",
        # TODO: traducir el texto por defecto "your card" al ruso
        unfortunately=(
            f"К сожалению, нам не удалось списать средства с {data.cardDetails or 'your card'} за "
            + pluralize("вашу", data.total_quantity, Language.RU)
        ),
        personalCustomer=(
            f" {pack.billingPeriod.name.lower()} подписку на {_product_names(data)}."
        ),
        organizationCustomer=(
            pluralize(" подписку", data.total_quantity, Language.RU)
            + f" как часть пакета подписки{_pack_ref(pack.subPackRef)} для следующего {period}: "
        ),
        toEnsure=(
            "Чтобы обеспечить бесперебойный доступ к "
            f"{pluralize('вашей', licenses, Language.RU)} "
            f"{pluralize('подписке', licenses, Language.RU)}, пожалуйста, "
            "перейдите по ссылке и обновите "
            f"{pluralize('свою', licenses, Language.RU)} "
            f"{pluralize('подписку', licenses, Language.RU)} "
        ),
        hRefSentence="вручную",
        till=f" до {_deadline(data, 'ru')}",
        doubleCheck=(
            "Вы можете перепроверить свою платежную карту и попробовать еще раз, "
            "использовать другую карту или выбрать другой способ оплаты."
        ),
        creditCardReasons=[
            "Распространенные причины неудачных платежей по кредитной карте:",
            "- Срок действия карты истек, либо срок годности введен неверно;",
            "- Недостаточно средств или платежного лимита на карте; или же",
            "- Карта не предназначена для международных / зарубежных транзакций, "
            "или банк-эмитент отклонил транзакцию.",
        ],
        paypalCardReasons=[
            "Убедитесь, что ваша учетная запись PayPal не закрыта и не удалена. "
            "Кредитная карта, подключенная к вашей учетной записи PayPal, должна быть активной. "
            "Распространенные причины неудачных платежей по карте:",
            "- Карта не подтверждена в вашем аккаунте PayPal;",
            "- Данные карты (Номер, Срок действия, CVC, Платежный адрес) являются неполными "
            "или были введены неверно;",
            "- Срок действия карты истек; или же",
            "- Недостаточно средств или платежного лимита на карте.",
        ],
    )


# "оahr" lleva una "о" cirílica tal como está en la tabla de producción
DE_PERIODS = {
    BillingPeriod.MONTHLY: "monate",
    BillingPeriod.ANNUAL: "оahr",
}


def de_locale(data: FailedPaymentData) -> LanguageLocale:
    pack = data.subscriptionPack
    subscriptions = pluralize("abonnement", pack.totalLicenses, Language.DE)
    period = DE_PERIODS.get(pack.billingPeriod, "zeitraum")

    return LanguageLocale(
        language=Language.DE,
        subject="Ihre JetBrains-Zahlung konnte nicht verarbeitet werden",
        greeting="Vielen Dank für Ihren Aufenthalt bei JetBrains.",
        unfortunately=(
            f"Leider konnten wir keine Mittel abschreiben{data.cardDetails or 'deine Karte'} für "
            + pluralize("Ihre", data.total_quantity, Language.DE)
        ),
        personalCustomer=(
            f" {pack.billingPeriod.name.lower()} abonnement für {_product_names(data)}."
        ),
        organizationCustomer=(
            pluralize(" abonnement", data.total_quantity, Language.DE)
            + f" als Teil eines Abonnement-Pakets{_pack_ref(pack.subPackRef)} für die nächsten {period}: "
        ),
        toEnsure=(
            f"Um einen ununterbrochenen Zugriff auf zu gewährleisten Ihre {subscriptions}, "
            f"bitte folgen Sie dem Link und aktualisiere deine {subscriptions}"
        ),
        hRefSentence="manuell",
        till=f" Vor {_deadline(data, 'de_DE')}",
        doubleCheck=(
            "Sie können Ihre Zahlungskarte überprüfen und es erneut versuchen. "
            "Verwenden Sie eine andere Karte oder wählen Sie eine andere Zahlungsmethode."
        ),
        creditCardReasons=[
            "Häufige Ursachen für fehlgeschlagene Kreditkartenzahlungen:",
            "- Die Karte ist abgelaufen oder das Ablaufdatum wurde falsch eingegeben.",
            "- Unzureichendes Guthaben oder Zahlungslimit auf der Karte; oder",
            "- Die Karte ist nicht für internationale / ausländische Transaktionen vorgesehen, "
            "oder die ausstellende Bank hat die Transaktion abgelehnt.",
        ],
        paypalCardReasons=[
            "Stellen Sie sicher, dass Ihr PayPal-Konto nicht geschlossen oder gelöscht wird. "
            "Die mit Ihrem PayPal-Konto verbundene Kreditkarte muss aktiv sein. "
            "Häufige Gründe für erfolglose Kartenzahlungen: ",
            "- Die Karte ist in Ihrem PayPal-Konto nicht verifiziert.",
            "- Die Kartendaten (Nummer, Gültigkeitsdauer, CVC, Rechnungsadresse) sind "
            "unvollständig oder wurden falsch eingegeben.",
            "- Die Karte ist abgelaufen; oder",
            "- Unzureichendes Guthaben oder Zahlungslimit auf der Karte.",
        ],
    )


def chooseLocale(language: Language, data: FailedPaymentData) -> LanguageLocale:
    """Elige los textos del idioma pedido. No hay idioma por defecto."""
    logger.debug("Construyendo textos para el idioma %s", language)
    match language:
        case Language.EN:
            return en_locale(data)
        case Language.RU:
            return ru_locale(data)
        case Language.DE:
            return de_locale(data)
        case _:
            raise UnsupportedLanguageError(f"Idioma no soportado: {language!r}")
