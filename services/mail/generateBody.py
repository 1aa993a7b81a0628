import logging
from typing import List, Optional

from models.data import CardProvider, CustomerType, FailedPaymentData, Language
from services.language import resolve_language
from services.mail.locales import LanguageLocale, chooseLocale
from services.mail.renderHtml import LineBreak, Link, Paragraph, Text, render_html
from settings import settings

logger = logging.getLogger(__name__)


def greeting(locale: LanguageLocale) -> Paragraph:
    return [Text(locale.greeting)]


def problemDescription(locale: LanguageLocale, data: FailedPaymentData) -> Paragraph:
    paragraph: Paragraph = [Text(locale.unfortunately)]
    if data.customerType == CustomerType.PERSONAL:
        paragraph.append(Text(locale.personalCustomer))
    else:
        paragraph += [Text(locale.organizationCustomer), LineBreak()]
        for item in data.items:
            paragraph += [Text(f"- {item.quantity} x {item.description}"), LineBreak()]
    return paragraph


def creditCardFailedPaymentReasons(locale: LanguageLocale) -> Paragraph:
    paragraph: Paragraph = []
    for reason in locale.creditCardReasons:
        paragraph += [Text(reason), LineBreak()]
    return paragraph


def paypalFailedPaymentReasons(locale: LanguageLocale) -> Paragraph:
    # La última razón va sin salto de línea
    paragraph: Paragraph = []
    for reason in locale.paypalCardReasons[:-1]:
        paragraph += [Text(reason), LineBreak()]
    paragraph.append(Text(locale.paypalCardReasons[-1]))
    return paragraph


def subRenew(locale: LanguageLocale, renew_url: str) -> Paragraph:
    return [Text(locale.toEnsure), Link(renew_url, locale.hRefSentence), Text(locale.till)]


def checkAndTry(locale: LanguageLocale) -> Paragraph:
    return [Text(locale.doubleCheck)]


def buildContent(
    data: FailedPaymentData, locale: LanguageLocale, renew_url: str
) -> List[Paragraph]:
    """Ordena los bloques del cuerpo del correo."""
    if data.cardProvider == CardProvider.PAY_PAL:
        reasons = paypalFailedPaymentReasons(locale)
    else:
        reasons = creditCardFailedPaymentReasons(locale)

    return [
        greeting(locale),
        problemDescription(locale, data),
        reasons,
        subRenew(locale, renew_url),
        checkAndTry(locale),
    ]


def generateBody(
    data: FailedPaymentData, idioma: Language | str, renew_url: Optional[str] = None
):
    """Genera el cuerpo HTML y el asunto del correo de pago fallido."""
    language = resolve_language(idioma)
    locale = chooseLocale(language, data)
    logger.debug(
        "Generando correo %s para cliente %s con %s",
        language.value, data.customerType.value, data.cardProvider.value,
    )

    body = render_html(buildContent(data, locale, renew_url or settings.RENEW_URL))
    return body, locale.subject
