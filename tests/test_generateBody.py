from models.data import Language
from services.mail.generateBody import buildContent, generateBody
from services.mail.locales import chooseLocale
from services.mail.renderHtml import LineBreak, Link, Text

RENEW_URL = "https://foo.bar/ex"


def _texts(paragraph):
    return [node.text for node in paragraph if isinstance(node, Text)]


def test_blocks_are_ordered(personal_data):
    locale = chooseLocale(Language.EN, personal_data)
    paragraphs = buildContent(personal_data, locale, RENEW_URL)
    assert len(paragraphs) == 5
    assert _texts(paragraphs[0]) == [locale.greeting]
    assert _texts(paragraphs[4]) == [locale.doubleCheck]
    assert paragraphs[3] == [
        Text(locale.toEnsure),
        Link(RENEW_URL, "manually"),
        Text(locale.till),
    ]


def test_personal_customer_has_no_item_listing(personal_data):
    locale = chooseLocale(Language.EN, personal_data)
    problem = buildContent(personal_data, locale, RENEW_URL)[1]
    assert problem == [Text(locale.unfortunately), Text(locale.personalCustomer)]


def test_organization_lists_every_item(organization_data):
    locale = chooseLocale(Language.EN, organization_data)
    problem = buildContent(organization_data, locale, RENEW_URL)[1]
    assert problem == [
        Text(locale.unfortunately),
        Text(locale.organizationCustomer),
        LineBreak(),
        Text("- 2 x IntelliJ IDEA Ultimate"),
        LineBreak(),
        Text("- 3 x PyCharm"),
        LineBreak(),
    ]


def test_paypal_reasons_last_line_has_no_break(organization_data):
    locale = chooseLocale(Language.DE, organization_data)
    reasons = buildContent(organization_data, locale, RENEW_URL)[2]
    assert reasons[-1] == Text(locale.paypalCardReasons[-1])
    assert reasons.count(LineBreak()) == len(locale.paypalCardReasons) - 1


def test_credit_card_reasons_all_lines_have_break(personal_data):
    locale = chooseLocale(Language.RU, personal_data)
    reasons = buildContent(personal_data, locale, RENEW_URL)[2]
    assert reasons[-1] == LineBreak()
    assert reasons.count(LineBreak()) == len(locale.creditCardReasons)
    assert _texts(reasons) == locale.creditCardReasons


def test_end_to_end_english_personal(personal_data):
    body, subject = generateBody(personal_data, Language.EN)
    assert subject == "Your JetBrains payment could not be processed"
    assert (
        "<p>Unfortunately, we were not able to charge your card for your "
        "annual subscription to AppCode.</p>"
    ) in body
    assert "- 1 x" not in body
    assert '<a href="https://foo.bar/ex">manually</a> till Nov 01, 2026</p>' in body
    assert body.startswith("<html><body><p>Thank you for staying with JetBrains.</p>")


def test_paypal_html_breaks(organization_data):
    body, _ = generateBody(organization_data, "en")
    assert "- The card is expired; or<br>- Insufficient funds or payment limit on the card.</p>" in body
    assert "<br>- 3 x PyCharm<br></p>" in body


def test_render_is_idempotent(organization_data):
    for language in Language:
        assert generateBody(organization_data, language) == generateBody(organization_data, language)


def test_custom_renew_url_and_escaping(make_data):
    data = make_data(items=[{"quantity": 1, "productName": "Rider & dotUltimate"}])
    body, _ = generateBody(data, "de", renew_url="https://example.com/renew")
    assert '<a href="https://example.com/renew">manuell</a>' in body
    assert "Rider &amp; dotUltimate" in body
