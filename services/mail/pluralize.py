from models.data import Language
from services.language import UnsupportedLanguageError

# Formas irregulares que usan las plantillas rusas
RU_PLURALS = {
    "вашу": "ваши",
    "вашей": "вашим",
    "подписке": "подпискам",
}


def pluralize(word: str, count: int, language: Language) -> str:
    """
    Devuelve `word` en plural salvo que `count` sea exactamente 1.
    Cualquier otro valor (también 0 o negativos) se trata como plural.
    """
    if count == 1:
        return word

    match language:
        case Language.EN | Language.DE:
            return f"{word}s"
        case Language.RU:
            if word in RU_PLURALS:
                return RU_PLURALS[word]
            return f"{word[:-1]}и"
        case _:
            raise UnsupportedLanguageError(f"Idioma no soportado: {language!r}")
