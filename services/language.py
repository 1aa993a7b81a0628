import logging
from langdetect import detect, DetectorFactory
from langdetect.lang_detect_exception import LangDetectException

from models.data import Language

logger = logging.getLogger(__name__)


class UnsupportedLanguageError(ValueError):
    """Idioma fuera del conjunto soportado (en, ru, de)."""


_ALIASES = {
    "en": Language.EN, "english": Language.EN, "inglés": Language.EN,
    "ru": Language.RU, "russian": Language.RU, "русский": Language.RU,
    "de": Language.DE, "deutsch": Language.DE, "german": Language.DE,
}


def resolve_language(value) -> Language:
    """Convierte un código o nombre de idioma en un `Language`. Sin idioma por defecto."""
    if isinstance(value, Language):
        return value
    key = (value or "").strip().lower()
    try:
        return _ALIASES[key]
    except KeyError:
        raise UnsupportedLanguageError(f"Idioma no soportado: {value!r}") from None


def detect_language(text: str) -> str:
    """Detecta el idioma del texto; cadena vacía si no se puede detectar."""
    DetectorFactory.seed = 0

    if not text or not text.strip():
        return ""

    try:
        return detect(text)
    except LangDetectException as e:
        logger.info("No se pudo detectar el idioma: %s", e)
        return ""


def is_supported(code: str) -> bool:
    return code.strip().lower() in _ALIASES
