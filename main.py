import logging
from fastapi import FastAPI, HTTPException

from services.language import UnsupportedLanguageError, detect_language, is_supported
from services.mail.generateBody import generateBody
from settings import settings

from models.data import languageOutput, mailInput, mailOutput

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("failed_payment_mail")

app = FastAPI(
    title="Correo de pago fallido",
    version="1.0.0",
    description="Genera el cuerpo localizado (en, ru, de) del correo de pago fallido.",
)

@app.get("/health")
def health():
    return {"status": "ok"}

@app.post("/detect-language", response_model=languageOutput)
async def detect(string: str | None = ""):
    """Detecta el idioma del texto e indica si hay plantilla para él."""
    lang = detect_language(string or "")
    return {"language": lang, "supported": bool(lang) and is_supported(lang)}

@app.post("/generateFailedPaymentMail", response_model=mailOutput)
async def generate_mail(input: mailInput):
    """Genera el correo de pago fallido en el idioma pedido."""
    try:
        body, subject = generateBody(input.data, input.language)
        return {"email_body": body, "email_subject": subject}
    except UnsupportedLanguageError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    except Exception as e:
        logger.exception("Error generando correo")
        raise HTTPException(status_code=500, detail=f"Error generando correo: {e}")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", port=8000, reload=True)
