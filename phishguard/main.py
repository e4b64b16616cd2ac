# phishguard/main.py

import logging
from dotenv import load_dotenv  # 1. Импорт

load_dotenv()  # 2. Загрузка ДО импортов модулей!

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from . import __version__, config
from .email_analyzer import analyze_email
from .password_analyzer import analyze_password
from .samples import SAMPLE_PHISHING_EMAIL, SAMPLE_PHISHING_URL
from .schemas import (
    EmailReport, EmailRequest, PasswordReport, PasswordRequest,
    SamplesResponse, UrlReport, UrlRequest,
)
from .url_analyzer import analyze_url
from .verdicts import strength_label, threat_verdict

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(
    title="PhishGuard API",
    description="API для эвристической оценки писем, URL и паролей.",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.post("/analyze/email", response_model=EmailReport)
def analyze_email_request(request: EmailRequest):
    """Анализ текста письма (заголовки + тело)."""
    if not request.text.strip():
        raise HTTPException(status_code=400, detail="Необходимо предоставить текст письма для анализа.")

    result = analyze_email(request.text)
    verdict = threat_verdict(result.overall_score)
    logger.info("Email analysis: score=%d, verdict=%s", result.overall_score, verdict)
    return EmailReport(**result.model_dump(), verdict=verdict)


@app.post("/analyze/url", response_model=UrlReport)
def analyze_url_request(request: UrlRequest):
    """Анализ URL без сетевых запросов."""
    if not request.url.strip():
        raise HTTPException(status_code=400, detail="Необходимо предоставить URL для анализа.")

    result = analyze_url(request.url)
    verdict = threat_verdict(result.overall_score)
    logger.info("URL analysis: domain=%s, score=%d, verdict=%s", result.domain, result.overall_score, verdict)
    return UrlReport(**result.model_dump(), verdict=verdict)


@app.post("/analyze/password", response_model=PasswordReport)
def analyze_password_request(request: PasswordRequest):
    """Оценка стойкости пароля. Пароль нигде не сохраняется и не логируется."""
    if not request.password:
        raise HTTPException(status_code=400, detail="Необходимо предоставить пароль для анализа.")

    result = analyze_password(request.password)
    return PasswordReport(**result.model_dump(), strength_label=strength_label(result.strength))


@app.get("/samples", response_model=SamplesResponse)
def samples():
    return SamplesResponse(email=SAMPLE_PHISHING_EMAIL, url=SAMPLE_PHISHING_URL)


@app.get("/")
def read_root():
    return {"message": "PhishGuard Analyzer is running."}
