# phishguard/schemas.py

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Literal, Optional

AuthStatus = Literal["pass", "fail", "none"]
CheckStatus = Literal["safe", "warning", "danger"]
Strength = Literal["very-weak", "weak", "fair", "strong", "very-strong"]


class ResultModel(BaseModel):
    """
    База для результатов анализа: неизменяемые значения,
    в JSON поля отдаются в camelCase (overallScore, textAnalysis, ...).
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# --- Email ---

class TextAnalysis(ResultModel):
    urgency_score: int
    fraud_tone: int
    suspicious_patterns: List[str]
    legitimate_indicators: List[str]


class HeaderAnalysis(ResultModel):
    spf: AuthStatus = "none"
    dkim: AuthStatus = "none"
    dmarc: AuthStatus = "none"
    suspicious_sender: bool = False
    header_warnings: List[str] = []


class LinkAnalysis(ResultModel):
    total: int
    suspicious: int
    urls: List[str]


class AnalysisResult(ResultModel):
    """Полный результат анализа письма."""
    text_analysis: TextAnalysis
    header_analysis: HeaderAnalysis
    links: LinkAnalysis
    overall_score: int


# --- URL ---

class CheckResult(ResultModel):
    """Результат одной конкретной проверки URL."""
    name: str
    status: CheckStatus
    description: str


class UrlDetails(ResultModel):
    protocol: str
    is_https: bool
    has_ip_address: bool
    is_url_shortener: bool
    suspicious_tld: bool
    typosquatting: Optional[str]
    excessive_subdomains: bool
    suspicious_keywords: List[str]
    encoded_characters: bool
    unusual_port: bool


class UrlAnalysisResult(ResultModel):
    """Полный отчет по URL: проверки идут в фиксированном порядке."""
    url: str
    domain: str
    overall_score: int
    checks: List[CheckResult]
    warnings: List[str]
    details: UrlDetails


# --- Пароль ---

class PasswordCheck(ResultModel):
    passed: bool
    message: str


class PasswordChecks(ResultModel):
    length: PasswordCheck
    uppercase: PasswordCheck
    lowercase: PasswordCheck
    numbers: PasswordCheck
    special: PasswordCheck
    no_common: PasswordCheck
    no_repeating: PasswordCheck


class PasswordAnalysisResult(ResultModel):
    score: int
    strength: Strength
    checks: PasswordChecks
    suggestions: List[str]
    crack_time: str


# --- API ---

class EmailRequest(BaseModel):
    """Запрос на анализ письма (заголовки + тело одним текстом)."""
    text: str


class UrlRequest(BaseModel):
    url: str


class PasswordRequest(BaseModel):
    password: str


class EmailReport(AnalysisResult):
    """Результат анализа письма с итоговым вердиктом."""
    verdict: str


class UrlReport(UrlAnalysisResult):
    verdict: str


class PasswordReport(PasswordAnalysisResult):
    strength_label: str


class SamplesResponse(BaseModel):
    email: str
    url: str
