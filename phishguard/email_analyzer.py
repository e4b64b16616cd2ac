# phishguard/email_analyzer.py
import logging
import math

from . import patterns
from .schemas import AnalysisResult, HeaderAnalysis, LinkAnalysis, TextAnalysis

logger = logging.getLogger(__name__)

URGENCY_WEIGHT = 15
FRAUD_WEIGHT = 12
MAX_LABELS_PER_GROUP = 3
MAX_SUSPICIOUS_PATTERNS = 5


def _matched_labels(text: str, pattern_list) -> list:
    """Возвращает подписи (совпавший фрагмент в верхнем регистре) для каждого сработавшего паттерна."""
    labels = []
    for pattern in pattern_list:
        match = pattern.search(text)
        if match and match.group(0):
            labels.append(match.group(0).upper())
    return labels


def _auth_status(text: str, name: str) -> str:
    match = patterns.AUTH_RESULT_PATTERNS[name].search(text)
    return match.group(1).lower() if match else "none"


def _extract_domain(value: str, domain_pattern) -> str:
    if not value:
        return ""
    match = domain_pattern.search(value)
    return match.group(1).lower() if match else ""


def analyze_headers(email: str) -> HeaderAnalysis:
    """Эвристика заголовков: SPF/DKIM/DMARC, отправитель, From/Return-Path, маршрут, X-Mailer."""
    from_match = patterns.FROM_PATTERN.search(email)
    from_address = from_match.group(1) if from_match else ""

    suspicious_sender = any(p.search(from_address) for p in patterns.SUSPICIOUS_SENDER_PATTERNS)

    warnings = []

    from_domain = _extract_domain(from_address, patterns.ADDRESS_DOMAIN_PATTERN)
    return_path_match = patterns.RETURN_PATH_PATTERN.search(email)
    rp_domain = ""
    if return_path_match:
        rp_domain = _extract_domain(return_path_match.group(1), patterns.RETURN_PATH_DOMAIN_PATTERN)

    if from_domain and rp_domain and from_domain != rp_domain:
        warnings.append(f"Domain mismatch: From ({from_domain}) differs from Return-Path ({rp_domain})")

    if patterns.SUSPICIOUS_RECEIVED_PATTERN.search(email):
        warnings.append("Email routed through potentially suspicious servers")

    if patterns.PHP_MAILER_PATTERN.search(email):
        warnings.append("Sent via PHP mailer (commonly used in phishing)")

    if suspicious_sender:
        warnings.append("Sender address matches known suspicious patterns")

    return HeaderAnalysis(
        spf=_auth_status(email, "spf"),
        dkim=_auth_status(email, "dkim"),
        dmarc=_auth_status(email, "dmarc"),
        suspicious_sender=suspicious_sender,
        header_warnings=warnings,
    )


def extract_urls(text: str) -> list:
    """Все http(s)-ссылки из текста без повторов, в порядке появления."""
    return list(dict.fromkeys(patterns.LINK_PATTERN.findall(text)))


def is_suspicious_url(url: str) -> bool:
    return any(p.search(url) for p in patterns.SUSPICIOUS_LINK_PATTERNS)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_overall_score(text_analysis: TextAnalysis, header_analysis: HeaderAnalysis,
                            suspicious_links: int) -> int:
    """
    Линейная сумма весов:
    текст до 40, провалы SPF/DKIM/DMARC до 30, ссылки до 30,
    минус 5 за каждый признак легитимной рассылки.
    """
    score = (text_analysis.urgency_score + text_analysis.fraud_tone) * 0.2

    for status in (header_analysis.spf, header_analysis.dkim, header_analysis.dmarc):
        if status == "fail":
            score += 10
    if header_analysis.suspicious_sender:
        score += 10
    score += len(header_analysis.header_warnings) * 5

    if suspicious_links > 0:
        score += min(30, suspicious_links * 15)

    score -= len(text_analysis.legitimate_indicators) * 5

    return max(0, min(100, _round_half_up(score)))


def analyze_email(email: str) -> AnalysisResult:
    """Анализирует текст письма (заголовки + тело) и возвращает оценку риска 0-100."""
    urgency_labels = _matched_labels(email, patterns.URGENCY_PATTERNS)
    fraud_labels = _matched_labels(email, patterns.FRAUD_PATTERNS)

    suspicious_patterns = (
        urgency_labels[:MAX_LABELS_PER_GROUP] + fraud_labels[:MAX_LABELS_PER_GROUP]
    )[:MAX_SUSPICIOUS_PATTERNS]

    text_analysis = TextAnalysis(
        urgency_score=min(100, len(urgency_labels) * URGENCY_WEIGHT),
        fraud_tone=min(100, len(fraud_labels) * FRAUD_WEIGHT),
        suspicious_patterns=suspicious_patterns,
        legitimate_indicators=_matched_labels(email, patterns.LEGITIMATE_INDICATORS),
    )

    header_analysis = analyze_headers(email)

    urls = extract_urls(email)
    suspicious_urls = [u for u in urls if is_suspicious_url(u)]

    overall_score = calculate_overall_score(text_analysis, header_analysis, len(suspicious_urls))
    logger.debug("Email analyzed: score=%d, links=%d/%d, header warnings=%d",
                 overall_score, len(suspicious_urls), len(urls), len(header_analysis.header_warnings))

    return AnalysisResult(
        text_analysis=text_analysis,
        header_analysis=header_analysis,
        links=LinkAnalysis(total=len(urls), suspicious=len(suspicious_urls), urls=suspicious_urls),
        overall_score=overall_score,
    )
