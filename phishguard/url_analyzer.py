# phishguard/url_analyzer.py
import logging
from typing import NamedTuple, Optional
from urllib.parse import ParseResult, urlparse

from . import patterns
from .schemas import CheckResult, UrlAnalysisResult, UrlDetails

logger = logging.getLogger(__name__)

KEYWORD_WEIGHT = 8
MAX_LISTED_KEYWORDS = 3
MAX_DOMAIN_LABELS = 4
MAX_ENCODED_SEQUENCES = 3


class Finding(NamedTuple):
    """Проверка + сколько баллов она добавила + предупреждение для пользователя."""
    check: CheckResult
    points: int = 0
    warning: Optional[str] = None


def _safe(name: str, description: str) -> Finding:
    return Finding(CheckResult(name=name, status="safe", description=description))


def normalize_url(raw: str) -> str:
    """Добавляет https://, если схема не указана."""
    url = raw.strip()
    return url if url.startswith("http") else f"https://{url}"


def _unify_slashes(full_url: str) -> str:
    """Для http(s) браузер читает "\\" как "/": https://evil.xyz\\@paypal.com ведёт на evil.xyz."""
    scheme, sep, rest = full_url.partition(":")
    if sep and scheme.lower() in ("http", "https"):
        return scheme + sep + rest.replace("\\", "/")
    return full_url


def _parse(full_url: str) -> Optional[ParseResult]:
    """Разбирает URL. None, если хост не определён или порт не число/вне диапазона."""
    try:
        parsed = urlparse(_unify_slashes(full_url))
        host = parsed.hostname
        parsed.port  # ValueError для ":abc" и ":99999"
    except ValueError:
        return None
    if not host or any(ch.isspace() for ch in host):
        return None
    return parsed


def is_url_shortener(domain: str) -> bool:
    return any(domain == s or domain.endswith("." + s) for s in patterns.URL_SHORTENERS)


def has_suspicious_tld(domain: str) -> bool:
    return domain.endswith(patterns.SUSPICIOUS_TLDS)


def _is_brand_domain(domain: str, brand: str) -> bool:
    own = f"{brand}.com"
    return domain == own or domain.endswith("." + own)


def detect_typosquatting(domain: str) -> Optional[str]:
    """Ищет подмену символов в имени бренда или бренд с "приманкой" (paypal-secure). Первый бренд побеждает."""
    for brand, typos in patterns.TARGET_BRANDS.items():
        # "googl" входит в "google.com", поэтому собственный домен бренда пропускаем целиком
        if _is_brand_domain(domain, brand):
            continue

        if any(typo in domain for typo in typos):
            return f'Possible typosquatting of "{brand}"'

        if brand in domain:
            for template in patterns.BRAND_AFFIX_TEMPLATES:
                if template.format(brand=brand) in domain:
                    return f'Suspicious use of "{brand}" brand name'
    return None


def find_suspicious_keywords(url: str) -> list:
    url_lower = url.lower()
    return [kw for kw in patterns.PHISHING_KEYWORDS if kw in url_lower]


def check_protocol(is_https: bool) -> Finding:
    if is_https:
        return _safe("HTTPS Protocol", "Uses secure HTTPS connection")
    return Finding(
        CheckResult(name="HTTPS Protocol", status="danger", description="Not using secure HTTPS connection"),
        15, "Website does not use HTTPS encryption",
    )


def check_ip_address(domain: str) -> Finding:
    if patterns.IPV4_PATTERN.search(domain):
        return Finding(
            CheckResult(name="IP Address URL", status="danger",
                        description="URL contains IP address instead of domain"),
            25, "Legitimate sites rarely use IP addresses in URLs",
        )
    return _safe("IP Address URL", "Uses proper domain name")


def check_shortener(domain: str) -> Finding:
    if is_url_shortener(domain):
        return Finding(
            CheckResult(name="URL Shortener", status="warning", description="Uses URL shortening service"),
            20, "URL shorteners can hide malicious destinations",
        )
    return _safe("URL Shortener", "Not a shortened URL")


def check_tld(domain: str) -> Finding:
    if has_suspicious_tld(domain):
        return Finding(
            CheckResult(name="Domain Extension", status="warning", description="Uses suspicious top-level domain"),
            15, "This domain extension is commonly used in phishing",
        )
    return _safe("Domain Extension", "Uses common top-level domain")


def check_brand_impersonation(typosquatting: Optional[str]) -> Finding:
    if typosquatting:
        return Finding(
            CheckResult(name="Brand Impersonation", status="danger", description=typosquatting),
            30, typosquatting,
        )
    return _safe("Brand Impersonation", "No obvious brand impersonation detected")


def check_subdomains(domain: str) -> Finding:
    if len(domain.split(".")) > MAX_DOMAIN_LABELS:
        return Finding(
            CheckResult(name="Subdomain Structure", status="warning", description="Excessive subdomains detected"),
            10, "Too many subdomains can indicate phishing",
        )
    return _safe("Subdomain Structure", "Normal subdomain structure")


def check_keywords(keywords: list) -> Finding:
    if not keywords:
        return _safe("Suspicious Keywords", "No phishing keywords detected")
    return Finding(
        CheckResult(
            name="Suspicious Keywords",
            status="danger" if len(keywords) >= 2 else "warning",
            description=f"Found: {', '.join(keywords[:MAX_LISTED_KEYWORDS])}",
        ),
        len(keywords) * KEYWORD_WEIGHT,
        f"URL contains phishing-related keywords: {', '.join(keywords)}",
    )


def check_encoding(url: str) -> Finding:
    if len(patterns.PERCENT_ENCODED_PATTERN.findall(url)) > MAX_ENCODED_SEQUENCES:
        return Finding(
            CheckResult(name="URL Encoding", status="warning", description="Excessive URL encoding detected"),
            10, "Excessive encoding may hide malicious content",
        )
    return _safe("URL Encoding", "Normal URL encoding")


def check_port(port: Optional[int]) -> Optional[Finding]:
    """Нестандартный порт. В отличие от остальных проверок, "safe" не выдаётся."""
    if port is None or port in patterns.STANDARD_PORTS:
        return None
    return Finding(
        CheckResult(name="Port Number", status="warning", description="Uses unusual port number"),
        10, "Unusual port numbers can indicate phishing",
    )


def analyze_url(raw_url: str) -> UrlAnalysisResult:
    """Офлайн-эвристики для URL: протокол, IP, сокращатели, TLD, бренды, субдомены, слова, кодирование, порт."""
    url = raw_url.strip()
    full_url = normalize_url(url)
    parsed = _parse(full_url)

    if parsed is None:
        logger.debug("Could not parse URL %r, falling back to raw input", url)
        protocol, domain = "unknown", url.lower()
    else:
        protocol, domain = parsed.scheme, parsed.hostname
    is_https = protocol == "https"

    typosquatting = detect_typosquatting(domain)
    keywords = find_suspicious_keywords(full_url)

    ip_res = check_ip_address(domain)
    shortener_res = check_shortener(domain)
    tld_res = check_tld(domain)
    subdomain_res = check_subdomains(domain)
    encoding_res = check_encoding(full_url)
    port_res = check_port(parsed.port if parsed else None)

    findings = [
        check_protocol(is_https),
        ip_res,
        shortener_res,
        tld_res,
        check_brand_impersonation(typosquatting),
        subdomain_res,
        check_keywords(keywords),
        encoding_res,
    ]
    if port_res:
        findings.append(port_res)

    score = sum(f.points for f in findings)
    overall_score = max(0, min(100, score))
    logger.debug("URL analyzed: domain=%s, score=%d", domain, overall_score)

    return UrlAnalysisResult(
        url=full_url,
        domain=domain,
        overall_score=overall_score,
        checks=[f.check for f in findings],
        warnings=[f.warning for f in findings if f.warning],
        details=UrlDetails(
            protocol=protocol,
            is_https=is_https,
            has_ip_address=ip_res.points > 0,
            is_url_shortener=shortener_res.points > 0,
            suspicious_tld=tld_res.points > 0,
            typosquatting=typosquatting,
            excessive_subdomains=subdomain_res.points > 0,
            suspicious_keywords=keywords,
            encoded_characters=encoding_res.points > 0,
            unusual_port=port_res is not None,
        ),
    )
