from phishguard.email_analyzer import (
    analyze_email,
    analyze_headers,
    calculate_overall_score,
    extract_urls,
    is_suspicious_url,
)
from phishguard.samples import SAMPLE_PHISHING_EMAIL


def test_sample_phishing_email_is_flagged():
    result = analyze_email(SAMPLE_PHISHING_EMAIL)

    assert "Sent via PHP mailer (commonly used in phishing)" in result.header_analysis.header_warnings
    assert result.links.suspicious >= 1
    assert result.overall_score >= 50


def test_sample_phishing_email_exact_breakdown():
    result = analyze_email(SAMPLE_PHISHING_EMAIL)
    text = result.text_analysis

    # urgent, immediate, within N hours, suspend, locked, alert
    assert text.urgency_score == 90
    # social security, credit card, password, unusual activity, security team
    assert text.fraud_tone == 60
    assert text.suspicious_patterns == [
        "URGENT", "IMMEDIATE", "WITHIN 24 HOUR", "SOCIAL SECURITY", "CREDIT CARD",
    ]
    assert text.legitimate_indicators == []

    headers = result.header_analysis
    assert (headers.spf, headers.dkim, headers.dmarc) == ("none", "none", "none")
    assert headers.suspicious_sender is True
    assert headers.header_warnings == [
        "Email routed through potentially suspicious servers",
        "Sent via PHP mailer (commonly used in phishing)",
        "Sender address matches known suspicious patterns",
    ]

    assert result.links.total == 1
    assert result.links.urls == [
        "https://bankofamerica-verify-account.suspicious-domain.com/verify?id=abc123",
    ]
    # 30 (text) + 10 (sender) + 15 (warnings) + 15 (link)
    assert result.overall_score == 70


def test_auth_results_and_domain_mismatch():
    raw = (
        "Authentication-Results: mx.example.com; spf=FAIL dkim=pass dmarc=none\n"
        "Return-Path: <bounce@mailer.example.net>\n"
        "From: Alice <alice@example.com>\n"
    )
    headers = analyze_headers(raw)

    assert headers.spf == "fail"
    assert headers.dkim == "pass"
    assert headers.dmarc == "none"
    assert headers.suspicious_sender is False
    assert headers.header_warnings == [
        "Domain mismatch: From (example.com) differs from Return-Path (mailer.example.net)",
    ]
    assert analyze_email(raw).overall_score == 15


def test_matching_return_path_is_not_a_warning():
    raw = "From: news@Example.com\nReturn-Path: <bounce@example.COM>\n"
    assert analyze_headers(raw).header_warnings == []


def test_suspicious_sender_patterns():
    assert analyze_headers("From: help@agency.ru").suspicious_sender is True
    assert analyze_headers("From: noreply@shop.com").suspicious_sender is True
    assert analyze_headers("From: 1234567@mail.com").suspicious_sender is True
    assert analyze_headers("From: support@helpdesk.com").suspicious_sender is True
    assert analyze_headers("From: support@university.edu").suspicious_sender is False
    assert analyze_headers("From: alice@example.com").suspicious_sender is False


def test_header_warning_order():
    raw = (
        "From: security@bank-alerts.com\n"
        "Return-Path: <x@other.org>\n"
        "Received: from relay.mail.cn\n"
        "X-Mailer: php-mailer 5\n"
    )
    assert analyze_headers(raw).header_warnings == [
        "Domain mismatch: From (bank-alerts.com) differs from Return-Path (other.org)",
        "Email routed through potentially suspicious servers",
        "Sent via PHP mailer (commonly used in phishing)",
        "Sender address matches known suspicious patterns",
    ]


def test_failed_authentication_adds_points():
    raw = "spf=fail dkim=fail dmarc=fail"
    result = analyze_email(raw)
    assert result.overall_score == 30


def test_links_are_deduplicated_and_only_suspicious_are_listed():
    text = "Visit https://example.com/a and https://example.com/a or http://bit.ly/x"

    assert extract_urls(text) == ["https://example.com/a", "http://bit.ly/x"]
    result = analyze_email(text)
    assert result.links.total == 2
    assert result.links.suspicious == 1
    assert result.links.urls == ["http://bit.ly/x"]
    assert result.overall_score == 15


def test_suspicious_link_score_is_capped():
    text = "http://1.2.3.4/a http://bit.ly/b http://x.tk http://a-b-c-d.com"
    result = analyze_email(text)
    assert result.links.suspicious == 4
    assert result.overall_score == 30


def test_is_suspicious_url():
    assert is_suspicious_url("http://10.0.0.1/path")
    assert is_suspicious_url("https://tinyurl.com/abc")
    assert is_suspicious_url("https://one-two-three-four.com")
    assert is_suspicious_url("https://example.com/login")
    assert is_suspicious_url("https://free.gq")
    assert not is_suspicious_url("https://example.com/about")


def test_legitimate_indicators_reduce_score_to_zero():
    text = "Click here to unsubscribe. Read our privacy policy or contact us."
    result = analyze_email(text)

    assert result.text_analysis.fraud_tone == 12
    assert result.text_analysis.legitimate_indicators == ["UNSUBSCRIBE", "PRIVACY POLICY", "CONTACT US"]
    assert result.overall_score == 0


def test_suspicious_patterns_are_capped_at_five():
    text = (
        "URGENT! Act now, this will expire. Verify your account, confirm your identity, "
        "send your credit card and password by wire transfer."
    )
    result = analyze_email(text)
    assert len(result.text_analysis.suspicious_patterns) == 5
    assert result.text_analysis.suspicious_patterns[:3] == ["URGENT", "ACT NOW", "EXPIRE"]


def test_urgency_and_fraud_are_capped_at_100():
    text = (
        "urgent immediately act now within 2 days expire suspend locked limited time "
        "don't delay asap alert warning attention"
    )
    result = analyze_email(text)
    assert result.text_analysis.urgency_score == 100


def test_overall_score_matches_components():
    result = analyze_email(SAMPLE_PHISHING_EMAIL)
    recomputed = calculate_overall_score(
        result.text_analysis, result.header_analysis, result.links.suspicious,
    )
    assert recomputed == result.overall_score


def test_empty_and_whitespace_input_yields_no_findings():
    for text in ("", "   \n\t  ", "Привет, как дела? 👋"):
        result = analyze_email(text)
        assert result.overall_score == 0
        assert result.text_analysis.suspicious_patterns == []
        assert result.header_analysis.header_warnings == []
        assert result.links.total == 0


def test_analysis_is_idempotent():
    assert analyze_email(SAMPLE_PHISHING_EMAIL) == analyze_email(SAMPLE_PHISHING_EMAIL)


def test_result_serializes_with_camel_case_keys():
    data = analyze_email(SAMPLE_PHISHING_EMAIL).model_dump(by_alias=True)

    assert data["overallScore"] == 70
    assert set(data["textAnalysis"]) == {
        "urgencyScore", "fraudTone", "suspiciousPatterns", "legitimateIndicators",
    }
    assert "headerWarnings" in data["headerAnalysis"]
    assert "suspiciousSender" in data["headerAnalysis"]


def test_patterns_use_ascii_digits_and_case_folding():
    # Arabic-Indic digits and the long s must not satisfy ASCII-only rules
    assert analyze_headers("From: ١٢٣٤٥٦@mail.com").suspicious_sender is False
    assert analyze_headers("From: ſecurity@bank.com").suspicious_sender is False
    assert analyze_email("Reply within ٢٤ hours").text_analysis.urgency_score == 0
    assert analyze_email("Reply within 24 hours").text_analysis.urgency_score == 15


def test_link_extraction_stops_at_unicode_whitespace():
    assert extract_urls("see https://example.com/a\u00a0for details") == ["https://example.com/a"]
