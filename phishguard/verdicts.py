# phishguard/verdicts.py

THREAT_THRESHOLD = 50

STRENGTH_LABELS = {
    "very-weak": "Very Weak",
    "weak": "Weak",
    "fair": "Fair",
    "strong": "Strong",
    "very-strong": "Very Strong",
}


def threat_verdict(score: int) -> str:
    """Итоговый вердикт по оценке риска: всё, что выше 50, считается угрозой."""
    if score <= THREAT_THRESHOLD:
        return "No Threat Detected"
    return "Threat Detected"


def strength_label(strength: str) -> str:
    return STRENGTH_LABELS[strength]
