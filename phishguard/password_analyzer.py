# phishguard/password_analyzer.py
import logging
import math

from . import patterns
from .schemas import PasswordAnalysisResult, PasswordCheck, PasswordChecks

logger = logging.getLogger(__name__)

# Баллы за проверки (отрицательные - штраф за провал)
CHECK_WEIGHTS = {
    'length_long': 20,       # 12+ символов
    'length_medium': 10,     # 8-11 символов
    'uppercase': 15,
    'lowercase': 15,
    'numbers': 15,
    'special': 20,
    'no_common': 10,
    'common_penalty': -30,   # содержит популярный пароль
    'no_repeating': 5,
    'repeating_penalty': -10,
}

STRENGTH_BANDS = (
    (85, "very-strong"),
    (70, "strong"),
    (50, "fair"),
    (30, "weak"),
)

# (проверка, сообщение при успехе, сообщение при провале, совет) - в порядке объявления
CHECK_MESSAGES = (
    ("length", "12+ characters", "Less than 12 characters",
     "Use at least 12 characters for better security"),
    ("uppercase", "Has uppercase letters", "No uppercase letters",
     "Add uppercase letters (A-Z)"),
    ("lowercase", "Has lowercase letters", "No lowercase letters",
     "Add lowercase letters (a-z)"),
    ("numbers", "Contains numbers", "No numbers",
     "Include numbers (0-9)"),
    ("special", "Has special characters", "No special characters",
     "Add special characters (!@#$%^&*)"),
    ("no_common", "Not a common password", "Contains common password pattern",
     "Avoid common passwords and dictionary words"),
    ("no_repeating", "No repeating characters", "Has repeating characters",
     "Avoid repeating characters (aaa, 111)"),
)

GUESSES_PER_SECOND = 10 ** 10
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
SECONDS_PER_YEAR = 31536000


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def strength_for_score(score: int) -> str:
    for lower_bound, strength in STRENGTH_BANDS:
        if score >= lower_bound:
            return strength
    return "very-weak"


def _utf16_units(password: str) -> list:
    """Пароль как UTF-16 единицы: эмодзи занимает две, как в браузерных счётчиках длины."""
    raw = password.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(raw[i:i + 2], "little") for i in range(0, len(raw), 2)]


def password_length(password: str) -> int:
    return len(password.encode("utf-16-le", "surrogatepass")) // 2


def has_repeating_characters(password: str) -> bool:
    """Есть ли одна и та же UTF-16 единица 3+ раза подряд (aaa, 111)."""
    run = 0
    previous = None
    for unit in _utf16_units(password):
        if unit in patterns.LINE_TERMINATORS:
            run, previous = 0, None
            continue
        run = run + 1 if unit == previous else 1
        previous = unit
        if run >= patterns.MIN_REPEAT_RUN:
            return True
    return False


def charset_size(password: str) -> int:
    size = 0
    if patterns.LOWERCASE_PATTERN.search(password):
        size += 26
    if patterns.UPPERCASE_PATTERN.search(password):
        size += 26
    if patterns.DIGIT_PATTERN.search(password):
        size += 10
    if patterns.SPECIAL_PATTERN.search(password):
        size += 32
    return size


def estimate_crack_time(password: str) -> str:
    """
    Оценка полного перебора: charset^length комбинаций, 10^10 попыток в секунду,
    в среднем нужна половина пространства.
    """
    size = charset_size(password)
    if size == 0:
        return "Instantly"

    combinations = size ** password_length(password)
    # Считаем в целых числах: для длинных паролей float переполнится
    if combinations >= 2 * GUESSES_PER_SECOND * SECONDS_PER_YEAR * 1_000_000:
        return "Millions of years"

    seconds = combinations / GUESSES_PER_SECOND / 2

    if seconds < 1:
        return "Instantly"
    if seconds < SECONDS_PER_MINUTE:
        return f"{_round_half_up(seconds)} seconds"
    if seconds < SECONDS_PER_HOUR:
        return f"{_round_half_up(seconds / SECONDS_PER_MINUTE)} minutes"
    if seconds < SECONDS_PER_DAY:
        return f"{_round_half_up(seconds / SECONDS_PER_HOUR)} hours"
    if seconds < SECONDS_PER_YEAR:
        return f"{_round_half_up(seconds / SECONDS_PER_DAY)} days"
    if seconds < SECONDS_PER_YEAR * 100:
        return f"{_round_half_up(seconds / SECONDS_PER_YEAR)} years"
    return f"{_round_half_up(seconds / SECONDS_PER_YEAR / 1000)} thousand years"


def analyze_password(password: str) -> PasswordAnalysisResult:
    """Оценивает стойкость пароля по 7 проверкам и даёт советы по непройденным."""
    length = password_length(password)
    lowered = password.lower()
    passed = {
        'length': length >= 12,
        'uppercase': bool(patterns.UPPERCASE_PATTERN.search(password)),
        'lowercase': bool(patterns.LOWERCASE_PATTERN.search(password)),
        'numbers': bool(patterns.DIGIT_PATTERN.search(password)),
        'special': bool(patterns.SPECIAL_PATTERN.search(password)),
        'no_common': not any(common in lowered for common in patterns.COMMON_PASSWORDS),
        'no_repeating': not has_repeating_characters(password),
    }

    score = 0
    if passed['length']:
        score += CHECK_WEIGHTS['length_long']
    elif length >= 8:
        score += CHECK_WEIGHTS['length_medium']
    for name in ('uppercase', 'lowercase', 'numbers', 'special'):
        if passed[name]:
            score += CHECK_WEIGHTS[name]
    score += CHECK_WEIGHTS['no_common'] if passed['no_common'] else CHECK_WEIGHTS['common_penalty']
    score += CHECK_WEIGHTS['no_repeating'] if passed['no_repeating'] else CHECK_WEIGHTS['repeating_penalty']
    score = max(0, min(100, score))

    checks = {}
    suggestions = []
    for name, ok_message, fail_message, suggestion in CHECK_MESSAGES:
        checks[name] = PasswordCheck(passed=passed[name], message=ok_message if passed[name] else fail_message)
        if not passed[name]:
            suggestions.append(suggestion)

    strength = strength_for_score(score)
    # Сам пароль в лог не пишем
    logger.debug("Password analyzed: length=%d, score=%d, strength=%s", length, score, strength)

    return PasswordAnalysisResult(
        score=score,
        strength=strength,
        checks=PasswordChecks(**checks),
        suggestions=suggestions,
        crack_time=estimate_crack_time(password),
    )
