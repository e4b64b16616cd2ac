# phishguard/patterns.py
import re

# Общие таблицы паттернов для всех трёх анализаторов.
# Компилируются один раз при импорте и никогда не изменяются.

# Регистронезависимость только для ASCII: "ſ" не должна совпадать с "s"
_I = re.IGNORECASE | re.ASCII

# Пробельные символы (с ASCII-флагом \s их не покрывает)
_WS = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

# === Письма: срочность ===
URGENCY_PATTERNS = tuple(re.compile(p, _I) for p in (
    r"urgent",
    r"immediate(ly)?",
    r"act now",
    r"within [0-9]+ (hour|day)",
    r"expire",
    r"suspend",
    r"locked",
    r"limited time",
    r"don't delay",
    r"asap",
    r"alert",
    r"warning",
    r"attention",
))

# === Письма: мошеннические формулировки ===
FRAUD_PATTERNS = tuple(re.compile(p, _I) for p in (
    r"verify (your )?(account|identity|password)",
    r"confirm (your )?(account|identity|information)",
    r"social security",
    r"credit card",
    r"bank account",
    r"password",
    r"click (here|below|this link)",
    r"update (your )?payment",
    r"unusual activity",
    r"security (alert|notice|team)",
    r"won|winner|lottery|prize",
    r"inheritance",
    r"million (dollar|usd)",
    r"wire transfer",
))

# Адрес отправителя: спам-зоны, noreply, "security"/"support" вне .gov/.edu, много цифр
SUSPICIOUS_SENDER_PATTERNS = tuple(re.compile(p, _I) for p in (
    r"@.*\.(ru|cn|ng|in)$",
    r"noreply@",
    r"security.*@(?!.*\.(gov|edu))",
    r"support.*@(?!.*\.(gov|edu))",
    r"[0-9]{5,}@",
))

# Признаки легитимной рассылки
LEGITIMATE_INDICATORS = tuple(re.compile(p, _I) for p in (
    r"unsubscribe",
    r"privacy policy",
    r"terms of service",
    r"physical address",
    r"contact us",
))

# === Письма: заголовки ===
AUTH_RESULT_PATTERNS = {
    "spf": re.compile(r"spf=(pass|fail|none)", _I),
    "dkim": re.compile(r"dkim=(pass|fail|none)", _I),
    "dmarc": re.compile(r"dmarc=(pass|fail|none)", _I),
}
FROM_PATTERN = re.compile(r"from:[" + _WS + r"]*([^\r\n]+)", _I)
ADDRESS_DOMAIN_PATTERN = re.compile(r"@([^" + _WS + r">]+)")
RETURN_PATH_PATTERN = re.compile(r"return-path:[" + _WS + r"]*<([^>]+)>", _I)
RETURN_PATH_DOMAIN_PATTERN = re.compile(r"@([^\r\n]+)")
SUSPICIOUS_RECEIVED_PATTERN = re.compile(r"received:[^\r\n]*\.(ru|cn|ng)", _I)
PHP_MAILER_PATTERN = re.compile(r"x-mailer:[^\r\n]*php", _I)

# === Письма: ссылки ===
LINK_PATTERN = re.compile(r"https?://[^" + _WS + r"<>\"{}|\\^`\[\]]+", _I)
SUSPICIOUS_LINK_PATTERNS = (
    re.compile(r"[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}"),
    re.compile(r"bit\.ly|tinyurl|goo\.gl|t\.co", _I),
    re.compile(r"-.*-.*-"),
    re.compile(r"login|verify|secure|account|update", _I),
    re.compile(r"\.(xyz|tk|ml|ga|cf|gq)$", _I),
)

# === URL ===
IPV4_PATTERN = re.compile(r"[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}")
PERCENT_ENCODED_PATTERN = re.compile(r"%[0-9a-fA-F]{2}")

URL_SHORTENERS = (
    "bit.ly", "tinyurl.com", "goo.gl", "t.co", "ow.ly", "is.gd", "buff.ly",
    "adf.ly", "j.mp", "tr.im", "cli.gs", "short.to", "budurl.com", "ping.fm",
    "post.ly", "just.as", "bkite.com", "snipr.com", "fic.kr", "loopt.us",
    "doiop.com", "twitthis.com", "htxt.it", "ak.im", "yep.it", "posted.at",
    "bit.do", "cutt.ly", "rb.gy", "shorturl.at",
)

# Бесплатные/дешёвые TLD, популярные у фишеров
SUSPICIOUS_TLDS = (
    ".xyz", ".tk", ".ml", ".ga", ".cf", ".gq", ".top", ".work", ".click",
    ".link", ".info", ".online", ".site", ".website", ".space", ".pw",
    ".cc", ".buzz", ".rest", ".fit", ".life", ".live", ".mom", ".lol",
    ".surf", ".icu", ".monster", ".cam",
)

# Бренды и их "опечатки" (замена символов). Порядок важен: первый совпавший бренд побеждает.
TARGET_BRANDS = {
    "google": ("g00gle", "googl", "gooogle", "googie", "g0ogle", "qoogle"),
    "facebook": ("faceb00k", "facebok", "faceboook", "fecebook", "facbook"),
    "amazon": ("amaz0n", "amazn", "amazone", "amazonn", "arnazon"),
    "paypal": ("paypa1", "paypai", "paypol", "poypal"),
    "microsoft": ("micros0ft", "microsofl", "mircosoft", "microsft"),
    "apple": ("app1e", "appie", "applle", "aple", "aaple"),
    "netflix": ("netf1ix", "netfiix", "nettflix"),
    "instagram": ("1nstagram", "instagran", "instgram", "lnstagram"),
    "twitter": ("tw1tter", "twtter", "tvvitter", "twltter"),
    "linkedin": ("linked1n", "linkdin", "linkedln", "linkeden"),
    "dropbox": ("dr0pbox", "dropb0x", "drpbox", "dropbax"),
    "chase": ("chas3", "chasse", "chasee", "chace"),
    "wellsfargo": ("we11sfargo", "wellsfarg0", "welsfargo"),
    "bankofamerica": ("bank0famerica", "bankofamer1ca", "bankofamerlca"),
    "citibank": ("c1tibank", "citibenk", "citlbank"),
}

# Бренд + приманка, например "paypal-secure" или "mypaypal"
BRAND_AFFIX_TEMPLATES = (
    "{brand}-secure", "{brand}-login", "{brand}-verify",
    "{brand}security", "{brand}support", "secure{brand}",
    "login{brand}", "my{brand}", "{brand}account",
)

PHISHING_KEYWORDS = (
    "login", "signin", "sign-in", "account", "verify", "verification",
    "secure", "security", "update", "confirm", "password", "credential",
    "banking", "wallet", "suspend", "locked", "urgent", "alert",
    "authenticate", "validation", "recover", "restore", "unlock",
    "webscr", "customer", "client", "support", "service", "helpdesk",
)

STANDARD_PORTS = frozenset({80, 443, 8080, 8443})

# === Пароли ===
COMMON_PASSWORDS = (
    "password", "123456", "12345678", "qwerty", "abc123", "monkey", "1234567",
    "letmein", "trustno1", "dragon", "baseball", "iloveyou", "master", "sunshine",
    "ashley", "bailey", "shadow", "123123", "654321", "superman", "qazwsx",
    "michael", "football", "password1", "password123", "welcome", "jesus", "ninja",
    "mustang", "password1234", "admin", "admin123", "root", "toor", "pass", "test",
)

UPPERCASE_PATTERN = re.compile(r"[A-Z]")
LOWERCASE_PATTERN = re.compile(r"[a-z]")
DIGIT_PATTERN = re.compile(r"[0-9]")
SPECIAL_PATTERN = re.compile(r"""[!@#$%^&*()_+\-=\[\]{};':"\\|,.<>/?`~]""")

# Повтор символа считается по UTF-16 единицам; переводы строк в повтор не входят
LINE_TERMINATORS = frozenset({0x0A, 0x0D, 0x2028, 0x2029})
MIN_REPEAT_RUN = 3
