# phishguard/samples.py

# Демонстрационные входные данные: типичное фишинговое письмо и URL

SAMPLE_PHISHING_EMAIL = """From: security-alert@bankofamerica-secure.net
To: customer@email.com
Subject: URGENT: Your Account Has Been Compromised - Immediate Action Required!
Date: Mon, 15 Jan 2024 03:42:17 -0500
X-Mailer: PHP/7.4.3
Received: from unknown (HELO mail.suspicious-server.ru) (185.234.xx.xx)

Dear Valued Customer,

We have detected UNUSUAL ACTIVITY on your Bank of America account. Your account has been TEMPORARILY SUSPENDED due to suspicious login attempts.

⚠️ IMMEDIATE ACTION REQUIRED ⚠️

Click the link below within 24 HOURS or your account will be PERMANENTLY LOCKED:

https://bankofamerica-verify-account.suspicious-domain.com/verify?id=abc123

You must verify your:
- Social Security Number
- Account Password
- Credit Card Details
- Mother's Maiden Name

This is an automated security measure. Failure to comply will result in account termination.

Sincerely,
Bank of America Security Team
DO NOT REPLY TO THIS EMAIL"""

SAMPLE_PHISHING_URL = "http://bankofamerica-secure-login.suspicious-domain.xyz/verify?id=12345&account=confirm"
