import pytest

from phishguard.verdicts import strength_label, threat_verdict


@pytest.mark.parametrize("score, verdict", [
    (0, "No Threat Detected"),
    (50, "No Threat Detected"),
    (51, "Threat Detected"),
    (100, "Threat Detected"),
])
def test_threat_verdict(score, verdict):
    assert threat_verdict(score) == verdict


def test_strength_label():
    assert strength_label("very-weak") == "Very Weak"
    assert strength_label("fair") == "Fair"
    assert strength_label("very-strong") == "Very Strong"
