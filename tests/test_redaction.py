"""
Redaction tests: sensitive parameter keys are masked to asterisks of the
same length, everything else is stored as its string form.
"""

import re

import pytest

from lineagegate.redaction import Redactor, redact_parameters


@pytest.mark.parametrize("key", ["DB_PASSWORD", "password", "jdbc.Password.value", "PassWordHint"])
def test_password_keys_are_masked(key):
    assert Redactor().redact(key, "secret12") == "********"


def test_mask_length_follows_string_form():
    assert Redactor().redact("pin_password", 12345) == "*****"


def test_plain_keys_use_string_form():
    redactor = Redactor()

    assert redactor.redact("batchSize", 1000) == "1000"
    assert redactor.redact("enabled", True) == "True"
    assert redactor.redact("url", "jdbc:x") == "jdbc:x"


def test_none_sensitive_value_masks_to_empty():
    assert Redactor().redact("DB_PASSWORD", None) == ""


def test_none_plain_value_keeps_string_form():
    redactor = Redactor()

    assert redactor.redact("batchSize", None) == str(None)
    assert redactor.redact("batchSize", None) != redactor.redact("batchSize", "")


def test_empty_sensitive_value_masks_to_empty():
    assert Redactor().redact("DB_PASSWORD", "") == ""


def test_custom_matchers_replace_default():
    redactor = Redactor(["secret", re.compile(r"^token$", re.IGNORECASE)])

    assert redactor.redact("AWS_SECRET_KEY", "abcd") == "****"
    assert redactor.redact("TOKEN", "xyz") == "***"
    assert redactor.redact("my_token_name", "xyz") == "xyz"
    assert redactor.redact("DB_PASSWORD", "pw") == "pw"


def test_empty_matcher_list_masks_nothing():
    assert Redactor([]).redact("DB_PASSWORD", "pw") == "pw"


def test_redact_parameters_preserves_order():
    redacted = redact_parameters({"b": 1, "API_PASSWORD": "abc", "a": "x"})

    assert list(redacted) == ["b", "API_PASSWORD", "a"]
    assert redacted == {"b": "1", "API_PASSWORD": "***", "a": "x"}


def test_redact_parameters_handles_missing_mapping():
    assert redact_parameters(None) == {}
    assert redact_parameters({}) == {}
