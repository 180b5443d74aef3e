"""Tests for shared/privacy.py."""

from shared.privacy import redact_email


class TestRedactEmail:
    def test_keeps_domain_and_prefix(self):
        assert redact_email("alice@example.com") == "al***@example.com"

    def test_short_local_part(self):
        assert redact_email("a@x.com") == "a***@x.com"

    def test_not_an_email(self):
        assert redact_email("no-at-sign") == "redacted"
