"""Tests for E.164 display form of stored phone numbers."""


from addressbook.domain import Phone
from addressbook.infrastructure.phone import phone_e164


def test_stored_digits_use_region_country_code():
    assert phone_e164(Phone("61234567"), "SG") == "+6561234567"
    assert phone_e164(Phone("91234567"), "SG") == "+6591234567"
    assert phone_e164(Phone("2025551234"), "US") == "+12025551234"


def test_same_digits_differ_by_region():
    assert phone_e164(Phone("2025551234"), "SG") is None
    assert phone_e164(Phone("61234567"), "US") is None


def test_private_phone_has_no_display_form():
    assert phone_e164(Phone("61234567", is_private=True), "SG") is None


def test_invalid_for_region_returns_none():
    assert phone_e164(Phone("911"), "SG") is None  # too short
    assert phone_e164(Phone("61234567"), "ZZ") is None  # unknown region
