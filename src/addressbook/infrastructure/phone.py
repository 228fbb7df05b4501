"""International (E.164) form of stored phone numbers, for display only."""

import phonenumbers

from addressbook.domain import Phone


def phone_e164(phone: Phone, region: str) -> str | None:
    """Return the E.164 form of a public phone, read as a national number of region.

    Stored numbers are digits only with no country code, so region (e.g. "SG")
    supplies it. Returns None for private phones and for numbers that are not
    valid in region.
    """
    if phone.is_private:
        return None
    try:
        parsed = phonenumbers.parse(phone.value, region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_valid_number_for_region(parsed, region):
        return None
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)
