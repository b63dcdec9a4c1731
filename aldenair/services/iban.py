"""IBAN check digit validation (ISO 13616, mod 97)"""

import re

_IBAN_PATTERN = re.compile(r"[A-Z]{2}[0-9]{2}[A-Z0-9]+")


def _clean(iban: str) -> str:
    return re.sub(r"\s", "", iban).upper()


def is_valid_iban(iban: str) -> bool:
    """
    Validate an IBAN.

    The country code and check digits are moved to the end, letters are
    replaced by 10..35, and the resulting number must be 1 modulo 97.
    """
    clean = _clean(iban)

    if not 15 <= len(clean) <= 34:
        return False

    if not _IBAN_PATTERN.fullmatch(clean):
        return False

    rearranged = clean[4:] + clean[:4]
    numeric = "".join(str(int(ch, 36)) for ch in rearranged)
    return int(numeric) % 97 == 1


def format_iban(iban: str) -> str:
    """Group an IBAN in blocks of four, e.g. "DE89 3704 0044 ..." """
    clean = _clean(iban)
    return " ".join(clean[i : i + 4] for i in range(0, len(clean), 4))
