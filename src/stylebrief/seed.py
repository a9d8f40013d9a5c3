from __future__ import annotations

from datetime import date
from hashlib import blake2b
from typing import Sequence, TypeVar


T = TypeVar("T")

ANONYMOUS_IDENTITY = "anonymous"
SIGN_NAMES: tuple[str, ...] = (
    "Aries",
    "Taurus",
    "Gemini",
    "Cancer",
    "Leo",
    "Virgo",
    "Libra",
    "Scorpio",
    "Sagittarius",
    "Capricorn",
    "Aquarius",
    "Pisces",
)


def sign_index(sign: str | int | None) -> int | None:
    if sign is None:
        return None
    if isinstance(sign, int):
        return sign % 12
    name = str(sign).strip().title()
    if name in SIGN_NAMES:
        return SIGN_NAMES.index(name)
    return None


def fallback_identity(sun_sign: str | int | None = None) -> str:
    """Stable stand-in identity built from natal facts only."""

    index = sign_index(sun_sign)
    if index is None:
        return ANONYMOUS_IDENTITY
    return f"sun-sign:{index}"


def daily_seed(identity: str | None, on: date, *, sun_sign: str | int | None = None) -> int:
    """Deterministic seed for ``identity`` on the calendar day ``on``.

    BLAKE2b keeps the low bits well mixed, so ``seed % n`` stays close to uniform
    for small phrase banks.
    """

    key = (identity or "").strip() or fallback_identity(sun_sign)
    digest = blake2b(f"{key}|{on.strftime('%Y%m%d')}".encode("utf-8"), digest_size=8)
    return int.from_bytes(digest.digest(), "big")


def pick(bank: Sequence[T], seed: int, multiplier: int = 1) -> T:
    """Select from ``bank`` by ``(seed * multiplier) % len(bank)``."""

    if not bank:
        raise ValueError("cannot pick from an empty bank")
    return bank[(seed * multiplier) % len(bank)]


__all__ = ["SIGN_NAMES", "daily_seed", "fallback_identity", "pick", "sign_index"]
