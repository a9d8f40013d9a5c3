from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

from .config import transit_cap
from .tokens import Token, TokenOrigin
from .weighting import WeightingModel


logger = logging.getLogger(__name__)


NATAL_SCALE = 0.6
NATAL_CAP = 2.0
TRANSIT_CAP = transit_cap(0.35)


@dataclass(frozen=True)
class TokenPools:
    natal: tuple[Token, ...] = ()
    progressed: tuple[Token, ...] = ()
    transit: tuple[Token, ...] = ()
    weather: tuple[Token, ...] = ()
    temporal: tuple[Token, ...] = ()

    @classmethod
    def from_mapping(cls, pools: Mapping[str, Iterable[Token]]) -> "TokenPools":
        known = {origin.value for origin in TokenOrigin}
        values: dict[str, tuple[Token, ...]] = {}
        for key, tokens in pools.items():
            name = str(getattr(key, "value", key))
            if name in known:
                values[name] = tuple(tokens or ())
        return cls(**values)

    def items(self) -> list[tuple[TokenOrigin, Sequence[Token]]]:
        return [(origin, getattr(self, origin.value)) for origin in TokenOrigin]


def normalize_natal(weight: float) -> float:
    """Compress a natal weight so chart density alone cannot dominate the blend."""

    return min(weight * NATAL_SCALE, NATAL_CAP)


def cap_transit_share(
    transit: Sequence[Token],
    others: Sequence[Token],
    cap: float = TRANSIT_CAP,
) -> list[Token]:
    """Scale ``transit`` down so it holds at most ``cap`` of the combined weight.

    Returned unchanged when either side weighs nothing or the share is already
    within the cap.
    """

    transit_weight = sum(token.weight for token in transit)
    other_weight = sum(token.weight for token in others)
    if cap >= 1.0 or transit_weight <= 0 or other_weight <= 0:
        return list(transit)
    share = transit_weight / (transit_weight + other_weight)
    if share <= cap:
        return list(transit)
    factor = (cap / (1.0 - cap)) * other_weight / transit_weight
    logger.debug(
        "transit_share_capped",
        extra={"share": round(share, 4), "cap": cap, "factor": round(factor, 4)},
    )
    return [token.with_weight(token.weight * factor) for token in transit]


def aggregate(
    pools: TokenPools | Mapping[str, Iterable[Token]],
    model: WeightingModel,
    cap: float | None = None,
) -> list[Token]:
    """Blend the origin pools into one flat pool weighted by ``model``.

    No deduplication: tokens sharing a name keep separate entries so later stages
    can read source diversity. After the origin fractions, the transit pool is held
    to ``cap`` (``TRANSIT_CAP`` by default) of the total weight. Inert results are
    dropped.
    """

    if not isinstance(pools, TokenPools):
        pools = TokenPools.from_mapping(pools)
    weighted: dict[TokenOrigin, list[Token]] = {}
    for origin, tokens in pools.items():
        scaled = weighted.setdefault(origin, [])
        for token in tokens:
            weight = token.weight
            if origin is TokenOrigin.NATAL:
                weight = normalize_natal(weight)
            scaled.append(token.with_weight(weight * model.fraction_for(token, origin)))
    others = [token for origin, tokens in weighted.items() if origin is not TokenOrigin.TRANSIT for token in tokens]
    weighted[TokenOrigin.TRANSIT] = cap_transit_share(
        weighted[TokenOrigin.TRANSIT],
        others,
        TRANSIT_CAP if cap is None else cap,
    )
    merged = [token for origin in TokenOrigin for token in weighted[origin] if not token.is_inert]
    logger.debug(
        "style_tokens_aggregated",
        extra={"model": model.name, "token_count": len(merged)},
    )
    return merged


def weight_by_origin(tokens: Iterable[Token]) -> dict[TokenOrigin, float]:
    totals: dict[TokenOrigin, float] = {}
    for token in tokens:
        totals[token.origin] = totals.get(token.origin, 0.0) + token.weight
    return totals


__all__ = [
    "NATAL_CAP",
    "NATAL_SCALE",
    "TRANSIT_CAP",
    "TokenPools",
    "aggregate",
    "cap_transit_share",
    "normalize_natal",
    "weight_by_origin",
]
