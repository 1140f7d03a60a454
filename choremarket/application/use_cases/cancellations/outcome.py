"""Result type returned by cancellation use cases."""

from __future__ import annotations

from dataclasses import dataclass

from choremarket.domain.entities import CancellationRequest, Chore


@dataclass(frozen=True)
class CancellationOutcome:
    chore: Chore
    request: CancellationRequest


__all__ = ["CancellationOutcome"]
