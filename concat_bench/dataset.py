"""Input data for the concatenation strategies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .errors import InvalidConfiguration


@dataclass(frozen=True)
class Dataset:
    token: str
    count: int
    items: Tuple[str, ...]

    @property
    def text_size(self) -> int:
        return len(self.token) * self.count

    @property
    def byte_size(self) -> int:
        return len(self.token.encode("utf-8", "surrogatepass")) * self.count

    def expected(self) -> str:
        return self.token * self.count


def generate_dataset(token: str, count: int) -> Dataset:
    """Return ``count`` copies of ``token`` as an immutable dataset."""

    if not isinstance(token, str):
        raise InvalidConfiguration(f"token must be a string, got {type(token).__name__}")
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidConfiguration(f"iteration count must be an integer, got {count!r}")
    if count < 0:
        raise InvalidConfiguration(f"iteration count must be non-negative, got {count}")
    return Dataset(token=token, count=count, items=(token,) * count)
