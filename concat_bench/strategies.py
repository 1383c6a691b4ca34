"""The four concatenation strategies under comparison.

Each strategy takes a :class:`Dataset` and returns a freshly built string.
None of them touch the dataset or share state with one another, so the
harness can time them back to back in any order.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from .dataset import Dataset
from .errors import InvalidConfiguration

TEMPLATE = "%s%s"

# Lone surrogates (undecodable argv bytes on POSIX) must survive the byte round trip.
ENCODING = "utf-8"
ERRORS = "surrogatepass"


def concat_operator(dataset: Dataset) -> str:
    result = ""
    for token in dataset.items:
        result = result + token
    return result


def concat_builder(dataset: Dataset) -> str:
    """Write into a StringIO whose storage was reserved up front."""

    builder = io.StringIO()
    # Writing a filler block and rewinding forces the full allocation now;
    # truncate() drops whatever the tokens did not overwrite.
    builder.write("\0" * dataset.text_size)
    builder.seek(0)
    for token in dataset.items:
        builder.write(token)
    builder.truncate()
    return builder.getvalue()


def concat_buffer(dataset: Dataset) -> str:
    """Copy UTF-8 bytes into a pre-sized bytearray and decode once."""

    buffer = bytearray(dataset.byte_size)
    view = memoryview(buffer)
    offset = 0
    for token in dataset.items:
        chunk = token.encode(ENCODING, ERRORS)
        end = offset + len(chunk)
        view[offset:end] = chunk
        offset = end
    view.release()
    return buffer[:offset].decode(ENCODING, ERRORS)


def concat_template(dataset: Dataset) -> str:
    result = ""
    for token in dataset.items:
        result = TEMPLATE % (result, token)
    return result


@dataclass(frozen=True)
class Strategy:
    """Benchmark entry descriptor."""

    name: str
    label: str
    func: Callable[[Dataset], str]

    def __call__(self, dataset: Dataset) -> str:
        return self.func(dataset)


STRATEGIES: Tuple[Strategy, ...] = (
    Strategy(name="operator", label="Operator +", func=concat_operator),
    Strategy(name="builder", label="io.StringIO", func=concat_builder),
    Strategy(name="buffer", label="bytearray", func=concat_buffer),
    Strategy(name="template", label="%-format", func=concat_template),
)

STRATEGY_NAMES: Tuple[str, ...] = tuple(strategy.name for strategy in STRATEGIES)

DEFAULT_REFERENCE = "builder"

_BY_NAME: Dict[str, Strategy] = {strategy.name: strategy for strategy in STRATEGIES}


def get_strategy(name: str) -> Strategy:
    try:
        return _BY_NAME[name]
    except KeyError:
        choices = ", ".join(STRATEGY_NAMES)
        raise InvalidConfiguration(
            f"unknown strategy '{name}' (expected one of: {choices})"
        ) from None
