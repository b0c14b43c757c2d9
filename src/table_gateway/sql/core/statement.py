"""
Compiled SQL fragments and statements.
"""

from dataclasses import dataclass
from typing import Tuple

from .parameters import BoundParameter


@dataclass(frozen=True)
class Clause:
    """A compiled SQL fragment (e.g. `` WHERE ...``) and the values it binds."""

    text: str = ""
    parameters: Tuple[BoundParameter, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.text)


@dataclass(frozen=True)
class Statement:
    """
    A complete SQL statement ready to be prepared.

    ``parameters`` are ordered by ``position``, which matches the textual
    order of the ``?`` placeholders in ``sql``.
    """

    sql: str
    parameters: Tuple[BoundParameter, ...] = ()
