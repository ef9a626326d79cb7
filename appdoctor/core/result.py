"""Result type for recoverable failures at the edges.

Spawning a probe command and loading the config file can both fail for
ordinary environmental reasons. Those calls return ``Ok``/``Err`` instead of
raising, so callers classify the failure explicitly:

    match probe.run("pod", ["--version"]):
        case Ok(output):
            version_text = output.stdout.strip()
        case Err(error):
            log.debug("pod unavailable", error=str(error))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying a value."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result carrying an error value."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = "Ok[T] | Err[E]"
