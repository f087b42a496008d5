"""
Fact model and fallback-chain evaluation.

A fact is resolved by walking its fallback chain: an ordered sequence of
(source, probe) pairs. Each probe takes no arguments and returns a string or
None; the first non-empty answer wins and later probes are never called.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple

from text_utils import strip_newline

logger = logging.getLogger(__name__)


class Source(Enum):
    """Where a probe result came from."""
    ENV = "env"
    FILE = "file"
    SUBPROCESS = "subprocess"
    PROTOCOL = "protocol"
    NATIVE = "native"


class FactName(Enum):
    """The facts xfetch reports, in output order, with label and missing text."""
    HOSTNAME = ("Hostname", "not recognized")
    OS = ("Operating System", "not found")
    KERNEL = ("Kernel", "not recognized")
    SESSION_TYPE = ("Session Type", "not recognized")
    DESKTOP = ("Desktop Environment", "not recognized")
    WINDOW_MANAGER = ("Window Manager/Compositor", "not recognized")
    UPTIME = ("Uptime", "not recognized")
    SHELL = ("Shell", "not recognized")

    def __init__(self, label: str, missing: str):
        self.label = label
        self.missing = missing


@dataclass(frozen=True)
class ProbeResult:
    value: Optional[str]
    source: Source

    @property
    def present(self) -> bool:
        return bool(self.value)


@dataclass(frozen=True)
class Fact:
    name: FactName
    value: Optional[str]

    def render(self) -> str:
        """The output line: "<Label>: <value>" or the placeholder sentence."""
        if self.value:
            return f"{self.name.label}: {self.value}"
        return f"{self.name.label} {self.name.missing}."


Probe = Callable[[], Optional[str]]
FallbackChain = Sequence[Tuple[Source, Probe]]


def run_chain(chain: FallbackChain) -> Optional[ProbeResult]:
    """Evaluate *chain* in order and return the first present result."""
    for source, probe in chain:
        value = probe()
        if value:
            value = strip_newline(value)
        result = ProbeResult(value or None, source)
        if result.present:
            logger.debug(f"{getattr(probe, '__name__', probe)} answered from {source.value}: {value!r}")
            return result
    return None


def resolve_fact(name: FactName, chain: FallbackChain) -> Fact:
    """Build a Fact from the first present link of *chain* (None if all fail)."""
    result = run_chain(chain)
    if result is None:
        logger.debug(f"No source produced {name.label}")
        return Fact(name, None)
    return Fact(name, result.value)
