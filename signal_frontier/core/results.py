"""
Signal Frontier — Command Results
Outcome of a player command: applied, or declined with a notice.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandResult:
    ok: bool
    message: str = ""

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, message: str = "") -> "CommandResult":
        return cls(True, message)

    @classmethod
    def declined(cls, message: str) -> "CommandResult":
        return cls(False, message)
