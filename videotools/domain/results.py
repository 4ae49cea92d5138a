"""
Value objects produced by a process invocation and by its classification.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple


@dataclass(frozen=True)
class ExecutionResult:
    """
    The raw result of one process invocation.

    Attributes:
        command: The argument vector that was executed.
        exit_code: The process exit status.
        output: Text accumulated from the primary channel. For tools whose
                stdout and stderr are merged this holds both.
        errors: Text accumulated from stderr when it is drained separately,
                otherwise an empty string.
    """

    command: Tuple[str, ...]
    exit_code: int
    output: str
    errors: str = ""


class Classification(Enum):
    SUCCESS = auto()
    WARNING_SUCCESS = auto()
    FAILURE = auto()


@dataclass(frozen=True)
class Outcome:
    """
    The tool-specific interpretation of an `ExecutionResult`.

    `payload` carries the primary-channel text on success (for example the JSON
    document of a property read) and is always None on failure.
    """

    classification: Classification
    message: str
    payload: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.classification is not Classification.FAILURE
