"""Result values crossing from the splitter into the command line layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    COMMAND_LINE_ERROR = 2
    UNHANDLED_EXCEPTION = 10
    APPLICATION_ERROR = 11


class OutcomeKind(Enum):
    SUCCESS = "success"
    FORMAT_ERROR = "format_error"
    IO_ERROR = "io_error"
    UNEXPECTED_ERROR = "unexpected_error"


@dataclass(frozen=True, slots=True)
class SplitOutcome:
    kind: OutcomeKind
    piece_count: int = 0
    message: str = ""
    cause: BaseException | None = None

    @classmethod
    def success(cls, piece_count: int) -> SplitOutcome:
        return cls(OutcomeKind.SUCCESS, piece_count=piece_count)

    @classmethod
    def failure(
        cls,
        kind: OutcomeKind,
        message: str,
        *,
        cause: BaseException | None = None,
        piece_count: int = 0,
    ) -> SplitOutcome:
        if kind is OutcomeKind.SUCCESS:
            raise ValueError("A failure outcome needs a failure kind.")
        return cls(kind, piece_count=piece_count, message=message, cause=cause)

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @property
    def exit_code(self) -> ExitCode:
        if self.kind is OutcomeKind.SUCCESS:
            return ExitCode.SUCCESS
        if self.kind is OutcomeKind.FORMAT_ERROR:
            return ExitCode.COMMAND_LINE_ERROR
        return ExitCode.APPLICATION_ERROR
