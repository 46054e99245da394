class DebateCoachError(Exception):
    """Base class for errors raised by the debate coach backend."""


class CompletionGatewayError(DebateCoachError):
    """The completion provider call failed or returned an unusable response."""


class JudgeParseError(DebateCoachError):
    """The judge's output could not be parsed into a score."""


class HandlerError(DebateCoachError):
    """Carries the fixed message returned to the client on failure."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
