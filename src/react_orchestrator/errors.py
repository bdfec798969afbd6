# errors.py
# Failure taxonomy for orchestration runs.
#
# Every failure is fatal to the run that raised it. Nothing here is retried
# or repaired; the CLI is the only place these are caught.


class OrchestrationError(Exception):
    """Base class for every error that aborts a run."""


class TransportError(OrchestrationError):
    """Raised when the model backend is unreachable, rejects the call, or returns nothing."""


class ParseError(OrchestrationError):
    """Raised when a backend response does not match the expected schema."""

    def __init__(self, message: str, raw: str) -> None:
        self.raw = raw
        super().__init__(f"{message}\nResponse: {raw}")


class ToolNotFoundError(OrchestrationError):
    """Raised when the model requests a tool absent from the registry."""

    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(f"Tool not found: {tool}")


class WorkerNotFoundError(OrchestrationError):
    """Raised when the supervisor routes to a worker absent from the directory."""

    def __init__(self, worker: str) -> None:
        self.worker = worker
        super().__init__(f"Worker not found: {worker}")


class ToolExecutionError(OrchestrationError):
    """Raised when a resolved tool fails while executing."""

    def __init__(self, tool: str, args: str, reason: str) -> None:
        self.tool = tool
        self.tool_args = args
        super().__init__(f"Tool '{tool}' failed on args {args!r}: {reason}")


class MaxIterationsExceeded(OrchestrationError):
    """Raised when the think-act-observe loop hits its iteration ceiling without a Finish."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"No Finish action after {limit} iteration(s). Halting.")

