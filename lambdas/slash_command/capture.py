import contextlib
import io
from dataclasses import dataclass


@dataclass(frozen=True)
class CapturedOutput:
    broadcast: str = ""
    private: str = ""


class CommandOutput:
    """
    Sinks handed to a command handler for one invocation.
    `out` becomes an in_channel message, `err` an ephemeral one.
    """

    def __init__(self):
        self.out = io.StringIO()
        self.err = io.StringIO()

    def print(self, *args, **kwargs):
        print(*args, file=self.out, **kwargs)

    def print_error(self, *args, **kwargs):
        print(*args, file=self.err, **kwargs)


class OutputCapture:
    """
    Scope for one handler invocation. With capture_stdio, sys.stdout/sys.stderr are
    redirected into the sinks as well; that swaps process-wide state, so only use it
    when a process never runs two invocations at once.
    """

    def __init__(self, capture_stdio: bool = False):
        self.capture_stdio = capture_stdio
        self.output = CommandOutput()
        self._stack: contextlib.ExitStack | None = None
        self._result: CapturedOutput | None = None

    def __enter__(self) -> CommandOutput:
        if self._stack is not None or self._result is not None:
            raise RuntimeError("OutputCapture cannot be re-entered")
        self._stack = contextlib.ExitStack()
        if self.capture_stdio:
            self._stack.enter_context(contextlib.redirect_stdout(self.output.out))
            self._stack.enter_context(contextlib.redirect_stderr(self.output.err))
        return self.output

    def __exit__(self, exc_type, exc, tb):
        stack, self._stack = self._stack, None
        try:
            stack.close()
        finally:
            self._result = CapturedOutput(
                broadcast=self.output.out.getvalue(),
                private=self.output.err.getvalue(),
            )
            self.output.out.close()
            self.output.err.close()
        return False

    def result(self) -> CapturedOutput:
        if self._result is None:
            raise RuntimeError("output is only available after the capture scope exits")
        return self._result
