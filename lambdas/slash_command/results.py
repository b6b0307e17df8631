from dataclasses import dataclass

from .errors import HandlerFailure


def describe(error: BaseException) -> str:
    message = str(error)
    name = type(error).__name__
    return f"{name}: {message}" if message else name


@dataclass(frozen=True)
class Outcome:
    ok: bool
    description: str = ""
    error: BaseException | None = None

    @classmethod
    def success(cls) -> "Outcome":
        return cls(ok=True)

    @classmethod
    def failure(cls, error) -> "Outcome":
        # plain descriptions are wrapped so every failure carries an exception
        if not isinstance(error, BaseException):
            error = HandlerFailure(str(error))
        return cls(ok=False, description=describe(error), error=error)
