class SlashCommandError(Exception):
    default_message = ""

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class AuthenticationError(SlashCommandError):
    default_message = "Invalid slack token"


class HandlerFailure(SlashCommandError):
    default_message = "Command failed"


class DispatchFailure(SlashCommandError):
    default_message = "Response could not be delivered"
