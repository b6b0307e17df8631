from .auth import validate_token
from .capture import CapturedOutput, CommandOutput, OutputCapture
from .config import Settings, load_settings
from .dispatch import DeliveryReport, ResponseDispatcher
from .errors import AuthenticationError, DispatchFailure, HandlerFailure, SlashCommandError
from .function import CommandHandler, lambda_handler, run_command
from .models import Attachment, CommandRequest, ResponseMessage, ResponseType
from .results import Outcome
from .tokenizer import tokenize

__all__ = [
    "Attachment",
    "AuthenticationError",
    "CapturedOutput",
    "CommandHandler",
    "CommandOutput",
    "CommandRequest",
    "DeliveryReport",
    "DispatchFailure",
    "HandlerFailure",
    "Outcome",
    "OutputCapture",
    "ResponseDispatcher",
    "ResponseMessage",
    "ResponseType",
    "Settings",
    "SlashCommandError",
    "lambda_handler",
    "load_settings",
    "run_command",
    "tokenize",
    "validate_token",
]
