import logging

from slash_command import CommandOutput, CommandRequest, lambda_handler, load_settings, ResponseDispatcher

settings = load_settings()

logger = logging.getLogger()
logger.setLevel(settings.log_level)

# one pooled transport for the lifetime of the Lambda container
dispatcher = ResponseDispatcher()


def echo(request: CommandRequest, output: CommandOutput):
    args = request.arguments
    if not args:
        output.print_error(f"usage: {request.command or '/echo'} <text> [\"quoted text\" ...]")
        return
    for arg in args:
        output.print(arg)


handler = lambda_handler(echo, settings=settings, dispatcher=dispatcher)
