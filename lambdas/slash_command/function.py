import json
import logging
from typing import Protocol

from .auth import validate_token
from .capture import CommandOutput, OutputCapture
from .config import Settings, load_settings
from .dispatch import DeliveryReport, ResponseDispatcher
from .models import CommandRequest
from .results import Outcome

logger = logging.getLogger(__name__)


class CommandHandler(Protocol):
    def handle(self, request: CommandRequest, output: CommandOutput) -> Outcome | None:
        ...


def invoke(command, request: CommandRequest, output: CommandOutput) -> Outcome:
    handle = getattr(command, "handle", command)
    try:
        result = handle(request, output)
    except SystemExit as e:
        # argparse-style commands exit on --help (0) or bad arguments (2)
        if e.code in (0, None):
            return Outcome.success()
        return Outcome.failure(e)
    except Exception as e:
        return Outcome.failure(e)
    if isinstance(result, Outcome):
        return result
    if isinstance(result, str):
        # a bare string is a failure description
        return Outcome.failure(result)
    return Outcome.success()


def run_command(request: CommandRequest, command, *, secret: str | None,
                dispatcher: ResponseDispatcher, capture_stdio: bool = False) -> DeliveryReport:
    logger.info({"request": request.redacted()})
    capture = OutputCapture(capture_stdio=capture_stdio)
    with capture as output:
        outcome = validate_token(secret, request.token)
        if outcome.ok:
            outcome = invoke(command, request, output)
        if not outcome.ok:
            logger.error({"failure": outcome.description}, exc_info=outcome.error)
            output.print_error(outcome.description)
    return dispatcher.deliver(request, capture.result())


def lambda_handler(command, *, settings: Settings | None = None,
                   dispatcher: ResponseDispatcher | None = None, capture_stdio: bool = False):
    settings = settings or load_settings()
    dispatcher = dispatcher or ResponseDispatcher()

    def handler(event, context):
        try:
            request = CommandRequest.from_event(event or {})
        except ValueError as e:
            logger.error({"bad_request": str(e)})
            return {"statusCode": 400, "body": json.dumps({"error": str(e)})}

        report = run_command(request, command, secret=settings.slack_token,
                             dispatcher=dispatcher, capture_stdio=capture_stdio)
        return {
            "statusCode": 200,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps(report.to_dict()),
        }

    return handler
