import json
import logging
from dataclasses import asdict, dataclass

import urllib3

from .capture import CapturedOutput
from .errors import DispatchFailure
from .models import CommandRequest, ResponseMessage
from .results import describe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeliveryReport:
    # None: nothing to send for that channel
    broadcast: bool | None = None
    private: bool | None = None

    def to_dict(self) -> dict:
        return asdict(self)


class ResponseDispatcher:
    def __init__(self, http=None):
        # PoolManager is thread-safe; one instance serves every invocation in the process
        self.http = http if http is not None else urllib3.PoolManager()

    def post(self, response_url: str | None, message: ResponseMessage) -> bool:
        if not response_url:
            logger.error({"dispatch_error": describe(DispatchFailure("missing response_url")),
                          "response_type": message.to_dict()["response_type"]})
            return False
        data = json.dumps(message.to_dict()).encode()
        headers = {"Content-Type": "application/json"}
        try:
            r = self.http.request("POST", response_url, body=data, headers=headers, retries=False)
        except (urllib3.exceptions.HTTPError, OSError) as e:
            logger.error({"dispatch_error": describe(DispatchFailure(str(e))), "url": response_url})
            return False
        if not 200 <= r.status < 300:
            logger.error({"dispatch_error": describe(DispatchFailure(f"status {r.status}")),
                          "url": response_url})
            return False
        return True

    def respond(self, request: CommandRequest, message: ResponseMessage) -> bool:
        return self.post(request.response_url, message)

    def respond_in_channel(self, request: CommandRequest, text: str, *attachments) -> bool:
        return self.respond(request, ResponseMessage.in_channel(text, *attachments))

    def respond_ephemeral(self, request: CommandRequest, text: str, *attachments) -> bool:
        return self.respond(request, ResponseMessage.ephemeral(text, *attachments))

    def deliver(self, request: CommandRequest, captured: CapturedOutput) -> DeliveryReport:
        broadcast = private = None
        # in_channel first; a failed broadcast does not cancel the ephemeral post
        if captured.broadcast:
            broadcast = self.respond_in_channel(request, captured.broadcast)
        if captured.private:
            private = self.respond_ephemeral(request, captured.private)
        return DeliveryReport(broadcast=broadcast, private=private)
