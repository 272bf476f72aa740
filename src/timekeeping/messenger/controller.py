from __future__ import annotations

import logging

from flask import Flask, request

from ..container import Container
from .service import first_messaging_event

logger = logging.getLogger(__name__)


def _is_missing(value) -> bool:
    # Empty objects and arrays still count as a message.
    return value is None or (not value and not isinstance(value, (dict, list)))


def register(app: Flask, container: Container) -> None:
    @app.route("/webhook", methods=["GET"], endpoint="webhook_verify")
    def webhook_verify():
        if request.args.get("hub.verify_token") == app.config["VERIFY_TOKEN"]:
            logger.info("Webhook verified")
            return app.response_class(request.args.get("hub.challenge", ""), mimetype="text/plain")
        return "", 403

    @app.route("/webhook", methods=["POST"], endpoint="webhook_message")
    def webhook_message():
        try:
            event = first_messaging_event(request.get_json(silent=True))
            if not event or _is_missing(event.get("message")):
                # Delivery receipts, read events, keep-alives.
                return "", 200

            container.messenger_service.handle_message(event)
            return "", 200
        except Exception:
            logger.exception("Messenger error")
            return "", 500
