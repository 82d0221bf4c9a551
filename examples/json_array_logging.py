#!/usr/bin/env python3
"""
Stream structured log events as a single JSON array.

Events logged with SimpleMapMessage become JSON objects; with complete=True
every line after the first starts with a comma, so writing the layout's
header before and its footer after the stream yields a valid JSON document.

Run:
    python examples/json_array_logging.py > events.json
"""

import logging
import sys

from jsonmaplayout import SimpleMapMessage, context, install_json_layout, logger_for, marker_for

AUDIT = marker_for("AUDIT")


class CheckoutService:
    def __init__(self):
        self.log = logger_for(self)

    def checkout(self, user: str, total: float) -> None:
        with context.scoped_context(user_id=user):
            self.log.info(SimpleMapMessage({"event": "checkout", "total": total}), extra={"marker": AUDIT})
            try:
                if total <= 0:
                    raise ValueError(f"invalid total {total}")
            except ValueError:
                self.log.exception(SimpleMapMessage({"event": "checkout_failed"}))


def main() -> None:
    handler = install_json_layout(
        {"complete": True, "includeMeta": True, "wrapData": True},
        level=logging.INFO,
        stream=sys.stdout,
    )
    layout = handler.formatter

    sys.stdout.write(layout.header + "\n")
    service = CheckoutService()
    service.checkout("alice", 42.0)
    service.checkout("bob", 0)
    handler.flush()
    sys.stdout.write(layout.footer + "\n")


if __name__ == "__main__":
    main()
