#!/usr/bin/env python3
"""
Walkthrough of a small service logging with fieldlog.

Run it directly to see the emitted NDJSON on standard output.
"""

import argparse

from fieldlog import Logger

PORT = 8080


def run(output=None, db_failed: bool = True) -> Logger:
    log = Logger(service="my-super-service", output=output)

    # Start our new super service
    log.info({
        "event.action": "startup",
        "message": f"Ready to go, listening on port {PORT}",
        "server.port": PORT,
    })

    # We get a request
    request_log = log.with_({
        "event.action": "HTTP request",
        "trace.id": "126bb6fa-28a2-470f-b013-eefbf9182b2d",
    })

    if db_failed:
        request_log.error({"message": "DB connection failed."})

    # We return an error to the requester
    request_log.info({
        "message": "Request failed",
        "http": {"request": {"method": "GET"}, "response": {"status_code": 500}},
    })
    return log


def main() -> None:
    parser = argparse.ArgumentParser(description="Emit a few example log records")
    parser.add_argument("--db-ok", action="store_true", help="Skip the simulated database failure")
    args = parser.parse_args()
    run(db_failed=not args.db_ok)


if __name__ == "__main__":
    main()
