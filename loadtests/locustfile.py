"""Attraction Reviews load testing: Locust entry point.

Run against a server started with ``python src/server.py`` (seeded on
startup with the in-memory store).

Usage:
    # All users (web UI):
    locust -f loadtests/locustfile.py --host http://localhost:3004

    # Read-only traffic:
    locust -f loadtests/locustfile.py ReviewBrowserUser

    # Headless (CI mode):
    locust -f loadtests/locustfile.py ReviewHelpfulUser --headless \
           -u 50 -r 5 -t 300s --csv=results/loadtest
"""

import logging
import time

from locust import events

# Import all user classes so Locust discovers them
from loadtests.helpers.response import extract_error_detail
from loadtests.scenarios.browsing import ReviewBrowserUser, ReviewHelpfulUser  # noqa: F401

logger = logging.getLogger("loadtest")


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    """Log error details for every failed request.

    Browsing an unseeded attraction answers 404 and is not logged.
    """
    if exception:
        logger.error("[EXCEPTION] %s %s: %s", request_type, name, exception)
    elif response is not None and response.status_code >= 400:
        if response.status_code == 404 and request_type == "GET":
            return
        detail = extract_error_detail(response)
        logger.error("[%s] %s %s: %s", response.status_code, request_type, name, detail)


@events.test_start.add_listener
def on_test_start(environment, **_kwargs):
    """Log a marker when load test begins."""
    print(f"\n[LOADTEST] Started at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Target host: {environment.host}")
    print()


@events.test_stop.add_listener
def on_test_stop(**_kwargs):
    print(f"\n[LOADTEST] Stopped at {time.strftime('%H:%M:%S')}\n")
