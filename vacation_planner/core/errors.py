# core/errors.py

"""
Exceptions raised by the planner services.

Every service raises one of these instead of returning ``None``; the
itinerary orchestrator lets them propagate so that a failing step stops
the request before any later upstream call is made.
"""


class PlannerError(RuntimeError):
    """Base class for every failure the web layer turns into the error page."""


class ConfigurationError(PlannerError):
    """A required setting (API key, database URL) is missing."""


class NotFoundError(PlannerError):
    """The geocoder found nothing for the requested city."""


class UpstreamError(PlannerError):
    """A third-party API call failed, timed out or answered with an error status."""

    def __init__(self, service: str, message: str):
        self.service = service
        super().__init__(f"{service}: {message}")


class MalformedResponseError(UpstreamError):
    """A third-party API answered, but not with the shape we expect."""


class DataAccessError(PlannerError):
    """The packing-item store could not be queried."""
