"""Background jobs package: asynchronous query worker."""

from typeahead.jobs.worker import QueryWorker

__all__ = ["QueryWorker"]
