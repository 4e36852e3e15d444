"""Custom exception hierarchy for feedbackDesk.

All application exceptions inherit from :class:`FeedbackDeskError`, which
carries an optional ``component`` so error handlers can identify which
part of the system (e.g. "hasher", "console", "exporter") raised it.

    FeedbackDeskError  (base -- catch-all for any feedbackDesk error)
    +-- ConfigurationError  (startup / missing or invalid config)
    +-- ValidationError     (input rejected before it reaches a store)
    +-- ExportError         (feedback export could not be written)

Uniqueness and not-found outcomes in the stores (duplicate username,
unknown user on password reset, repeated submission) are NOT exceptions:
they are reported through boolean return values that callers must check.
"""


class FeedbackDeskError(Exception):
    """Base exception for all feedbackDesk errors.

    The ``__str__`` method prefixes the component name in brackets for
    structured log output, e.g. ``[hasher] Digest algorithm unavailable``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        component: str | None = None,
    ) -> None:
        self._message = message
        self._component = component
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def component(self) -> str | None:
        return self._component

    def __str__(self) -> str:
        if self._component:
            return f"[{self._component}] {self._message}"
        return self._message


class ConfigurationError(FeedbackDeskError):
    """Raised when configuration is invalid or missing at startup.

    A missing digest algorithm lands here: the process must not start with
    a hasher that cannot produce digests.
    """

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        component: str | None = None,
    ) -> None:
        super().__init__(message=message, component=component)


class ValidationError(FeedbackDeskError):
    """Raised when user input is rejected (bad email, empty title, etc.)."""

    def __init__(
        self,
        message: str = "Invalid input",
        component: str | None = None,
    ) -> None:
        super().__init__(message=message, component=component)


class ExportError(FeedbackDeskError):
    """Raised when the feedback export file cannot be written."""

    def __init__(
        self,
        message: str = "Feedback export failed",
        component: str | None = None,
    ) -> None:
        super().__init__(message=message, component=component)
