class AnalysisError(Exception):
    """Raised when an audit cannot be completed."""

    def __init__(self, message: str, reason: str = "analysis_error"):
        super().__init__(message)
        self.reason = reason


class InvalidURLError(AnalysisError, ValueError):
    def __init__(self, url):
        super().__init__(f"Invalid URL provided: {url}", reason="invalid_url")
        self.url = url


class FetchError(AnalysisError):
    """HTTP fetch failed. ``reason`` is not_found, timeout, http_error or request_error."""

    def __init__(self, url: str, reason: str, detail: str = ""):
        message = f"Could not fetch {url}: {detail or reason}"
        super().__init__(message, reason=reason)
        self.url = url
        self.detail = detail
