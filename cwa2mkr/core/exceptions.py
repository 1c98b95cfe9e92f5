class RelayError(Exception):
    pass


class ConfigurationError(RelayError):
    def __init__(self, variable: str) -> None:
        super().__init__(f"{variable} is required")
        self.variable = variable


class SubmissionError(RelayError):
    def __init__(
        self, message: str, status_code: int | None = None, body: str | None = None
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
