class AnalysisError(Exception):
    """Base exception for every failure that ends an analysis attempt.

    The message doubles as the text shown to the user when the session
    moves to the error state.
    """

    default_message = "An unexpected error occurred during analysis."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def kind(self) -> str:
        """Stable name of the failure, e.g. 'MissingCredential'."""
        return type(self).__name__

    @property
    def user_message(self) -> str:
        return str(self)
