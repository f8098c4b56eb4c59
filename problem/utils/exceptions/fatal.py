"""Terminal error raised by the or-fail helpers."""


class Fatal(BaseException):
    """
    Stops the program with a readable message instead of a crash report.

    Derives from BaseException so that `except Exception` handlers and the
    context helpers let it propagate to the top of the program, where the
    installed termination hook reports it.

    Args:
        message: Final text reported to the user.
    """
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message
