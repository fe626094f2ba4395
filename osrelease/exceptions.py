class Fail(BaseException):
    """
    Error that makes osrelease-info exit with a message and status 1.

    No stack trace is printed.
    """


class ConfigError(Fail):
    """
    The configuration file cannot be used
    """

    def __init__(self, path: object, msg: str) -> None:
        super().__init__(f"{path}: {msg}")
        self.path = path
