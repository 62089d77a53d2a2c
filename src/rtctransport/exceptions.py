import enum


class RTCErrorType(enum.Enum):
    NONE = 0
    SYNTAX_ERROR = 1
    INVALID_PARAMETER = 2
    UNSUPPORTED_PARAMETER = 3
    INTERNAL_ERROR = 4


class RTCError(ValueError):
    """
    Error raised when negotiated parameters are rejected.

    :param type: An :class:`RTCErrorType` describing the kind of failure.
    :param message: A human-readable description of the violated rule.
    """

    def __init__(self, type: RTCErrorType, message: str) -> None:
        super().__init__(message)
        self.type = type
        self.message = message

    def __repr__(self) -> str:
        return f"RTCError(type={self.type}, message={self.message!r})"
