import enum
import logging
import re
from dataclasses import dataclass

from .exceptions import RTCError, RTCErrorType

# RFC 5245 section 15.4
ICE_UFRAG_MIN_LENGTH = 4
ICE_UFRAG_MAX_LENGTH = 256
ICE_PWD_MIN_LENGTH = 22
ICE_PWD_MAX_LENGTH = 256

ICE_OPTION_TRICKLE = "trickle"
ICE_OPTION_RENOMINATION = "renomination"

ICE_CHARS_REGEX = re.compile(r"[A-Za-z0-9+/]*")

logger = logging.getLogger(__name__)


class IceMode(enum.Enum):
    FULL = 0
    LITE = 1


def is_ice_char(c: str) -> bool:
    """
    Return True if `c` may appear in an ICE username fragment or password.
    """
    return len(c) == 1 and ICE_CHARS_REGEX.fullmatch(c) is not None


def _parse_credential(
    name: str, value: str, min_length: int, max_length: int
) -> str:
    if not (min_length <= len(value) <= max_length):
        message = (
            f"ICE {name} must be between {min_length} and {max_length} "
            "characters long."
        )
        logger.debug("Rejected ICE %s: %s", name, message)
        raise RTCError(RTCErrorType.SYNTAX_ERROR, message)

    if not ICE_CHARS_REGEX.fullmatch(value):
        message = (
            f"ICE {name} must contain only alphanumeric characters, "
            "'+', and '/'."
        )
        logger.debug("Rejected ICE %s: %s", name, message)
        raise RTCError(RTCErrorType.SYNTAX_ERROR, message)

    return value


def parse_ice_ufrag(raw_ufrag: str) -> str:
    return _parse_credential(
        "ufrag", raw_ufrag, ICE_UFRAG_MIN_LENGTH, ICE_UFRAG_MAX_LENGTH
    )


def parse_ice_pwd(raw_pwd: str) -> str:
    return _parse_credential("pwd", raw_pwd, ICE_PWD_MIN_LENGTH, ICE_PWD_MAX_LENGTH)


@dataclass(frozen=True)
class IceParameters:
    """
    The :class:`IceParameters` dictionary holds the ICE username fragment
    and password shared by two peers.

    Instances obtained from :meth:`parse` either carry two valid credentials
    or, for legacy peers which do not send any, two empty strings.
    """

    ufrag: str = ""
    "ICE username fragment."

    pwd: str = ""
    "ICE password."

    renomination: bool = False
    "Whether the peer supports ICE renomination."

    @classmethod
    def parse(cls, raw_ufrag: str, raw_pwd: str) -> "IceParameters":
        """
        Validate raw ICE credentials.

        The username fragment is checked first, and the first violation found
        is raised as an :class:`RTCError` of type
        :attr:`RTCErrorType.SYNTAX_ERROR`.

        :param raw_ufrag: The username fragment, as found in the session
            description.
        :param raw_pwd: The password, as found in the session description.
        """
        # legacy peers omit the credentials altogether
        if not raw_ufrag and not raw_pwd:
            return cls()

        ufrag = parse_ice_ufrag(raw_ufrag)
        pwd = parse_ice_pwd(raw_pwd)
        return cls(ufrag=ufrag, pwd=pwd)
