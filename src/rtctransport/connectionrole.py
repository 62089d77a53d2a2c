import enum
import logging
from typing import Optional

CONNECTIONROLE_ACTIVE_STR = "active"
CONNECTIONROLE_PASSIVE_STR = "passive"
CONNECTIONROLE_ACTPASS_STR = "actpass"
CONNECTIONROLE_HOLDCONN_STR = "holdconn"

logger = logging.getLogger(__name__)


class ConnectionRole(enum.Enum):
    """
    The DTLS setup role a peer assumes, see RFC 4145 and RFC 5763.
    """

    NONE = 0
    ACTIVE = 1
    PASSIVE = 2
    ACTPASS = 3
    HOLDCONN = 4


ROLE_TOKENS = [
    (ConnectionRole.ACTIVE, CONNECTIONROLE_ACTIVE_STR),
    (ConnectionRole.PASSIVE, CONNECTIONROLE_PASSIVE_STR),
    (ConnectionRole.ACTPASS, CONNECTIONROLE_ACTPASS_STR),
    (ConnectionRole.HOLDCONN, CONNECTIONROLE_HOLDCONN_STR),
]


def connection_role_from_string(token: str) -> Optional[ConnectionRole]:
    """
    Return the :class:`ConnectionRole` for a `setup` token, or `None` if the
    token is not recognised. The comparison is case-insensitive.
    """
    lowered = token.lower()
    for role, role_str in ROLE_TOKENS:
        if role_str == lowered:
            return role

    logger.debug("Unknown connection role %r", token)
    return None


def connection_role_to_string(role: ConnectionRole) -> Optional[str]:
    """
    Return the canonical `setup` token for `role`, or `None` if the role
    cannot be encoded.
    """
    for known_role, role_str in ROLE_TOKENS:
        if role is known_role:
            return role_str
    return None
