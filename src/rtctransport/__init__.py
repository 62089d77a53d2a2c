# ruff: noqa: F401
import logging

from .connectionrole import (
    CONNECTIONROLE_ACTIVE_STR,
    CONNECTIONROLE_ACTPASS_STR,
    CONNECTIONROLE_HOLDCONN_STR,
    CONNECTIONROLE_PASSIVE_STR,
    ConnectionRole,
    connection_role_from_string,
    connection_role_to_string,
)
from .exceptions import RTCError, RTCErrorType
from .rtcdtlsfingerprint import RTCDtlsFingerprint, fingerprint_from_certificate
from .rtciceparameters import (
    ICE_OPTION_RENOMINATION,
    ICE_OPTION_TRICKLE,
    ICE_PWD_MAX_LENGTH,
    ICE_PWD_MIN_LENGTH,
    ICE_UFRAG_MAX_LENGTH,
    ICE_UFRAG_MIN_LENGTH,
    IceMode,
    IceParameters,
)
from .transportdescription import OpaqueTransportParameters, TransportDescription

__version__ = "1.0.0"

# Set default logging handler to avoid "No handler found" warnings.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CONNECTIONROLE_ACTIVE_STR",
    "CONNECTIONROLE_ACTPASS_STR",
    "CONNECTIONROLE_HOLDCONN_STR",
    "CONNECTIONROLE_PASSIVE_STR",
    "ConnectionRole",
    "ICE_OPTION_RENOMINATION",
    "ICE_OPTION_TRICKLE",
    "ICE_PWD_MAX_LENGTH",
    "ICE_PWD_MIN_LENGTH",
    "ICE_UFRAG_MAX_LENGTH",
    "ICE_UFRAG_MIN_LENGTH",
    "IceMode",
    "IceParameters",
    "OpaqueTransportParameters",
    "RTCDtlsFingerprint",
    "RTCError",
    "RTCErrorType",
    "TransportDescription",
    "connection_role_from_string",
    "connection_role_to_string",
    "fingerprint_from_certificate",
]
