from dataclasses import dataclass
from typing import List, Optional

from .connectionrole import ConnectionRole
from .rtcdtlsfingerprint import RTCDtlsFingerprint, copy_fingerprint
from .rtciceparameters import ICE_OPTION_RENOMINATION, IceMode, IceParameters


@dataclass(frozen=True)
class OpaqueTransportParameters:
    """
    Protocol-specific transport parameters, carried without interpretation.
    """

    protocol: str = ""
    parameters: bytes = b""


class TransportDescription:
    """
    The :class:`TransportDescription` holds the parameters negotiated for one
    transport channel: ICE credentials, ICE mode, DTLS setup role and the
    identity fingerprint.

    Credentials are stored as given, they are expected to have gone through
    :meth:`IceParameters.parse` beforehand, or to both be empty.

    The identity fingerprint is owned by the description: it is copied when
    set, and copied again whenever the description itself is copied, so that
    two descriptions never share a fingerprint.
    """

    def __init__(
        self,
        transport_options: Optional[List[str]] = None,
        ice_ufrag: str = "",
        ice_pwd: str = "",
        ice_mode: IceMode = IceMode.FULL,
        connection_role: ConnectionRole = ConnectionRole.NONE,
        identity_fingerprint: Optional[RTCDtlsFingerprint] = None,
        opaque_parameters: Optional[OpaqueTransportParameters] = None,
    ) -> None:
        self.transport_options: List[str] = list(transport_options or [])
        self.ice_ufrag = ice_ufrag
        self.ice_pwd = ice_pwd
        self.ice_mode = ice_mode
        self.connection_role = connection_role
        self.identity_fingerprint = identity_fingerprint
        self.opaque_parameters = opaque_parameters

    @classmethod
    def from_credentials(cls, ice_ufrag: str, ice_pwd: str) -> "TransportDescription":
        return cls(ice_ufrag=ice_ufrag, ice_pwd=ice_pwd)

    @property
    def identity_fingerprint(self) -> Optional[RTCDtlsFingerprint]:
        """
        The :class:`RTCDtlsFingerprint` of the identity certificate, if any.
        """
        return self._identity_fingerprint

    @identity_fingerprint.setter
    def identity_fingerprint(self, fingerprint: Optional[RTCDtlsFingerprint]) -> None:
        self._identity_fingerprint = copy_fingerprint(fingerprint)

    @property
    def secure(self) -> bool:
        return self._identity_fingerprint is not None

    def add_option(self, option: str) -> None:
        self.transport_options.append(option)

    def has_option(self, option: str) -> bool:
        return option in self.transport_options

    def get_ice_parameters(self) -> IceParameters:
        return IceParameters(
            ufrag=self.ice_ufrag,
            pwd=self.ice_pwd,
            renomination=self.has_option(ICE_OPTION_RENOMINATION),
        )

    def assign(self, other: "TransportDescription") -> "TransportDescription":
        """
        Overwrite this description with a copy of `other`.
        """
        if other is self:
            return self

        self.transport_options = list(other.transport_options)
        self.ice_ufrag = other.ice_ufrag
        self.ice_pwd = other.ice_pwd
        self.ice_mode = other.ice_mode
        self.connection_role = other.connection_role
        self.identity_fingerprint = other.identity_fingerprint
        self.opaque_parameters = other.opaque_parameters
        return self

    def copy(self) -> "TransportDescription":
        return TransportDescription(
            transport_options=self.transport_options,
            ice_ufrag=self.ice_ufrag,
            ice_pwd=self.ice_pwd,
            ice_mode=self.ice_mode,
            connection_role=self.connection_role,
            identity_fingerprint=self.identity_fingerprint,
            opaque_parameters=self.opaque_parameters,
        )

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransportDescription):
            return NotImplemented
        return (
            self.transport_options == other.transport_options
            and self.ice_ufrag == other.ice_ufrag
            and self.ice_pwd == other.ice_pwd
            and self.ice_mode == other.ice_mode
            and self.connection_role == other.connection_role
            and self.identity_fingerprint == other.identity_fingerprint
            and self.opaque_parameters == other.opaque_parameters
        )

    def __repr__(self) -> str:
        return (
            "TransportDescription("
            f"transport_options={self.transport_options!r}, "
            f"ice_ufrag={self.ice_ufrag!r}, "
            f"ice_pwd={self.ice_pwd!r}, "
            f"ice_mode={self.ice_mode}, "
            f"connection_role={self.connection_role}, "
            f"identity_fingerprint={self.identity_fingerprint!r}, "
            f"opaque_parameters={self.opaque_parameters!r})"
        )
