from dataclasses import dataclass
from typing import Optional

from cryptography import x509
from OpenSSL import crypto

# RFC 4572 hash function names, mapped to OpenSSL digest names
FINGERPRINT_DIGESTS = {
    "sha-1": "SHA1",
    "sha-224": "SHA224",
    "sha-256": "SHA256",
    "sha-384": "SHA384",
    "sha-512": "SHA512",
}


@dataclass
class RTCDtlsFingerprint:
    """
    The :class:`RTCDtlsFingerprint` dictionary includes the hash function
    algorithm and certificate fingerprint.
    """

    algorithm: str
    "The hash function name, for instance `'sha-256'`."

    value: str
    "The fingerprint value."


def copy_fingerprint(
    fingerprint: Optional[RTCDtlsFingerprint],
) -> Optional[RTCDtlsFingerprint]:
    if fingerprint is None:
        return None
    return RTCDtlsFingerprint(algorithm=fingerprint.algorithm, value=fingerprint.value)


def certificate_digest(cert: x509.Certificate, algorithm: str = "sha-256") -> str:
    try:
        digest_name = FINGERPRINT_DIGESTS[algorithm.lower()]
    except KeyError:
        raise ValueError(f"Unsupported fingerprint algorithm '{algorithm}'")

    return crypto.X509.from_cryptography(cert).digest(digest_name).decode("ascii")


def fingerprint_from_certificate(
    cert: x509.Certificate, algorithm: str = "sha-256"
) -> RTCDtlsFingerprint:
    """
    Compute the RFC 4572 fingerprint of `cert`.

    :param cert: A :class:`cryptography.x509.Certificate`.
    :param algorithm: The hash function name, for instance `'sha-256'`.
    """
    return RTCDtlsFingerprint(
        algorithm=algorithm.lower(), value=certificate_digest(cert, algorithm)
    )
