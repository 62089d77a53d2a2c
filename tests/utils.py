import binascii
import datetime
import os

from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

from rtctransport import RTCDtlsFingerprint


def generate_certificate() -> x509.Certificate:
    key = ec.generate_private_key(ec.SECP256R1())
    name = x509.Name(
        [
            x509.NameAttribute(
                x509.NameOID.COMMON_NAME,
                binascii.hexlify(os.urandom(16)).decode("ascii"),
            )
        ]
    )
    now = datetime.datetime.now(tz=datetime.timezone.utc)
    builder = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - datetime.timedelta(days=1))
        .not_valid_after(now + datetime.timedelta(days=30))
    )
    return builder.sign(key, hashes.SHA256())


def dummy_fingerprint() -> RTCDtlsFingerprint:
    return RTCDtlsFingerprint(
        algorithm="sha-256",
        value="E5:E8:35:2B:7D:9B:38:A2:3C:9A:01:8F:4F:26:5C:E0:"
        "1E:E6:40:8C:6B:94:3B:D5:A7:FA:AC:2A:A5:B3:6A:70",
    )
