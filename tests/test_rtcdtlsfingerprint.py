from unittest import TestCase

from cryptography.hazmat.primitives import hashes

from rtctransport.rtcdtlsfingerprint import (
    RTCDtlsFingerprint,
    certificate_digest,
    copy_fingerprint,
    fingerprint_from_certificate,
)

from .utils import dummy_fingerprint, generate_certificate


def expected_digest(cert, algorithm) -> str:
    return ":".join(f"{b:02X}" for b in cert.fingerprint(algorithm))


class RTCDtlsFingerprintTest(TestCase):
    def test_copy(self):
        fingerprint = dummy_fingerprint()
        copied = copy_fingerprint(fingerprint)
        self.assertEqual(copied, fingerprint)
        self.assertIsNot(copied, fingerprint)

        copied.value = "00:11"
        self.assertNotEqual(fingerprint.value, "00:11")

    def test_copy_none(self):
        self.assertIsNone(copy_fingerprint(None))

    def test_certificate_digest(self):
        cert = generate_certificate()
        self.assertEqual(
            certificate_digest(cert), expected_digest(cert, hashes.SHA256())
        )
        self.assertEqual(
            certificate_digest(cert, "sha-1"), expected_digest(cert, hashes.SHA1())
        )
        self.assertEqual(
            certificate_digest(cert, "SHA-512"),
            expected_digest(cert, hashes.SHA512()),
        )

    def test_certificate_digest_unsupported(self):
        cert = generate_certificate()
        with self.assertRaises(ValueError) as cm:
            certificate_digest(cert, "md5")
        self.assertEqual(str(cm.exception), "Unsupported fingerprint algorithm 'md5'")

    def test_fingerprint_from_certificate(self):
        cert = generate_certificate()
        fingerprint = fingerprint_from_certificate(cert, "SHA-256")
        self.assertEqual(
            fingerprint,
            RTCDtlsFingerprint(
                algorithm="sha-256", value=expected_digest(cert, hashes.SHA256())
            ),
        )
