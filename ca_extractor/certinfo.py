# ca_extractor/certinfo.py

"""
Human-readable summaries of extracted certificates.

This only decodes the certificate; it does not check signatures, validity
periods or revocation.
"""

from cryptography import x509

from ca_extractor.errors import InvalidCertificateFormat


def load_certificate(pem: str) -> x509.Certificate:
    try:
        return x509.load_pem_x509_certificate(pem.encode("ascii"))
    except (ValueError, UnicodeEncodeError) as exc:
        raise InvalidCertificateFormat(f"Cannot decode certificate: {exc}") from exc


def describe_certificate(pem: str) -> str:
    """
    Return "subject=...; issuer=...; serial=...; not_after=..." for a PEM block.
    """
    cert = load_certificate(pem)
    return (
        f"subject={cert.subject.rfc4514_string()}; "
        f"issuer={cert.issuer.rfc4514_string()}; "
        f"serial={cert.serial_number:x}; "
        f"not_after={cert.not_valid_after_utc.isoformat()}"
    )
