"""
Extract CA certificates from eIDAS Trusted Lists.
"""

from ca_extractor.errors import (
    CaExtractorError,
    CertificateExtractionError,
    InvalidCountryCode,
    InvalidResponseFormat,
    InvalidServiceType,
    NoCertificatesFound,
)
from ca_extractor.extractor import (
    CertificateExtractor,
    check_xml_response,
    extract_certificates,
    validate_country_code,
    wrap_pem,
)
from ca_extractor.service import ServiceSelector

__version__ = "1.0.0"

__all__ = [
    "CaExtractorError",
    "CertificateExtractionError",
    "CertificateExtractor",
    "InvalidCountryCode",
    "InvalidResponseFormat",
    "InvalidServiceType",
    "NoCertificatesFound",
    "ServiceSelector",
    "check_xml_response",
    "extract_certificates",
    "validate_country_code",
    "wrap_pem",
]
