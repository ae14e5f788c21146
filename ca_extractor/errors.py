# ca_extractor/errors.py

"""
Exception hierarchy for ca_extractor.

Every failure the package raises on purpose derives from CaExtractorError,
so the CLI can render them uniformly. Errors coming from the standard library
(e.g. OSError while writing files) are left to propagate unchanged.
"""


class CaExtractorError(Exception):
    """Base class for all ca_extractor errors."""


class InvalidServiceType(CaExtractorError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(
            f"Invalid service type: {token!r}. Must be 'QWAC' or 'QSealC'."
        )


class InvalidCountryCode(CaExtractorError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(
            f"Invalid country code: {code!r}. Must be a 2-letter ISO country code."
        )


class InvalidResponseFormat(CaExtractorError):
    """The downloaded document does not look like XML."""


class CertificateExtractionError(CaExtractorError):
    """The document looked like XML but could not be scanned."""


class NoCertificatesFound(CaExtractorError):
    def __init__(self, country: str, service: str):
        self.country = country
        self.service = service
        super().__init__(
            f"No certificates found for country {country} and service {service}"
        )


class InvalidCertificateFormat(CaExtractorError):
    """A PEM block could not be decoded as an X.509 certificate."""


class DownloadError(CaExtractorError):
    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to download {url}: {reason}")


class ConfigError(CaExtractorError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load configuration from {path}: {reason}")
