# ca_extractor/utils/settings.py

"""
Default settings and constants for ca_extractor.

This module centralizes:
  - The Trusted List browser download endpoint
  - The literal tags and PEM markers used by the extractor
  - Default network settings for the document reader
  - Environment variable names
"""

from typing import List

# -----------------------------------------------------------------------------
# Trusted List source
# -----------------------------------------------------------------------------
DEFAULT_BASE_URL = "https://eidas.ec.europa.eu/efda/tl-browser/api/v1/browser/download"
DEFAULT_TIMEOUT = 30        # seconds
DEFAULT_RETRIES = 3
DEFAULT_USER_AGENT = "ca-extractor/1.0"
RETRY_STATUS_CODES: List[int] = [502, 503, 504]

# -----------------------------------------------------------------------------
# Extraction
# -----------------------------------------------------------------------------
SERVICE_ELEMENT = "TSPService"
CERT_OPEN_TAG = "<tsl:X509Certificate>"
CERT_CLOSE_TAG = "</tsl:X509Certificate>"

PEM_HEADER = "-----BEGIN CERTIFICATE-----"
PEM_FOOTER = "-----END CERTIFICATE-----"
PEM_LINE_WIDTH = 64

# Characters of a non-XML response quoted back in error messages
RESPONSE_SNIPPET_LENGTH = 100

# -----------------------------------------------------------------------------
# Output
# -----------------------------------------------------------------------------
DEFAULT_TARGET_FOLDER = "."
PEM_FILENAME_TEMPLATE = "{country}_{index}.pem"

# -----------------------------------------------------------------------------
# Environment variable names for overriding behavior
# -----------------------------------------------------------------------------
ENV_LOG_LEVEL = "CA_EXTRACTOR_LOG"           # e.g., set to "DEBUG", "INFO", etc.
ENV_DISABLE_COLORS = "CA_EXTRACTOR_NO_COLOR"  # if set, disable terminal colors
