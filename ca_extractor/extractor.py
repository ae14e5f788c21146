# ca_extractor/extractor.py

"""
Certificate extraction from eIDAS Trusted List documents.

The extractor takes the raw text of a Trusted List and returns the embedded
X.509 certificates as PEM strings, in document order. It works in three
stages:

  1. check_xml_response() rejects bodies that are obviously not XML (for
     instance a JSON error payload from the download endpoint) before any
     parser sees them.
  2. An element-aware scan collects the character data found directly
     inside TSPService elements and looks for literal
     <tsl:X509Certificate> blocks in it. When that finds nothing, the raw
     text is split on the literal tag instead.
  3. Each payload is stripped of whitespace and re-wrapped as PEM.

With a service URI the scan is replaced by a tree walk that keeps only the
services advertising that URI in their ServiceInformation.

Nothing here touches the network or the filesystem.
"""

from typing import List, Optional

from lxml import etree

from ca_extractor.errors import (
    CertificateExtractionError,
    InvalidCountryCode,
    InvalidResponseFormat,
    NoCertificatesFound,
)
from ca_extractor.service import ServiceSelector
from ca_extractor.utils.logger import get_logger
from ca_extractor.utils.settings import (
    CERT_CLOSE_TAG,
    CERT_OPEN_TAG,
    PEM_FOOTER,
    PEM_HEADER,
    PEM_LINE_WIDTH,
    RESPONSE_SNIPPET_LENGTH,
    SERVICE_ELEMENT,
)

LOG = get_logger(__name__)


def validate_country_code(country: str) -> str:
    """
    Return `country` unchanged if it is exactly two characters long.

    Membership in the EEA is not checked here; the download endpoint is the
    authority on which countries exist.
    """
    if len(country) != 2:
        raise InvalidCountryCode(country)
    return country


def check_xml_response(text: str) -> str:
    """
    Return `text` without surrounding whitespace, or raise
    InvalidResponseFormat unless it looks like an XML document.

    Only the first non-whitespace characters are inspected, so this never
    fails on content the XML parser would later reject.
    """
    trimmed = text.strip()
    if trimmed.startswith("<?xml") or trimmed.startswith("<"):
        return trimmed

    if trimmed.startswith("{") or trimmed.startswith("["):
        snippet = trimmed[:RESPONSE_SNIPPET_LENGTH]
        raise InvalidResponseFormat(
            f"Received a JSON-like response instead of XML: {snippet}"
        )
    raise InvalidResponseFormat(
        "The response does not appear to be an XML document"
    )


def wrap_pem(payload: str) -> str:
    """
    Format a base64 certificate payload as a PEM block.

    All whitespace inside `payload` is dropped and the remaining text is
    wrapped at 64 columns, so re-wrapping a PEM body yields the same lines.
    """
    cleaned = "".join(payload.split())
    lines = [
        cleaned[i:i + PEM_LINE_WIDTH]
        for i in range(0, len(cleaned), PEM_LINE_WIDTH)
    ]
    return "\n".join([PEM_HEADER, *lines, PEM_FOOTER]) + "\n"


class _ServiceTextCollector:
    """
    lxml parser target that records character data appearing while the most
    recently opened element is a TSPService.

    Any closing tag resets the tracked element, so text that follows a nested
    child is not attributed to the enclosing TSPService.
    """

    def __init__(self):
        self.fragments: List[str] = []
        self._current = ""
        self._buffer: List[str] = []

    def _flush(self):
        if self._buffer:
            text = "".join(self._buffer)
            self._buffer = []
            if text.strip():
                self.fragments.append(text)

    def start(self, tag, attrib, nsmap=None):
        self._flush()
        self._current = etree.QName(tag).localname

    def end(self, tag):
        self._flush()
        self._current = ""

    def data(self, data):
        if self._current == SERVICE_ELEMENT:
            self._buffer.append(data)

    def close(self):
        self._flush()
        return self.fragments


def _new_parser(target=None) -> etree.XMLParser:
    # Entities and DTD fetching stay off: the document comes from the network.
    return etree.XMLParser(
        target=target,
        encoding="utf-8",
        resolve_entities=False,
        no_network=True,
        huge_tree=True,
    )


def _parse(xml_text: str, parser: etree.XMLParser):
    try:
        return etree.fromstring(xml_text.encode("utf-8"), parser)
    except (etree.XMLSyntaxError, etree.ParserError) as exc:
        LOG.debug("XML parser error: %s", exc)
        raise CertificateExtractionError(
            "Failed to parse the response as XML"
        ) from exc


def _scan_service_fragments(xml_text: str) -> List[str]:
    return _parse(xml_text, _new_parser(_ServiceTextCollector()))


def _payload_in_fragment(fragment: str) -> Optional[str]:
    start = fragment.find(CERT_OPEN_TAG)
    if start < 0:
        return None
    start += len(CERT_OPEN_TAG)
    end = fragment.find(CERT_CLOSE_TAG)
    if end < start:
        return None
    return fragment[start:end]


def _payloads_by_literal_split(xml_text: str) -> List[str]:
    payloads = []
    for piece in xml_text.split(CERT_OPEN_TAG)[1:]:
        end = piece.find(CERT_CLOSE_TAG)
        if end < 0:
            continue
        payloads.append(piece[:end])
    return payloads


def _local(name: str) -> str:
    return f"*[local-name()='{name}']"


def _payloads_for_service_uri(xml_text: str, service_uri: str) -> List[str]:
    root = _parse(xml_text, _new_parser())
    payloads = []
    for service in root.xpath(f"//{_local(SERVICE_ELEMENT)}"):
        for info in service.xpath(_local("ServiceInformation")):
            uris = [
                "".join(el.itertext()).strip()
                for el in info.xpath(f".//{_local('URI')}")
            ]
            if service_uri not in uris:
                continue
            certs = info.xpath(
                f"{_local('ServiceDigitalIdentity')}//{_local('X509Certificate')}"
            )
            payloads.extend("".join(cert.itertext()) for cert in certs)
    return payloads


def _to_pem_list(payloads: List[str]) -> List[str]:
    certificates = []
    for payload in payloads:
        if not payload.strip():
            LOG.debug("Skipping empty certificate payload")
            continue
        certificates.append(wrap_pem(payload))
    return certificates


def extract_certificates(
    xml_text: str,
    country: str,
    service,
    service_uri: Optional[str] = None,
) -> List[str]:
    """
    Extract the certificates embedded in a Trusted List document.

    :param xml_text: Raw document text as downloaded
    :param country: Country code, used for error reporting only
    :param service: Service label (or ServiceSelector), for error reporting
    :param service_uri: When set, only services whose ServiceInformation
        lists this URI contribute certificates
    :return: Non-empty list of PEM strings in document order
    :raises InvalidResponseFormat: the text is not XML-like
    :raises CertificateExtractionError: the XML could not be parsed
    :raises NoCertificatesFound: no certificate payload was found
    """
    service = str(service)
    # The XML declaration must be the first thing the parser sees
    xml_text = check_xml_response(xml_text)

    if service_uri:
        LOG.debug("Filtering services by URI %s", service_uri)
        certificates = _to_pem_list(_payloads_for_service_uri(xml_text, service_uri))
    else:
        fragments = _scan_service_fragments(xml_text)
        LOG.debug("Collected %d %s text fragment(s)", len(fragments), SERVICE_ELEMENT)

        payloads = []
        for fragment in fragments:
            payload = _payload_in_fragment(fragment)
            if payload is not None:
                payloads.append(payload)
        certificates = _to_pem_list(payloads)

        if not certificates and CERT_OPEN_TAG in xml_text:
            LOG.debug("Element scan found no certificate, splitting on %s", CERT_OPEN_TAG)
            certificates = _to_pem_list(_payloads_by_literal_split(xml_text))

    if not certificates:
        raise NoCertificatesFound(country, service)

    LOG.debug("Extracted %d certificate(s) for %s/%s", len(certificates), country, service)
    return certificates


class CertificateExtractor:
    """
    Extraction bound to one country and service type.

    The country code is validated on construction. With `strict=True` only
    services advertising the selected service URI are considered.
    """

    def __init__(self, service: ServiceSelector, country: str, strict: bool = False):
        self.service = service
        self.country = validate_country_code(country)
        self.strict = strict

    def extract(self, xml_text: str) -> List[str]:
        return extract_certificates(
            xml_text,
            self.country,
            self.service.label,
            service_uri=self.service.uri if self.strict else None,
        )

    def __repr__(self):
        return (
            f"CertificateExtractor(service={self.service.label!r}, "
            f"country={self.country!r}, strict={self.strict})"
        )
