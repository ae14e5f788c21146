#!/usr/bin/env python3
"""
Entry point for the ca-extractor CLI.

Downloads the eIDAS Trusted List of one country and writes the certificates
of the selected qualified service type as PEM files.

Usage examples:
  ca-extractor QWAC DE
  ca-extractor QSealC FR --target-folder certs/fr -v
  ca-extractor QWAC AT --strict --config ca_extractor.toml
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from colorama import Fore, Style, just_fix_windows_console

from ca_extractor.certinfo import describe_certificate
from ca_extractor.config import Config
from ca_extractor.errors import CaExtractorError, InvalidCertificateFormat
from ca_extractor.extractor import CertificateExtractor, validate_country_code
from ca_extractor.fetcher import TrustedListClient
from ca_extractor.service import ServiceSelector
from ca_extractor.utils.logger import get_logger, set_level
from ca_extractor.utils.settings import ENV_DISABLE_COLORS
from ca_extractor.writer import write_certificates

LOG = get_logger(__name__)


def _print_error(message) -> None:
    text = f"Error: {message}"
    if not os.getenv(ENV_DISABLE_COLORS):
        text = f"{Fore.RED}{text}{Style.RESET_ALL}"
    print(text, file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    services = "\n".join(
        f"  {member.label:<7} {member.description}" for member in ServiceSelector
    )
    parser = argparse.ArgumentParser(
        prog="ca-extractor",
        description=(
            "Extract CA certificates from the eIDAS Trusted List of an EEA country.\n\n"
            "SERVICE can be:\n" + services
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "service", nargs="?", metavar="SERVICE",
        help="Type of service to retrieve certificates for (" + " or ".join(ServiceSelector.tokens()) + ")"
    )
    parser.add_argument(
        "country", nargs="?", metavar="COUNTRY",
        help="ISO 3166-1 alpha-2 country code (only EEA countries are supported)"
    )
    parser.add_argument(
        "--target-folder", "--target_folder", dest="target_folder",
        help="Folder to save certificate files in (default: config value or '.')"
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to a TOML config file. If omitted, searches the cwd for ca_extractor.toml, etc."
    )
    parser.add_argument(
        "--strict", action="store_true",
        help="Only keep certificates of services advertising the selected service type URI"
    )
    parser.add_argument(
        "--timeout", type=float,
        help="HTTP timeout in seconds (default: config value or 30)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable verbose logging"
    )
    return parser


def _log_certificate_summaries(paths: List[str], certificates: List[str]) -> None:
    for path, pem in zip(paths, certificates):
        try:
            LOG.debug("%s: %s", path, describe_certificate(pem))
        except InvalidCertificateFormat as e:
            LOG.warning("%s: %s", path, e)


def run(args: argparse.Namespace) -> int:
    """Execute one extraction. Returns the process exit code."""
    # 1) Validate user input before any network or parse work
    try:
        service = ServiceSelector.from_token(args.service)
        country = validate_country_code(args.country)
    except CaExtractorError as e:
        _print_error(e)
        return 1

    try:
        # 2) Load configuration; CLI flags win
        config = Config.load(args.config)
        target_folder = args.target_folder or config.target_folder
        timeout = args.timeout if args.timeout is not None else config.timeout
        strict = args.strict or config.strict_service_match

        extractor = CertificateExtractor(service, country, strict=strict)
        LOG.debug("Using %r", extractor)

        # 3) Download and extract
        with TrustedListClient(
            base_url=config.base_url,
            timeout=timeout,
            retries=config.retries,
            user_agent=config.user_agent,
        ) as client:
            xml_content = client.fetch(country)
        certificates = extractor.extract(xml_content)
        LOG.info("Found %d certificate(s) for %s/%s", len(certificates), country, service)

        # 4) Write one PEM file per certificate
        paths = write_certificates(target_folder, country, certificates)
    except CaExtractorError as e:
        LOG.debug("Extraction failed", exc_info=True)
        _print_error(e)
        return 1
    except OSError as e:
        _print_error(f"Cannot write certificates: {e}")
        return 1

    if LOG.isEnabledFor(logging.DEBUG):
        _log_certificate_summaries(paths, certificates)

    for path in paths:
        print(f"Wrote {path}")
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    just_fix_windows_console()
    parser = build_parser()
    args = parser.parse_args(argv)

    # Missing positionals: show usage, not an error
    if args.service is None or args.country is None:
        parser.print_usage(sys.stderr)
        sys.exit(0)

    if args.verbose:
        set_level(logging.DEBUG)

    sys.exit(run(args))


if __name__ == "__main__":
    main()
