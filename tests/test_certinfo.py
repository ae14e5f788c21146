import pytest

from ca_extractor.certinfo import describe_certificate, load_certificate
from ca_extractor.errors import InvalidCertificateFormat
from ca_extractor.extractor import extract_certificates, wrap_pem
from samples import QWAC_URI, indented, trusted_list


def test_describe_extracted_certificate(self_signed_pem):
    pem = extract_certificates(trusted_list((indented(self_signed_pem), QWAC_URI)), "DE", "QWAC")[0]
    summary = describe_certificate(pem)
    assert "subject=CN=Test Root CA,C=DE" in summary
    assert "issuer=CN=Test Root CA,C=DE" in summary
    assert "serial=1234" in summary
    assert "not_after=" in summary


def test_load_certificate(self_signed_pem):
    cert = load_certificate(self_signed_pem)
    assert cert.serial_number == 0x1234


def test_undecodable_certificate():
    with pytest.raises(InvalidCertificateFormat):
        describe_certificate(wrap_pem("bm90IGEgY2VydGlmaWNhdGU="))
