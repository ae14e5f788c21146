import os

from ca_extractor.extractor import wrap_pem
from ca_extractor.writer import pem_filename, write_certificates


def test_pem_filename():
    assert pem_filename("DE", 0) == "DE_0.pem"
    assert pem_filename("el", 12) == "el_12.pem"


def test_write_certificates_creates_folder(tmp_path):
    target = tmp_path / "certs" / "de"
    pems = [wrap_pem("QUFB"), wrap_pem("QkJC")]

    written = write_certificates(str(target), "DE", pems)

    assert written == [str(target / "DE_0.pem"), str(target / "DE_1.pem")]
    for path, pem in zip(written, pems):
        with open(path, "rb") as f:
            assert f.read() == pem.encode("utf-8")


def test_write_certificates_existing_folder(tmp_path):
    (tmp_path / "DE_0.pem").write_text("old")
    written = write_certificates(str(tmp_path), "DE", [wrap_pem("Q0ND")])
    assert len(written) == 1
    assert (tmp_path / "DE_0.pem").read_text().endswith("-----END CERTIFICATE-----\n")
    assert sorted(os.listdir(tmp_path)) == ["DE_0.pem"]
