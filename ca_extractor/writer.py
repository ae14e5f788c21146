# ca_extractor/writer.py

"""
Writing extracted certificates to disk.
"""

import os
from typing import List

from ca_extractor.utils.logger import get_logger
from ca_extractor.utils.settings import PEM_FILENAME_TEMPLATE

LOG = get_logger(__name__)


def ensure_directory(path: str) -> None:
    """
    Ensure that the directory `path` exists. If it does not, create it (recursively).

    :param path: Directory path to create or verify
    """
    if not os.path.isdir(path):
        LOG.debug("Creating directory %s", path)
        os.makedirs(path, exist_ok=True)


def write_text_file(path: str, content: str, encoding: str = "utf-8") -> None:
    """
    Write `content` to `path` with LF line endings on every platform.
    """
    with open(path, mode="w", encoding=encoding, newline="\n") as f:
        f.write(content)


def pem_filename(country: str, index: int) -> str:
    return PEM_FILENAME_TEMPLATE.format(country=country, index=index)


def write_certificates(target_folder: str, country: str, certificates: List[str]) -> List[str]:
    """
    Write each PEM string to `<target_folder>/<country>_<index>.pem`.

    :param target_folder: Output directory, created if missing
    :param country: Country code used as filename prefix
    :param certificates: PEM strings, in the order they were extracted
    :return: Paths of the written files, in the same order
    """
    ensure_directory(target_folder)
    written = []
    for index, pem in enumerate(certificates):
        path = os.path.join(target_folder, pem_filename(country, index))
        write_text_file(path, pem)
        LOG.debug("Wrote %s", path)
        written.append(path)
    return written
