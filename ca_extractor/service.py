# ca_extractor/service.py

"""
Supported qualified trust-service types.
"""

from enum import Enum

from ca_extractor.errors import InvalidServiceType

_SVC_INFO_EXT = "http://uri.etsi.org/TrstSvc/TrustedList/SvcInfoExt/"


class ServiceSelector(Enum):
    """
    A qualified certificate type, identified on the command line by its
    token. Each member carries the Trusted List service-information
    extension URI that marks services of that type.
    """

    WEBSITE_AUTH = "QWAC"
    ELECTRONIC_SEAL = "QSealC"

    @classmethod
    def from_token(cls, token: str) -> "ServiceSelector":
        # Case-sensitive on purpose: "qwac" is rejected
        for member in cls:
            if member.value == token:
                return member
        raise InvalidServiceType(token)

    @classmethod
    def tokens(cls):
        return [member.value for member in cls]

    @property
    def label(self) -> str:
        return self.value

    @property
    def uri(self) -> str:
        return _SERVICE_URIS[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    def __str__(self) -> str:
        return self.value


_SERVICE_URIS = {
    ServiceSelector.WEBSITE_AUTH: _SVC_INFO_EXT + "ForWebSiteAuthentication",
    ServiceSelector.ELECTRONIC_SEAL: _SVC_INFO_EXT + "ForeSeals",
}

_DESCRIPTIONS = {
    ServiceSelector.WEBSITE_AUTH: "Qualified certificate for website authentication",
    ServiceSelector.ELECTRONIC_SEAL: "Qualified certificate for electronic seal",
}
