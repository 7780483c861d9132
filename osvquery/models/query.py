from enum import Enum
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator

from osvquery.models.ecosystem import DEFAULT_ECOSYSTEM
from osvquery.models.ecosystem import Ecosystem


class Package(BaseModel):
    """
    A package as understood by OSV: name, ecosystem and optional purl.

    The ecosystem is restricted to the Ecosystem names and stored as its
    plain string value.
    """
    name: str = Field(min_length=1)
    ecosystem: Ecosystem = Field(default=DEFAULT_ECOSYSTEM, validate_default=True)
    purl: str | None = None

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    @property
    def purl_has_version(self) -> bool:
        """Whether the purl pins a version (`@version` after the name)."""
        if self.purl is None:
            return False
        path = self.purl.split('#', 1)[0].split('?', 1)[0]
        last_segment = path.rsplit('/', 1)[-1]
        return '@' in last_segment or '%40' in last_segment


class VulnerabilityQuery(BaseModel):
    """
    A single OSV query.

    Either a package-query (package plus optional version) or a
    commit-query (commit or content digest). Never both.
    """
    package: Package | None = None
    version: str | None = None
    commit: str | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def check_shape(self) -> 'VulnerabilityQuery':
        if (self.package is None) == (self.commit is None):
            raise ValueError('Exactly one of package or commit must be set')
        if self.commit is not None and self.version is not None:
            raise ValueError('A commit query cannot carry a version')
        return self

    @classmethod
    def for_package(cls, package: Package, version: str | None = None) -> 'VulnerabilityQuery':
        return cls(package=package, version=version or None)

    @classmethod
    def for_commit(cls, commit: str) -> 'VulnerabilityQuery':
        return cls(commit=commit)

    @property
    def is_commit_query(self) -> bool:
        return self.commit is not None

    @property
    def is_package_query(self) -> bool:
        return self.package is not None

    def to_request(self) -> dict[str, Any]:
        """
        Render the body of an OSV /v1/query request.

        OSV identifies a package either by purl or by name and ecosystem,
        never both. The purl is preferred when there is one. A version is
        only sent next to a purl that does not already pin one.
        """
        if self.commit is not None:
            return {'commit': self.commit}
        if self.package.purl is not None:
            request: dict[str, Any] = {'package': {'purl': self.package.purl}}
            if self.version is not None and not self.package.purl_has_version:
                request['version'] = self.version
            return request
        request = {
            'package': {'name': self.package.name, 'ecosystem': self.package.ecosystem},
        }
        if self.version is not None:
            request['version'] = self.version
        return request


class CpePart(str, Enum):
    APPLICATION = 'a'
    OPERATING_SYSTEM = 'o'
    HARDWARE = 'h'

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.value


class CpeAttributes(BaseModel):
    """CPE fields other than product and version, kept for diagnostics."""
    part: CpePart | None = None
    vendor: str | None = None
    update: str | None = None
    edition: str | None = None
    language: str | None = None
    sw_edition: str | None = None
    target_sw: str | None = None
    target_hw: str | None = None
    other: str | None = None

    model_config = ConfigDict(frozen=True)
