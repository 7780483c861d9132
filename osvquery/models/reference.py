from enum import Enum

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class ReferenceType(str, Enum):
    """
    SPDX external reference types that can be turned into a vulnerability query.

    Declaration order is the match priority used by `from_identifier`.
    """
    CPE22 = 'cpe22Type'
    CPE23 = 'cpe23Type'
    MAVEN_CENTRAL = 'maven-central'
    NPM = 'npm'
    NUGET = 'nuget'
    BOWER = 'bower'
    PURL = 'purl'
    SWH = 'swh'

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.value

    def matches(self, identifier: str) -> bool:
        """True if `identifier` is this type's token or a URI ending in `/<token>`."""
        return identifier == self.value or identifier.endswith(f"/{self.value}")

    @classmethod
    def from_identifier(cls, identifier: str) -> 'ReferenceType | None':
        """
        Classify a reference-type identifier.

        Accepts both the RDF form
        (http://spdx.org/rdf/references/purl) and the bare token used by
        SPDX JSON and tag-value documents (purl). Returns None for types
        that have no extractor.
        """
        for reference_type in cls:
            if reference_type.matches(identifier):
                return reference_type
        return None


class Reference(BaseModel):
    """One SPDX external reference: a type identifier plus a locator string."""
    reference_type: str = Field(alias='referenceType')
    reference_locator: str = Field(alias='referenceLocator')

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra='ignore',
    )
