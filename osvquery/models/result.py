from pydantic import BaseModel
from pydantic import ConfigDict

from osvquery.models.query import CpeAttributes
from osvquery.models.query import VulnerabilityQuery
from osvquery.models.reference import Reference


class ParseResult(BaseModel):
    """Outcome of parsing one external reference. Read-only."""
    reference: Reference
    query: VulnerabilityQuery | None = None
    cpe_attributes: CpeAttributes | None = None
    use_maven_group_in_pkg_name: bool = True

    model_config = ConfigDict(frozen=True)

    def uses_maven_group_in_pkg_name(self) -> bool:
        return self.use_maven_group_in_pkg_name

    @property
    def is_supported(self) -> bool:
        """False when the reference type has no extractor."""
        return self.query is not None or self.cpe_attributes is not None
