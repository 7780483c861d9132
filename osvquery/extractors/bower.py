from osvquery.core.config import ParserConfig
from osvquery.core.errors import InvalidReferencePattern
from osvquery.extractors.base import BaseExtractor
from osvquery.extractors.base import Extraction
from osvquery.models.query import Package
from osvquery.models.query import VulnerabilityQuery


class BowerExtractor(BaseExtractor):
    """
    `packageSpec[#version]`

    OSV has no Bower ecosystem, so the package keeps the fallback ecosystem
    and no purl.
    """
    scheme = 'bower'
    pattern = '<name>[#<version>]'

    def extract(self, locator: str, config: ParserConfig) -> Extraction:
        parts = locator.split('#')
        name = parts[0]
        if not name:
            raise InvalidReferencePattern(locator, self.pattern)
        version = parts[1] if len(parts) > 1 and parts[1] else None

        return Extraction(query=VulnerabilityQuery.for_package(Package(name=name), version))
