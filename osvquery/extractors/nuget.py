from osvquery.core.config import ParserConfig
from osvquery.core.errors import InvalidReferencePattern
from osvquery.extractors.base import BaseExtractor
from osvquery.extractors.base import Extraction
from osvquery.models.ecosystem import Ecosystem
from osvquery.models.query import Package
from osvquery.models.query import VulnerabilityQuery


class NugetExtractor(BaseExtractor):
    """`packageName[/version]`"""
    scheme = 'nuget'
    pattern = '<name>[/<version>]'

    def extract(self, locator: str, config: ParserConfig) -> Extraction:
        parts = locator.split('/')
        name = parts[0]
        if not name:
            raise InvalidReferencePattern(locator, self.pattern)
        version = parts[1] if len(parts) > 1 and parts[1] else None

        purl = f"pkg:nuget/{name}"
        if version:
            purl += f"@{version}"

        package = Package(name=name, ecosystem=Ecosystem.NUGET.value, purl=purl)
        return Extraction(query=VulnerabilityQuery.for_package(package, version))
