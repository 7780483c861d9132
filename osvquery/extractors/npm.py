from osvquery.core.config import ParserConfig
from osvquery.core.errors import InvalidReferencePattern
from osvquery.extractors.base import BaseExtractor
from osvquery.extractors.base import Extraction
from osvquery.models.ecosystem import Ecosystem
from osvquery.models.query import Package
from osvquery.models.query import VulnerabilityQuery


def split_npm_locator(locator: str) -> tuple[str, str | None]:
    """
    Split `name[@version]` into name and version.

    A leading `@` marks a scoped package (@scope/name) and is part of the name.
    """
    separator = locator.rfind('@')
    if separator <= 0:
        return locator, None
    return locator[:separator], locator[separator + 1:] or None


class NpmExtractor(BaseExtractor):
    """`packageName[@version]`"""
    scheme = 'npm'
    pattern = '[@<scope>/]<name>[@<version>]'

    def extract(self, locator: str, config: ParserConfig) -> Extraction:
        name, version = split_npm_locator(locator)
        if not name or name == '@':
            raise InvalidReferencePattern(locator, self.pattern)

        purl = 'pkg:npm/' + name.replace('@', '%40')
        if version:
            purl += f"@{version}"

        package = Package(name=name, ecosystem=Ecosystem.NPM.value, purl=purl)
        return Extraction(query=VulnerabilityQuery.for_package(package, version))
