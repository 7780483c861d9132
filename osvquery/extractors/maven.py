from osvquery.core.config import ParserConfig
from osvquery.core.errors import InvalidReferencePattern
from osvquery.extractors.base import BaseExtractor
from osvquery.extractors.base import Extraction
from osvquery.models.ecosystem import Ecosystem
from osvquery.models.query import Package
from osvquery.models.query import VulnerabilityQuery


class MavenCentralExtractor(BaseExtractor):
    """`groupId:artifactId[:version]`"""
    scheme = 'maven-central'
    pattern = '<groupId>:<artifactId>[:<version>]'

    def extract(self, locator: str, config: ParserConfig) -> Extraction:
        parts = locator.split(':')
        if len(parts) < 2 or not parts[0] or not parts[1]:
            raise InvalidReferencePattern(
                locator, self.pattern,
                message=f"Maven central locator '{locator}' must have at least the group and artifact",
            )
        group, artifact = parts[0], parts[1]
        version = parts[2] if len(parts) > 2 and parts[2] else None

        name = f"{group}:{artifact}" if config.use_maven_group_in_pkg_name else artifact
        purl = f"pkg:maven/{group}/{artifact}"
        if version:
            purl += f"@{version}"

        package = Package(name=name, ecosystem=Ecosystem.MAVEN.value, purl=purl)
        return Extraction(query=VulnerabilityQuery.for_package(package, version))
