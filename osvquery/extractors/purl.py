import re

from osvquery.core.config import ParserConfig
from osvquery.core.errors import InvalidReferencePattern
from osvquery.extractors.base import BaseExtractor
from osvquery.extractors.base import Extraction
from osvquery.models.ecosystem import purl_type_to_ecosystem
from osvquery.models.query import Package
from osvquery.models.query import VulnerabilityQuery

PURL_PATTERN = re.compile(
    r'pkg:(?P<type>[^?/#@]+)/'
    r'((?P<namespace>[^?#]+)/)?'
    r'(?P<name>[^?#@/]+)'
    r'(@(?P<version>[^?#]+))?'
    r'(\?[^#]+)?'
    r'(#.+)?',
)

# Types whose "version" is a git revision rather than a release
COMMIT_TYPES = frozenset({'github', 'bitbucket'})
DOCKER_DIGEST_PREFIX = 'sha256:'


class PurlExtractor(BaseExtractor):
    """
    Package URLs: `pkg:<type>/[<namespace>/]<name>[@<version>][?qualifiers][#subpath]`.

    Qualifiers and subpath are accepted but not used. Source repositories
    (github, bitbucket) and docker images pinned by digest become commit
    queries, everything else a package query whose purl is the locator.
    """
    scheme = 'purl'

    def extract(self, locator: str, config: ParserConfig) -> Extraction:
        # Version separators are sometimes pre-escaped
        match = PURL_PATTERN.fullmatch(locator.replace('%40', '@'))
        if not match:
            raise InvalidReferencePattern(locator, PURL_PATTERN.pattern)

        purl_type = match.group('type')
        namespace = match.group('namespace')
        name = match.group('name')
        version = match.group('version')

        if purl_type in COMMIT_TYPES:
            if not version:
                raise InvalidReferencePattern(
                    locator, PURL_PATTERN.pattern,
                    message=f"Purl reference locator '{locator}' has no commit for type '{purl_type}'",
                )
            return Extraction(query=VulnerabilityQuery.for_commit(version))

        if purl_type == 'docker' and version and version.startswith(DOCKER_DIGEST_PREFIX):
            digest = version[len(DOCKER_DIGEST_PREFIX):]
            if not digest:
                raise InvalidReferencePattern(locator, PURL_PATTERN.pattern)
            return Extraction(query=VulnerabilityQuery.for_commit(digest))

        if purl_type == 'maven':
            if config.use_maven_group_in_pkg_name and namespace:
                name = namespace.replace('/', '.') + ':' + name
        elif namespace:
            name = f"{namespace}/{name}"

        package = Package(
            name=name,
            ecosystem=purl_type_to_ecosystem(purl_type),
            purl=locator,
        )
        return Extraction(query=VulnerabilityQuery.for_package(package, version))
