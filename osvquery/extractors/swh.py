import re

from osvquery.core.config import ParserConfig
from osvquery.core.errors import InvalidReferencePattern
from osvquery.extractors.base import BaseExtractor
from osvquery.extractors.base import Extraction
from osvquery.models.query import VulnerabilityQuery

SWH_PATTERN = re.compile(r'swh:1:(?P<kind>cnt|dir|rev|rel|snp):(?P<hash>[0-9a-f]{40})')


class SwhExtractor(BaseExtractor):
    """Software Heritage identifiers: `swh:1:<kind>:<sha1>`."""
    scheme = 'swh'

    def extract(self, locator: str, config: ParserConfig) -> Extraction:
        match = SWH_PATTERN.fullmatch(locator)
        if not match:
            raise InvalidReferencePattern(locator, SWH_PATTERN.pattern)
        return Extraction(query=VulnerabilityQuery.for_commit(match.group('hash')))
