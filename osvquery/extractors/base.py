from abc import ABC
from abc import abstractmethod
from dataclasses import dataclass

from osvquery.core.config import ParserConfig
from osvquery.models.query import CpeAttributes
from osvquery.models.query import VulnerabilityQuery


@dataclass(frozen=True)
class Extraction:
    """What an extractor found in a locator."""
    query: VulnerabilityQuery | None = None
    cpe_attributes: CpeAttributes | None = None


class BaseExtractor(ABC):
    """
    Turns the locator of one reference type into an Extraction.

    Implementations are stateless; raise a ReferenceParseError subclass for
    locators that do not follow the scheme's grammar.
    """
    scheme: str = ''

    @abstractmethod
    def extract(self, locator: str, config: ParserConfig) -> Extraction:
        ...
