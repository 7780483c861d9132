from osvquery.extractors.base import BaseExtractor
from osvquery.extractors.bower import BowerExtractor
from osvquery.extractors.cpe import CpeExtractor
from osvquery.extractors.maven import MavenCentralExtractor
from osvquery.extractors.npm import NpmExtractor
from osvquery.extractors.nuget import NugetExtractor
from osvquery.extractors.purl import PurlExtractor
from osvquery.extractors.swh import SwhExtractor
from osvquery.models.reference import ReferenceType


class ExtractorFactory:
    _MAPPING = {
        ReferenceType.CPE22: CpeExtractor,
        ReferenceType.CPE23: CpeExtractor,
        ReferenceType.MAVEN_CENTRAL: MavenCentralExtractor,
        ReferenceType.NPM: NpmExtractor,
        ReferenceType.NUGET: NugetExtractor,
        ReferenceType.BOWER: BowerExtractor,
        ReferenceType.PURL: PurlExtractor,
        ReferenceType.SWH: SwhExtractor,
    }

    @staticmethod
    def get_extractor(reference_type: ReferenceType) -> BaseExtractor:
        extractor_cls = ExtractorFactory._MAPPING.get(reference_type)
        if extractor_cls:
            return extractor_cls()
        else:
            raise ValueError(f"Unsupported reference type: {reference_type}")
