"""
CPE 2.2 URI and CPE 2.3 formatted string decomposition.

Only the tuple is recovered: no dictionary lookup, no matching. Logical
values (ANY `*`, NA `-`) and empty 2.2 components are returned as None.
Wildcards (`*`, `?`) at either end of a 2.3 value are kept as written.
"""
import re
from dataclasses import dataclass
from urllib.parse import unquote

from osvquery.core.config import ParserConfig
from osvquery.core.errors import MalformedCpe
from osvquery.extractors.base import BaseExtractor
from osvquery.extractors.base import Extraction
from osvquery.models.query import CpeAttributes
from osvquery.models.query import CpePart
from osvquery.models.query import Package
from osvquery.models.query import VulnerabilityQuery

CPE22_PREFIX = 'cpe:/'
CPE23_PREFIX = 'cpe:2.3:'
CPE23_COMPONENT_COUNT = 11
CPE22_MAX_COMPONENTS = 7
# ~edition~sw_edition~target_sw~target_hw~other
PACKED_EDITION_COUNT = 6

ANY = '*'
NA = '-'

# Unreserved characters or backslash-quoted punctuation, wildcards only at the ends
FORMATTED_VALUE = re.compile(
    r'(\*|\?+)?(?:[A-Za-z0-9._-]|\\[^A-Za-z0-9\s])+(\*|\?+)?',
)
# Unreserved characters or percent-encoded octets
URI_VALUE = re.compile(r'(?:[A-Za-z0-9._-]|%[0-9A-Fa-f]{2})+')


@dataclass(frozen=True)
class CpeName:
    part: CpePart | None = None
    vendor: str | None = None
    product: str | None = None
    version: str | None = None
    update: str | None = None
    edition: str | None = None
    language: str | None = None
    sw_edition: str | None = None
    target_sw: str | None = None
    target_hw: str | None = None
    other: str | None = None

    def attributes(self) -> CpeAttributes:
        return CpeAttributes(
            part=self.part,
            vendor=self.vendor,
            update=self.update,
            edition=self.edition,
            language=self.language,
            sw_edition=self.sw_edition,
            target_sw=self.target_sw,
            target_hw=self.target_hw,
            other=self.other,
        )


def _to_part(value: str | None, cpe: str) -> CpePart | None:
    if value is None:
        return None
    try:
        return CpePart(value.lower())
    except ValueError:
        raise MalformedCpe(cpe, f"unknown part '{value}', expected one of a, o, h")


def _split_formatted(body: str, cpe: str) -> list[str]:
    """Split on colons that are not escaped with a backslash."""
    components = []
    current = []
    escaped = False
    for char in body:
        if escaped:
            current.append('\\' + char)
            escaped = False
        elif char == '\\':
            escaped = True
        elif char == ':':
            components.append(''.join(current))
            current = []
        else:
            current.append(char)
    if escaped:
        raise MalformedCpe(cpe, 'dangling escape character')
    components.append(''.join(current))
    return components


def _unescape_formatted(component: str, cpe: str) -> str | None:
    if component in (ANY, NA):
        return None
    if not component:
        raise MalformedCpe(cpe, 'empty component, use * for ANY or - for NA')
    if not FORMATTED_VALUE.fullmatch(component):
        raise MalformedCpe(cpe, f"invalid component '{component}'")
    result = []
    chars = iter(component)
    for char in chars:
        if char == '\\':
            result.append(next(chars))
        else:
            result.append(char)
    return ''.join(result)


def _decode_uri(component: str, cpe: str) -> str | None:
    if not component or component == NA:
        return None
    if not URI_VALUE.fullmatch(component):
        raise MalformedCpe(cpe, f"invalid component '{component}'")
    value = unquote(component)
    if any(char.isspace() or not char.isprintable() for char in value):
        raise MalformedCpe(cpe, f"component '{component}' decodes to whitespace or control characters")
    return value


def parse_cpe23(cpe: str) -> CpeName:
    components = _split_formatted(cpe[len(CPE23_PREFIX):], cpe)
    if len(components) != CPE23_COMPONENT_COUNT:
        raise MalformedCpe(
            cpe, f"expected {CPE23_COMPONENT_COUNT} components, found {len(components)}",
        )
    values = [_unescape_formatted(component, cpe) for component in components]
    return CpeName(_to_part(values[0], cpe), *values[1:])


def parse_cpe22(cpe: str) -> CpeName:
    components = cpe[len(CPE22_PREFIX):].split(':')
    if len(components) > CPE22_MAX_COMPONENTS:
        raise MalformedCpe(
            cpe, f"expected at most {CPE22_MAX_COMPONENTS} components, found {len(components)}",
        )
    components += [''] * (CPE22_MAX_COMPONENTS - len(components))
    part, vendor, product, version, update, edition, language = components

    sw_edition = target_sw = target_hw = other = ''
    if edition.startswith('~'):
        packed = edition.split('~')
        if len(packed) != PACKED_EDITION_COUNT:
            raise MalformedCpe(cpe, f"invalid packed edition '{edition}'")
        edition, sw_edition, target_sw, target_hw, other = packed[1:]

    return CpeName(
        part=_to_part(_decode_uri(part, cpe), cpe),
        vendor=_decode_uri(vendor, cpe),
        product=_decode_uri(product, cpe),
        version=_decode_uri(version, cpe),
        update=_decode_uri(update, cpe),
        edition=_decode_uri(edition, cpe),
        language=_decode_uri(language, cpe),
        sw_edition=_decode_uri(sw_edition, cpe),
        target_sw=_decode_uri(target_sw, cpe),
        target_hw=_decode_uri(target_hw, cpe),
        other=_decode_uri(other, cpe),
    )


def parse_cpe(cpe: str) -> CpeName:
    """Decompose a CPE 2.2 URI or 2.3 formatted string into its 11 components."""
    if any(char.isspace() for char in cpe):
        raise MalformedCpe(cpe, 'whitespace is not allowed')
    prefix = cpe[:len(CPE23_PREFIX)].lower()
    if prefix == CPE23_PREFIX:
        return parse_cpe23(cpe)
    if prefix.startswith(CPE22_PREFIX):
        return parse_cpe22(cpe)
    raise MalformedCpe(cpe, f"must start with '{CPE22_PREFIX}' or '{CPE23_PREFIX}'")


class CpeExtractor(BaseExtractor):
    """cpe22Type and cpe23Type references."""
    scheme = 'cpe'

    def extract(self, locator: str, config: ParserConfig) -> Extraction:
        name = parse_cpe(locator)
        query = None
        if name.product:
            query = VulnerabilityQuery.for_package(Package(name=name.product), name.version)
        return Extraction(query=query, cpe_attributes=name.attributes())
