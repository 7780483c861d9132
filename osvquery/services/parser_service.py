from collections.abc import Mapping
from typing import Any

import structlog

from osvquery.core.config import get_config
from osvquery.core.config import ParserConfig
from osvquery.core.errors import ReferenceParseError
from osvquery.extractors.registry import ExtractorFactory
from osvquery.models.reference import Reference
from osvquery.models.reference import ReferenceType
from osvquery.models.result import ParseResult

logger = structlog.get_logger('parser_service')


def parse(reference: Reference, use_maven_group_in_pkg_name: bool | None = None) -> ParseResult:
    """
    Turn one SPDX external reference into an OSV query.

    Unknown reference types yield a result without a query. Locators of a
    known type that do not follow its grammar raise ReferenceParseError;
    nothing is returned for them.

    Args:
        reference: The external reference to parse.
        use_maven_group_in_pkg_name: Qualify Maven names with the group id.
            Defaults to the configured value.
    """
    # The environment is only consulted when no explicit flag is given
    if use_maven_group_in_pkg_name is None:
        config = get_config().parser
        use_maven_group_in_pkg_name = config.use_maven_group_in_pkg_name
    else:
        config = ParserConfig(use_maven_group_in_pkg_name=use_maven_group_in_pkg_name)

    reference_type = ReferenceType.from_identifier(reference.reference_type)
    if reference_type is None:
        logger.debug(
            'Unsupported reference type',
            reference_type=reference.reference_type,
        )
        return ParseResult(
            reference=reference,
            use_maven_group_in_pkg_name=use_maven_group_in_pkg_name,
        )

    extractor = ExtractorFactory.get_extractor(reference_type)
    try:
        extraction = extractor.extract(reference.reference_locator, config)
    except ReferenceParseError as e:
        logger.warning(
            'Invalid reference locator',
            scheme=extractor.scheme,
            locator=reference.reference_locator,
            error=str(e),
        )
        raise

    logger.debug(
        'Reference parsed',
        scheme=extractor.scheme,
        locator=reference.reference_locator,
        has_query=extraction.query is not None,
    )
    return ParseResult(
        reference=reference,
        query=extraction.query,
        cpe_attributes=extraction.cpe_attributes,
        use_maven_group_in_pkg_name=use_maven_group_in_pkg_name,
    )


def parse_external_ref(external_ref: Mapping[str, Any], use_maven_group_in_pkg_name: bool | None = None) -> ParseResult:
    """Parse an SPDX JSON `externalRefs` entry (referenceType / referenceLocator keys)."""
    return parse(Reference.model_validate(external_ref), use_maven_group_in_pkg_name)
