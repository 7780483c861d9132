import pytest
from pydantic import ValidationError

from osvquery.models.reference import Reference
from osvquery.models.reference import ReferenceType

SPDX_REFS = 'http://spdx.org/rdf/references'


def test_reference_type_from_rdf_uri():
    assert ReferenceType.from_identifier(f'{SPDX_REFS}/cpe22Type') == ReferenceType.CPE22
    assert ReferenceType.from_identifier(f'{SPDX_REFS}/cpe23Type') == ReferenceType.CPE23
    assert ReferenceType.from_identifier(f'{SPDX_REFS}/maven-central') == ReferenceType.MAVEN_CENTRAL
    assert ReferenceType.from_identifier(f'{SPDX_REFS}/npm') == ReferenceType.NPM
    assert ReferenceType.from_identifier(f'{SPDX_REFS}/nuget') == ReferenceType.NUGET
    assert ReferenceType.from_identifier(f'{SPDX_REFS}/bower') == ReferenceType.BOWER
    assert ReferenceType.from_identifier(f'{SPDX_REFS}/purl') == ReferenceType.PURL
    assert ReferenceType.from_identifier(f'{SPDX_REFS}/swh') == ReferenceType.SWH


def test_reference_type_from_bare_token():
    assert ReferenceType.from_identifier('purl') == ReferenceType.PURL
    assert ReferenceType.from_identifier('cpe23Type') == ReferenceType.CPE23


@pytest.mark.parametrize(
    'identifier', [
        f'{SPDX_REFS}/foobar',
        f'{SPDX_REFS}/advisory',
        'http://example.com/mynpm',
        'purl/extra',
        '',
    ],
)
def test_reference_type_unknown(identifier):
    assert ReferenceType.from_identifier(identifier) is None


def test_reference_accepts_spdx_json_keys():
    ref = Reference.model_validate({
        'referenceCategory': 'PACKAGE-MANAGER',
        'referenceType': 'purl',
        'referenceLocator': 'pkg:pypi/requests@2.31.0',
    })
    assert ref.reference_type == 'purl'
    assert ref.reference_locator == 'pkg:pypi/requests@2.31.0'


def test_reference_is_immutable():
    ref = Reference(reference_type='purl', reference_locator='pkg:npm/a@1')
    with pytest.raises(ValidationError):
        ref.reference_locator = 'pkg:npm/b@1'
