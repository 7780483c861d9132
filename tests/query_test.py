import pytest
from pydantic import ValidationError

from osvquery.models.ecosystem import Ecosystem
from osvquery.models.query import CpeAttributes
from osvquery.models.query import CpePart
from osvquery.models.query import Package
from osvquery.models.query import VulnerabilityQuery


def test_package_defaults_to_fallback_ecosystem():
    package = Package(name='jquery')
    assert package.ecosystem == 'OSS-Fuzz'
    assert package.purl is None


def test_package_rejects_empty_name():
    with pytest.raises(ValidationError):
        Package(name='')


def test_package_ecosystem_is_restricted():
    with pytest.raises(ValidationError):
        Package(name='requests', ecosystem='bogus')

    package = Package(name='requests', ecosystem=Ecosystem.PYPI)
    assert package.ecosystem == 'PyPI'
    assert type(package.ecosystem) is str
    assert Package(name='jquery').model_dump()['ecosystem'] == 'OSS-Fuzz'


def test_package_query_shape():
    query = VulnerabilityQuery.for_package(Package(name='left-pad', ecosystem='npm'), '1.3.0')
    assert query.is_package_query
    assert not query.is_commit_query
    assert query.commit is None
    assert query.version == '1.3.0'


def test_package_query_empty_version_is_absent():
    query = VulnerabilityQuery.for_package(Package(name='left-pad'), '')
    assert query.version is None


def test_commit_query_shape():
    query = VulnerabilityQuery.for_commit('abcdef0')
    assert query.is_commit_query
    assert query.package is None
    assert query.version is None


def test_query_requires_exactly_one_shape():
    with pytest.raises(ValidationError):
        VulnerabilityQuery()
    with pytest.raises(ValidationError):
        VulnerabilityQuery(package=Package(name='a'), commit='abc')
    with pytest.raises(ValidationError):
        VulnerabilityQuery(commit='abc', version='1.0')


def test_to_request_prefers_purl():
    package = Package(name='org.apache:log4j', ecosystem='Maven', purl='pkg:maven/org.apache/log4j@2.0')
    query = VulnerabilityQuery.for_package(package, '2.0')
    assert query.to_request() == {'package': {'purl': 'pkg:maven/org.apache/log4j@2.0'}}


def test_to_request_unversioned_purl_carries_version():
    package = Package(name='requests', ecosystem='PyPI', purl='pkg:pypi/requests')
    query = VulnerabilityQuery.for_package(package, '2.31.0')
    assert query.to_request() == {'package': {'purl': 'pkg:pypi/requests'}, 'version': '2.31.0'}

    scoped = Package(name='@scope/name', ecosystem='npm', purl='pkg:npm/%40scope/name?repository_url=x@y')
    assert not scoped.purl_has_version
    assert VulnerabilityQuery.for_package(scoped, '1.0').to_request()['version'] == '1.0'


def test_purl_has_version():
    assert Package(name='a', purl='pkg:npm/%40scope/name%401.0').purl_has_version
    assert Package(name='a', purl='pkg:npm/name@1.0#sub/path').purl_has_version
    assert not Package(name='a', purl='pkg:npm/name').purl_has_version
    assert not Package(name='a').purl_has_version


def test_to_request_name_and_ecosystem_without_purl():
    query = VulnerabilityQuery.for_package(Package(name='log4j'), '2.14.1')
    assert query.to_request() == {
        'package': {'name': 'log4j', 'ecosystem': 'OSS-Fuzz'},
        'version': '2.14.1',
    }


def test_to_request_omits_absent_version():
    query = VulnerabilityQuery.for_package(Package(name='jquery'))
    assert query.to_request() == {'package': {'name': 'jquery', 'ecosystem': 'OSS-Fuzz'}}


def test_to_request_commit():
    assert VulnerabilityQuery.for_commit('deadbeef').to_request() == {'commit': 'deadbeef'}


def test_cpe_attributes_all_optional():
    attributes = CpeAttributes()
    assert all(value is None for value in attributes.model_dump().values())
    assert CpeAttributes(part='a').part == CpePart.APPLICATION
