import json
import logging

import pytest
import structlog
from typer.testing import CliRunner

from osvquery.__main__ import app
from osvquery.core.config import reset_config

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_cli(monkeypatch):
    # Leave the process-wide logging setup alone; only warnings reach stdout
    monkeypatch.setattr('osvquery.__main__.setup_logging', lambda level: None)
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))
    monkeypatch.delenv('OSVQUERY_MAVEN_GROUP_IN_PKG_NAME', raising=False)
    reset_config()
    yield
    reset_config()
    structlog.reset_defaults()


def test_parse_json_package_query():
    result = runner.invoke(app, ['parse', 'purl', 'pkg:pypi/requests@2.31.0', '--json'])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {'package': {'purl': 'pkg:pypi/requests@2.31.0'}}


def test_parse_json_cpe_query_uses_name_and_ecosystem():
    result = runner.invoke(app, ['parse', 'cpe23Type', 'cpe:2.3:a:apache:log4j:2.14.1:*:*:*:*:*:*:*', '--json'])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        'package': {'name': 'log4j', 'ecosystem': 'OSS-Fuzz'},
        'version': '2.14.1',
    }


def test_parse_json_commit_query():
    result = runner.invoke(app, ['parse', 'purl', 'pkg:github/owner/repo@abcdef0', '--json'])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {'commit': 'abcdef0'}


def test_parse_maven_group_flag():
    args = ['parse', 'http://spdx.org/rdf/references/maven-central', 'g:a:1.0']

    def name_row(output):
        return next(line for line in output.splitlines() if 'Name' in line)

    result = runner.invoke(app, args)
    assert result.exit_code == 0
    assert 'g:a' in name_row(result.stdout)

    result = runner.invoke(app, args + ['--no-maven-group'])
    assert result.exit_code == 0
    assert 'g:a' not in name_row(result.stdout)
    assert ' a ' in name_row(result.stdout)


def test_parse_table_output():
    result = runner.invoke(app, ['parse', 'cpe23Type', 'cpe:2.3:a:apache:log4j:2.14.1:*:*:*:*:*:*:*'])
    assert result.exit_code == 0
    assert 'log4j' in result.stdout
    assert 'apache' in result.stdout


def test_parse_unsupported_type():
    result = runner.invoke(app, ['parse', 'foobar', 'whatever'])
    assert result.exit_code == 0
    assert 'Unsupported reference type' in result.stdout


def test_parse_invalid_locator_exits_with_error():
    result = runner.invoke(app, ['parse', 'swh', 'swh:1:rev:nothex'])
    assert result.exit_code == 1
    assert 'Invalid Reference' in result.stdout


def test_refs_command(tmp_path):
    path = tmp_path / 'refs.json'
    path.write_text(json.dumps([
        {'referenceType': 'purl', 'referenceLocator': 'pkg:npm/left-pad@1.3.0'},
        {'referenceType': 'advisory', 'referenceLocator': 'https://example.com'},
    ]))
    result = runner.invoke(app, ['refs', str(path)])
    assert result.exit_code == 0
    assert 'left-pad' in result.stdout
    assert 'Reference Summary' in result.stdout


def test_refs_command_reports_invalid_entries(tmp_path):
    path = tmp_path / 'refs.jsonl'
    path.write_text('\n'.join([
        json.dumps({'referenceType': 'npm', 'referenceLocator': 'left-pad@1.3.0'}),
        json.dumps({'referenceType': 'maven-central', 'referenceLocator': 'onlyGroup'}),
        json.dumps({'referenceType': 'purl'}),
    ]))
    result = runner.invoke(app, ['refs', str(path)])
    assert result.exit_code == 1
    assert 'Invalid' in result.stdout


def test_refs_command_missing_file(tmp_path):
    result = runner.invoke(app, ['refs', str(tmp_path / 'missing.json')])
    assert result.exit_code == 1
    assert 'Validation Error' in result.stdout
