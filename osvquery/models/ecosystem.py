from enum import Enum


class Ecosystem(str, Enum):
    """OSV ecosystem names a query can be scoped to."""
    OSS_FUZZ = 'OSS-Fuzz'
    PYPI = 'PyPI'
    GO = 'Go'
    MAVEN = 'Maven'
    NPM = 'npm'
    NUGET = 'NuGet'

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.value


# OSS-Fuzz is the catch-all for anything without a dedicated ecosystem
DEFAULT_ECOSYSTEM = Ecosystem.OSS_FUZZ

_PURL_TYPE_TO_ECOSYSTEM = {
    'pypi': Ecosystem.PYPI,
    'golang': Ecosystem.GO,
    'maven': Ecosystem.MAVEN,
    'npm': Ecosystem.NPM,
    'nuget': Ecosystem.NUGET,
}


def purl_type_to_ecosystem(purl_type: str | None) -> str:
    """Map a purl type token to the OSV ecosystem name, falling back to OSS-Fuzz."""
    if not purl_type:
        return DEFAULT_ECOSYSTEM.value
    return _PURL_TYPE_TO_ECOSYSTEM.get(purl_type, DEFAULT_ECOSYSTEM).value
