"""Configuration management for osvquery."""
import os
from dataclasses import dataclass
from dataclasses import field

_TRUTHY = {'1', 'true', 'yes', 'on'}
_FALSY = {'0', 'false', 'no', 'off'}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"Invalid boolean value for {name}: {raw!r}")


@dataclass(frozen=True)
class ParserConfig:
    """Options that change how reference locators are turned into queries."""
    # Qualify Maven package names with their group (e.g. org.spdx:spdx-tools)
    use_maven_group_in_pkg_name: bool = field(
        default_factory=lambda: _env_flag(
            'OSVQUERY_MAVEN_GROUP_IN_PKG_NAME', True,
        ),
    )


@dataclass
class OsvQueryConfig:
    parser: ParserConfig = field(default_factory=ParserConfig)

    @classmethod
    def load(cls) -> 'OsvQueryConfig':
        return cls()


_config: OsvQueryConfig | None = None


def get_config() -> OsvQueryConfig:
    global _config
    if _config is None:
        _config = OsvQueryConfig.load()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the environment is read again."""
    global _config
    _config = None
