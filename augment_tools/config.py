"""Generation options, passed explicitly into the augmentation driver."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

DEFAULT_SDK_NAME: Final[str] = "client-sdk"

_SEMVER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^v?(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)(?:-(?P<tag>\S+))?$"
)


def format_version(version: str | None) -> str:
    """Normalize a version string into ``vMAJOR.MINOR.PATCH[-TAG]`` if it resembles one.

    Blank input gives ``0.0.0``; anything that is not semver-like is
    returned unmodified.

    Examples:
        >>> format_version("1.2.3")
        'v1.2.3'
        >>> format_version("v1.2.3-beta.1")
        'v1.2.3-beta.1'
        >>> format_version("2019-01-01")
        '2019-01-01'
    """
    if version is None or not version.strip():
        return "0.0.0"

    match = _SEMVER_PATTERN.match(version)
    if not match:
        return version

    result = f"v{match['major']}.{match['minor']}.{match['patch']}"
    if match["tag"]:
        result += f"-{match['tag']}"
    return result


@dataclass(frozen=True, slots=True)
class GenerationOptions:
    """Settings for one generation pass."""

    package_version: str | None = None
    user_agent: str | None = None
    sdk_name: str = DEFAULT_SDK_NAME
    client_side_validation: bool = True

    @property
    def version(self) -> str:
        return format_version(self.package_version)

    def effective_user_agent(self, namespace: str, api_version: str) -> str:
        """The configured user agent, or one derived from the service identity."""
        if self.user_agent:
            return self.user_agent
        return f"{self.sdk_name}/{self.version} {namespace}/{api_version}"
