"""Platform resolution for the supported git hosting providers."""

from enum import Enum


class Platform(str, Enum):
    """Git hosting providers power-git knows about."""

    GITHUB = "github"
    GITLAB = "gitlab"
    BITBUCKET = "bitbucket"
    UNSUPPORTED = "unsupported"

    @property
    def is_supported(self) -> bool:
        return self is not Platform.UNSUPPORTED


# Usable platforms, in the order they appear in a fresh config document
KNOWN_PLATFORMS: tuple[Platform, ...] = (Platform.GITHUB, Platform.GITLAB, Platform.BITBUCKET)


def resolve_platform(value: str | None) -> Platform:
    """Resolve a user-supplied platform name.

    Matching is case-insensitive. Anything outside the known set, including
    None and the literal "unsupported", resolves to Platform.UNSUPPORTED so
    callers decide how to react instead of catching an exception.

    Args:
        value: Raw platform name, e.g. from --platform

    Returns:
        The matching Platform, or Platform.UNSUPPORTED
    """
    if value is None:
        return Platform.UNSUPPORTED
    normalized = value.lower()
    for platform in KNOWN_PLATFORMS:
        if platform.value == normalized:
            return platform
    return Platform.UNSUPPORTED
