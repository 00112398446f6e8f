"""Manifest configuration.

ManifestConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from zenroute.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ManifestConfig:
    """Manifest build configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ManifestConfig(strict=True)
    """

    # Discovery
    extension: str = ".zen"  # Page file suffix, leading dot included
    index_name: str = "index"  # Path component dropped during derivation
    follow_symlinks: bool = True

    # Ordering: reject ambiguous routes instead of warning
    strict: bool = False

    def __post_init__(self) -> None:
        if not self.extension.startswith(".") or len(self.extension) < 2:
            msg = f"extension must start with '.', got {self.extension!r}"
            raise ConfigurationError(msg)
        if not self.index_name or "/" in self.index_name:
            msg = f"index_name must be a single path component, got {self.index_name!r}"
            raise ConfigurationError(msg)
