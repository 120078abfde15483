"""Registry configuration.

RegistryConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RegistryConfig:
    """Route registry configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RegistryConfig(base_url="https://example.com")
    """

    # Prepended verbatim by get_full_path(); templates start with "/",
    # so leave the trailing slash off.
    base_url: str = ""

    # Parse every template once at construction instead of on each call
    cache_templates: bool = True
