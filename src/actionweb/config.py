"""Factory configuration.

FactoryConfig is a frozen dataclass — immutable after creation, with
sensible defaults. Hosts that carry configuration as a loose property
map can build one with ``FactoryConfig.from_mapping``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from actionweb.errors import ConfigurationError

# Property-map spellings accepted in addition to the field names
_ALIASES: dict[str, str] = {
    "actionPathCaseSensitive": "action_path_case_sensitive",
    "pathSeparator": "path_separator",
}


@dataclass(frozen=True, slots=True)
class FactoryConfig:
    """Action factory configuration. Immutable after creation.

    Override what you need::

        config = FactoryConfig(action_path_case_sensitive=False)
    """

    # When False, registered and requested action paths are lowercased
    action_path_case_sensitive: bool = True

    path_separator: str = "/"

    def __post_init__(self) -> None:
        if not self.path_separator:
            msg = "path_separator must be a non-empty string."
            raise ConfigurationError(msg)

    @classmethod
    def from_mapping(cls, properties: Mapping[str, Any]) -> "FactoryConfig":
        """Build a config from a property map.

        Boolean properties accept real bools or strings; only ``"true"``
        (any case) reads as True. ``None`` values leave the default.
        Unknown keys raise ``ConfigurationError``.
        """
        known = {f.name: f for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in properties.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                msg = f"Unknown factory property {key!r}."
                raise ConfigurationError(msg)
            if value is None:
                continue
            if known[name].type in (bool, "bool"):
                value = value if isinstance(value, bool) else str(value).strip().lower() == "true"
            else:
                value = str(value)
            kwargs[name] = value
        return cls(**kwargs)
