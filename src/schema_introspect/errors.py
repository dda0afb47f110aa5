class ConfigError(ValueError):
    """Configuration is missing or invalid."""


class DataAccessError(RuntimeError):
    """Catalog query execution failed."""


class TypeMappingError(LookupError):
    """Engine type has no portable type mapping."""
