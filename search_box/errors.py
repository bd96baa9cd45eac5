from __future__ import annotations


class ConfigError(ValueError):
    pass


class InvalidCapacityError(ConfigError):
    pass


class InvalidKeyError(TypeError):
    pass


class DatasetError(ValueError):
    pass
