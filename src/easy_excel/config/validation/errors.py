"""Config validation errors."""
from easy_excel.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Export or import configuration could not be loaded or used."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """An environment variable without a default is not set."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting cannot be parsed, or parses to a value the exporters reject.

    ``setting_name`` is the environment key when the value came from the
    environment and the field name when it was passed directly.
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
