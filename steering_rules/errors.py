from pathlib import Path


class SteeringError(Exception):
    """Base user-facing application error."""


class RuleParseError(SteeringError):
    """Raised when a single document cannot be parsed."""


class MalformedHeaderError(RuleParseError):
    pass


class InvalidInclusionModeError(RuleParseError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Invalid inclusion mode {value!r} (expected always, fileMatch or manual)"
        )


class InvalidPatternError(SteeringError):
    def __init__(self, pattern: str, detail: str) -> None:
        self.pattern = pattern
        self.detail = detail
        super().__init__(f"Invalid pattern {pattern!r} ({detail})")


class SteeringFileError(SteeringError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingConfigFileError(SteeringFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing required config file")


class LoadError(SteeringFileError):
    def __init__(self, path: Path, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(path=path, message=f"Cannot load ({cause})")


class DuplicateRuleError(SteeringFileError):
    def __init__(self, path: Path, name: str) -> None:
        self.name = name
        super().__init__(path=path, message=f"Duplicate rule name {name!r}")


class InvalidJsonFormatError(SteeringFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid JSON format ({detail})")


class InvalidConfigSchemaError(SteeringFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")


class RegistryNotLoadedError(SteeringError):
    def __init__(self) -> None:
        super().__init__("Rule registry has not been loaded")


class RuleNotFoundError(SteeringError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Rule not found: {name}")
