"""
Error taxonomy

Configuration errors are fatal and raised before any input is parsed.
Problems with the inputs themselves are never raised; they are collected
as IngestionError values on the RunResult (see models.py).
"""


class GcsError(Exception):
    """Base class for all errors raised by misra_gcs."""


class ConfigurationError(GcsError):
    """The run cannot start with the given settings."""


class UnknownAdapterError(ConfigurationError):
    def __init__(self, name: str, known=()):
        self.name = name
        self.known = tuple(known)
        msg = f"Unknown warning parser '{name}'"
        if self.known:
            msg += f". Available parsers: {', '.join(self.known)}"
        super().__init__(msg)


class UnsupportedRulesetError(ConfigurationError):
    def __init__(self, rule_set: str):
        self.rule_set = rule_set
        super().__init__(f"Unsupported rule set '{rule_set}'")


class IncompatibleRulesetError(ConfigurationError):
    def __init__(self, warning_parser: str, rule_set: str):
        self.warning_parser = warning_parser
        self.rule_set = rule_set
        super().__init__(f"{rule_set} is not supported by {warning_parser}")


class InvalidTagPatternError(ConfigurationError):
    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        super().__init__(f"Invalid tag pattern '{pattern}': {reason}")


class InvalidJobConfigError(ConfigurationError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid job configuration {path}: {reason}")


class ParseError(ValueError):
    """A single warning or GRP record could not be understood.

    Raised by adapter parse functions and always caught by the ingestor,
    which turns it into an IngestionError for the offending record.
    """

