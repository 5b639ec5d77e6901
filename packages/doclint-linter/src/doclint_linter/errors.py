class DoclintError(Exception):
    """Base class for fatal doclint errors"""


class ConfigParseError(DoclintError):
    """A configuration file exists but cannot be read or is invalid"""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Error loading config file {path}: {reason}")


class UnknownFormatError(DoclintError):
    """The requested report format is neither 'text' nor 'json'"""

    def __init__(self, output_format: str):
        self.output_format = output_format
        super().__init__(f"Unknown output format: {output_format!r} (expected 'text' or 'json')")
