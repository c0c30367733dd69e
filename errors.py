class SimulatorError(ValueError):
    """Base class for every error the simulator reports to its caller."""


class ConfigError(SimulatorError):
    """Invalid sizes, unknown policy, or a missing configuration line."""


class MalformedRecord(SimulatorError):
    def __init__(self, message, line_number=None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
