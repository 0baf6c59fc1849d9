""" Severity levels gating diagnostic output. """
import enum


class Verbosity(enum.IntEnum):
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    NONE = 5

    @classmethod
    def parse(cls, value) -> "Verbosity":
        """ Accept a Verbosity, its value, or a case-insensitive level name. """
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            names = "|".join(level.name.lower() for level in cls)
            raise ValueError(f"unknown verbosity {value!r}, expected one of {names}") from None

    def allows(self, level: "Verbosity") -> bool:
        """ True when a message at `level` should be emitted. """
        return self is not Verbosity.NONE and self <= level
