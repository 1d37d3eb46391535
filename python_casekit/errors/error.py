from typing import Iterable, Optional


class CasekitError(Exception):
    """Base error for casekit"""
    def __init__(self, message: str = None, source: Exception = None):
        self.message = message
        self.source = source
        super().__init__(self.__str__())

    def __str__(self):
        msg = self.message or self.__class__.__name__
        if self.source:
            return f"{msg}: {self.source}"
        return msg

class ConfigError(CasekitError):
    pass

class UnknownCaseStyleError(CasekitError):
    def __init__(self, style: str, known: Optional[Iterable[str]] = None):
        self.style = style
        self.known = list(known or [])
        message = f"Unknown case style {style!r}"
        if self.known:
            message += f" (expected one of: {', '.join(self.known)})"
        super().__init__(message)
