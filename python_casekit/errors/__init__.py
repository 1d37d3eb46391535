from .error import CasekitError, ConfigError, UnknownCaseStyleError
