class DomainError(Exception):
    pass


class NotFoundError(DomainError):
    pass


class ConfigurationError(DomainError):
    pass
