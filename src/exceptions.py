class BalancedNewsError(Exception):
    pass


class ValidationError(BalancedNewsError):
    pass


class CatalogError(BalancedNewsError):
    pass


class ParsingError(BalancedNewsError):
    pass


class NetworkError(ParsingError):
    pass


class DatabaseError(BalancedNewsError):
    pass


class ExternalServiceError(BalancedNewsError):
    pass


class NewsProviderError(ExternalServiceError):
    pass
