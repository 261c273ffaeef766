class CurrencyException(Exception):
    pass


class InvalidCurrencyError(CurrencyException):
    pass

class ProviderError(CurrencyException):
    pass

class MalformedPayloadError(CurrencyException):
    pass

class PersistenceError(CurrencyException):
    pass

class UnknownSourceError(CurrencyException):
    pass

class ConversionUnavailableError(CurrencyException):
    def __init__(self, from_currency: str, to_currency: str, source: str):
        self.from_currency = from_currency
        self.to_currency = to_currency
        self.source = source
        super().__init__(f"No conversion path from {from_currency} to {to_currency} via {source}")
