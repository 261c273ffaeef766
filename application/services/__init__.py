from .conversion_service import ConversionService
from .currency_service import CurrencyService
from .notifier import RatesUpdatedNotifier
from .rate_service import ExchangeRateService

__all__ = ['ConversionService', 'CurrencyService', 'ExchangeRateService', 'RatesUpdatedNotifier']
