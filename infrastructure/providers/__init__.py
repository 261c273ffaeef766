from .rates_endpoint import RatesEndpointClient

__all__ = ['RatesEndpointClient']
