class MarketDataError(Exception):
    """Anything that went wrong talking to the market-data API."""

class NetworkError(MarketDataError):
    """Non-success HTTP status or transport failure."""

class ParseError(MarketDataError):
    """Response body was not the shape we expected."""

class InvalidInput(ValueError):
    """User input rejected before any request is made."""
