"""
Custom exceptions for Ward AI.

Exception hierarchy:
    WardError (base)
    ├── ValidationError - Invalid input data
    └── DataFetchError - Failed to fetch market data from external APIs
        ├── RateLimitError - Upstream asked us to slow down
        └── TokenNotFoundError - No trading pairs for the token

Each exception carries a user-friendly message that can be shown to users,
and optionally a technical message for logging.

The risk scoring engine itself never raises: it is total over a sanitized
TokenSnapshot. Everything here belongs to the I/O around it.
"""


class WardError(Exception):
    """
    Base exception for all Ward AI errors.

    Attributes:
        message: User-friendly error message (can be shown to users)
        technical_message: Detailed message for logs (optional)
    """

    def __init__(
        self,
        message: str = "Something went wrong. Please try again later.",
        technical_message: str | None = None,
    ):
        self.message = message
        self.technical_message = technical_message or message
        super().__init__(self.technical_message)

    def __str__(self) -> str:
        return self.technical_message


class ValidationError(WardError):
    """
    Raised when input validation fails.

    Examples:
        - Invalid Solana address format
        - Empty input
        - Missing command argument
    """

    def __init__(
        self,
        message: str = "Invalid token address.",
        technical_message: str | None = None,
    ):
        super().__init__(message, technical_message)


class DataFetchError(WardError):
    """
    Raised when fetching market data from external APIs fails.

    Examples:
        - DexScreener timeout
        - Unexpected HTTP status
        - Network issues
    """

    def __init__(
        self,
        message: str = "Failed to fetch token data. Please try again later.",
        technical_message: str | None = None,
    ):
        super().__init__(message, technical_message)


class RateLimitError(DataFetchError):
    """
    Raised when DexScreener rate-limits us.

    DexScreener answers either with HTTP 429 or with an HTML page
    instead of JSON; both are treated as rate limiting.
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded. Please wait 60 seconds before trying again.",
        technical_message: str | None = None,
    ):
        super().__init__(message, technical_message)


class TokenNotFoundError(DataFetchError):
    """Raised when the token has no trading pairs."""

    def __init__(
        self,
        message: str = "Token not found or no trading pairs available.",
        technical_message: str | None = None,
    ):
        super().__init__(message, technical_message)
