"""
Solana address validation.

Validates that a string is a valid Solana public key address.
Uses actual base58 decoding instead of regex for accuracy.

Solana addresses:
- Use base58 encoding (no 0, O, I, l characters)
- Decode to exactly 32 bytes
- Typically 32-44 characters when encoded
"""

import base58

from ward.core.exceptions import ValidationError
from ward.templates.messages import INVALID_ADDRESS


def validate_solana_address(address: str) -> tuple[bool, str | None]:
    """
    Validate a Solana token address.

    Args:
        address: String to validate as Solana address

    Returns:
        Tuple of (is_valid, error_message)
        - (True, None) if address is valid
        - (False, "error description") if invalid

    Examples:
        >>> validate_solana_address("So11111111111111111111111111111111111111112")
        (True, None)

        >>> validate_solana_address("")
        (False, 'Address cannot be empty')
    """
    if not address:
        return False, "Address cannot be empty"

    if address != address.strip():
        return False, "Address contains whitespace"

    # Quick length check (Solana addresses are 32-44 chars)
    if len(address) < 32 or len(address) > 44:
        return False, f"Invalid address length: {len(address)} characters (expected 32-44)"

    try:
        decoded = base58.b58decode(address)
    except ValueError:
        # base58 library raises ValueError for invalid characters
        return False, "Invalid base58 format"

    if len(decoded) != 32:
        return False, f"Invalid length: expected 32 bytes, got {len(decoded)}"

    return True, None


def require_solana_address(address: str) -> str:
    """
    Return the address if valid, otherwise raise.

    Raises:
        ValidationError: With the invalid-address reply as message and
            the validation reason as technical message
    """
    valid, error = validate_solana_address(address)
    if not valid:
        raise ValidationError(
            message=INVALID_ADDRESS,
            technical_message=f"Invalid address {address[:50]!r}: {error}",
        )
    return address


# Maximum reasonable input length (Solana address is 32-44 chars)
MAX_INPUT_LENGTH = 100


def sanitize_input(raw: str | None) -> str | None:
    """
    Strip a chat message down to a candidate address.

    Returns None for empty or oversized input, otherwise the
    stripped text with non-printable characters removed.
    """
    if not raw:
        return None

    text = raw.strip()
    if not text or len(text) > MAX_INPUT_LENGTH:
        return None

    return "".join(c for c in text if c.isprintable())
