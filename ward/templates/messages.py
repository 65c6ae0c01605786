"""
Message templates for Telegram bot.

All user-facing messages are defined here for consistent messaging.
Uses HTML formatting for Telegram.

Template naming convention:
- WELCOME, HELP, ANALYZING - informational messages
- ERROR_* - error messages
- INVALID_*, MISSING_* - validation error messages
"""

# =============================================================================
# Informational Messages
# =============================================================================

WELCOME = """
Hi! I'm <b>Ward AI</b>.

Send me a Solana token address and I'll score its risk in seconds.

Just paste the token address into the chat.

<i>Example:</i>
<code>EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v</code>
""".strip()

HELP = """
<b>How to use Ward AI:</b>

• Send a token address to get a risk analysis
• /audit &lt;address&gt; runs the contract audit checks
• /alerts scans boosted tokens for live alerts
• /trending lists boosted tokens by 24h volume

<b>What I look at:</b>
• 24h price volatility
• Liquidity relative to market cap
• Buy and sell pressure
• Token age
• Trading volume

<b>Risk levels:</b>
• CRITICAL - stay away
• HIGH - serious red flags
• MEDIUM - be careful
• LOW - relatively stable

<i>Disclaimer: Ward AI does not give financial advice.
Always do your own research before investing.</i>
""".strip()

ANALYZING = """
Analyzing token...
""".strip()

SCANNING = """
Scanning boosted tokens...
""".strip()

# =============================================================================
# Validation Error Messages
# =============================================================================

INVALID_ADDRESS = """
That doesn't look like a Solana token address.

Please send a valid address.
<i>Example:</i> <code>EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v</code>
""".strip()

MISSING_ADDRESS = """
Please add a token address after the command.

<i>Example:</i> <code>/audit EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v</code>
""".strip()

# =============================================================================
# Error Messages
# =============================================================================

ERROR_GENERIC = """
Something went wrong. Please try again later.
""".strip()

ERROR_TRY_LATER = """
Couldn't fetch token data.

Please try again in a few minutes.
""".strip()

ERROR_RATE_LIMITED = """
Market data provider is rate limiting us.

Please wait 60 seconds and try again.
""".strip()
