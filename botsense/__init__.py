"""BotSense - rule based bot-likelihood detection"""

__version__ = "0.1.0"
