"""fact-cli: random coding, AI and scaling facts for the terminal and Telegram."""

__version__ = "0.1.0"
