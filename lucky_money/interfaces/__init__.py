"""External user interfaces package."""

from .telegram_bot import TelegramBotInterface, format_money, render_phases

__all__ = ["TelegramBotInterface", "format_money", "render_phases"]
