from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .rendering import NumberFormatterProtocol, SettingsAwareProtocol, ValueRendererProtocol
from .templating import PlaceholderScannerProtocol, TemplateEngineProtocol

__all__ = [
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'NumberFormatterProtocol',
    'SettingsAwareProtocol',
    'ValueRendererProtocol',
    'PlaceholderScannerProtocol',
    'TemplateEngineProtocol',
]
