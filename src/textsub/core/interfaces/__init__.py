from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .matching import MatcherProtocol, MatchLikeProtocol
from .templating import TemplateCompilerProtocol, TemplateRendererProtocol
from .text import TextTransformerProtocol

__all__ = [
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'MatcherProtocol',
    'MatchLikeProtocol',
    'TemplateCompilerProtocol',
    'TemplateRendererProtocol',
    'TextTransformerProtocol',
]
