def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import textsub.core.interfaces as I

    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "MatcherProtocol")
    assert hasattr(I, "MatchLikeProtocol")
    assert hasattr(I, "TemplateCompilerProtocol")
    assert hasattr(I, "TemplateRendererProtocol")
    assert hasattr(I, "TextTransformerProtocol")


def test_concrete_types_satisfy_protocols():
    import re

    from textsub.core.interfaces import MatcherProtocol, MatchLikeProtocol, TemplateCompilerProtocol
    from textsub.processing.matchers import LiteralMatcher, RegexMatcher
    from textsub.processing.template_compiler import TemplateCompiler

    assert isinstance(TemplateCompiler(), TemplateCompilerProtocol)
    assert isinstance(LiteralMatcher("x"), MatcherProtocol)
    assert isinstance(RegexMatcher(re.compile("x")), MatcherProtocol)
    assert isinstance(re.match("x", "x"), MatchLikeProtocol)
    assert isinstance(LiteralMatcher("x").search("axb"), MatchLikeProtocol)


def test_package_surface():
    import textsub

    for name in textsub.__all__:
        assert hasattr(textsub, name), name


def test_logger_factory_protocol():
    from textsub.core.interfaces import LoggerFactoryProtocol, LoggerLikeProtocol
    from textsub.logging.helpers import get_logger
    from textsub.logging.factory import DefaultLoggerFactory

    assert isinstance(DefaultLoggerFactory(), LoggerFactoryProtocol)
    assert isinstance(get_logger("probe"), LoggerLikeProtocol)
