from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from textsub.errors import TextSubError
from textsub.logging.factory import DefaultLoggerFactory
from textsub.logging.helpers import get_logger
from textsub.processing.replace_driver import MatchArg
from textsub.processing.template_compiler import quote_replacement
from textsub.processing.text_ops import TextTransformer
from textsub.runtime.config import EngineConfig
from textsub.runtime.engine import EngineBuilder, ReplaceEngine

logger = get_logger('cli')

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_USAGE_ERROR = 2


def _configure_logging(cfg: EngineConfig, *, json_logs: bool, verbose: bool) -> None:
    """Configure process-wide logging once, either JSON or plain text."""
    factory = DefaultLoggerFactory.from_config(cfg, verbose=verbose, json_logs=json_logs)
    global logger
    logger = factory.get_logger('cli')


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='textsub',
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            'textsub – `$n` template replacement and regex split\n'
            'Reads FILE (or stdin when omitted or "-") and writes to stdout.'
        ),
    )
    p.add_argument('--json-logs', action='store_true', help='Emit log records as JSON lines on stderr.')
    p.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging.')

    sub = p.add_subparsers(dest='command', metavar='COMMAND')
    sub.required = True

    p_rep = sub.add_parser('replace', help='Replace matches of PATTERN with REPLACEMENT.')
    p_rep.add_argument('pattern', metavar='PATTERN')
    p_rep.add_argument('replacement', metavar='REPLACEMENT', help='`$n` template (verbatim text with --literal).')
    p_rep.add_argument('file', metavar='FILE', nargs='?', default='-')
    p_rep.add_argument('--first', action='store_true', help='Replace only the leftmost match.')
    p_rep.add_argument('--literal', action='store_true', help='Treat PATTERN as a plain substring.')
    p_rep.add_argument('-i', '--ignore-case', action='store_true', help='Case-insensitive PATTERN.')

    p_split = sub.add_parser('split', help='Split input around PATTERN, one piece per line.')
    p_split.add_argument('pattern', metavar='PATTERN')
    p_split.add_argument('file', metavar='FILE', nargs='?', default='-')
    p_split.add_argument('--limit', type=int, default=None, help='Maximum number of pieces (<= 0: unlimited).')
    p_split.add_argument('--literal', action='store_true', help='Treat PATTERN as a plain substring.')
    p_split.add_argument('-i', '--ignore-case', action='store_true', help='Case-insensitive PATTERN.')

    p_quote = sub.add_parser('quote', help='Escape TEXT so it can be used as a literal template.')
    p_quote.add_argument('text', metavar='TEXT')

    p_apply = sub.add_parser('apply', help='Apply /pattern/replacement/flags specs in order.')
    p_apply.add_argument('-y', '--replace', metavar='SPEC', dest='replace_specs', action='append', default=[],
                         help='Replacement spec, e.g. "/(\\w+)@/$1 at /g". Repeatable.')
    p_apply.add_argument('-Y', '--preserve', metavar='SPEC', dest='preserve_specs', action='append', default=[],
                         help='Regions matching this spec are left untouched. Repeatable.')
    p_apply.add_argument('file', metavar='FILE', nargs='?', default='-')

    return p


def _read_input(path: str, stdin: TextIO) -> str:
    if path == '-':
        return stdin.read()
    return Path(path).read_text(encoding='utf-8')


def _match_arg(ns: argparse.Namespace) -> MatchArg:
    if ns.literal:
        return ns.pattern
    return re.compile(ns.pattern, re.IGNORECASE if ns.ignore_case else 0)


def _run(ns: argparse.Namespace, engine: ReplaceEngine, stdin: TextIO, stdout: TextIO) -> None:
    if ns.command == 'quote':
        stdout.write(quote_replacement(ns.text) + '\n')
        return

    text = _read_input(ns.file, stdin)
    if ns.command == 'replace':
        fn = engine.replace_first if ns.first else engine.replace
        stdout.write(fn(text, _match_arg(ns), ns.replacement))
    elif ns.command == 'split':
        pieces = engine.split(text, _match_arg(ns), ns.limit)
        stdout.write('\n'.join(pieces) + '\n')
    elif ns.command == 'apply':
        transformer = TextTransformer(driver=engine.driver, logger=get_logger('textops'))
        stdout.write(transformer.apply_replacements(text, ns.replace_specs, ns.preserve_specs))


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Console entry point; returns the process exit status."""
    ns = _build_parser().parse_args(list(argv) if argv is not None else None)
    cfg = EngineConfig.from_env()
    _configure_logging(cfg, json_logs=ns.json_logs, verbose=ns.verbose)
    engine = EngineBuilder.from_config(cfg).with_logger(get_logger('engine')).build()

    try:
        _run(ns, engine, stdin or sys.stdin, stdout or sys.stdout)
    except (TextSubError, re.error) as exc:
        logger.error('%s', exc)
        return EXIT_USAGE_ERROR
    except OSError as exc:
        logger.error('cannot read %s: %s', getattr(ns, 'file', '-'), exc)
        return EXIT_IO_ERROR
    return EXIT_OK
