# -----------------------------------------------------------------------------
# es7s/hexstream [Streaming hex+ASCII dump renderer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import re
from argparse import HelpFormatter, Action, ArgumentParser, SUPPRESS
from typing import Optional, Iterable, List

from pytermor import SeqIndex

from .console import Console
from .dump import ROW_LEN, COLLAPSE_MARKER


class CustomHelpFormatter(HelpFormatter):
    INDENT_INCREMENT = 2
    INDENT = ' ' * INDENT_INCREMENT

    @staticmethod
    def format_header(title: str) -> str:
        return Console.wrap(title.upper(), SeqIndex.BOLD)

    def __init__(self, prog):
        super().__init__(prog, max_help_position=30, indent_increment=self.INDENT_INCREMENT)

    def start_section(self, heading: Optional[str]):
        super().start_section(self.format_header(heading))

    def add_usage(self, usage: Optional[str], actions: Iterable[Action], groups: Iterable,
                  prefix: Optional[str] = ...):
        super().add_text(self.format_header('usage'))
        super().add_usage(usage.replace('\n', '\n' + self.INDENT), actions, groups, prefix=self.INDENT)

    def add_examples(self, examples: List[str]):
        self.start_section('examples')
        self.add_text('\n'.join(examples))
        self.end_section()

    def _format_action_invocation(self, action: Action) -> str:
        # metavar is printed once, after the long option only ('-B, --max-bytes <num>')
        if not action.option_strings or action.nargs == 0:
            return super()._format_action_invocation(action)

        args_string = self._format_args(action, self._get_default_metavar_for_optional(action))
        if len(action.option_strings) == 1:
            return f'{action.option_strings[0]} {args_string}'
        return ', '.join(opt if len(opt) == 2 else f'{opt} {args_string}' for opt in action.option_strings)

    def _format_text(self, text: str) -> str:
        return super()._format_text(text).rstrip('\n') + '\n'

    def _fill_text(self, text, width, indent):
        # indented lines (example commands) are kept as is, the rest is wrapped
        return '\n'.join(indent + line if line.startswith(' ') or not line.strip()
                         else super(CustomHelpFormatter, self)._fill_text(line, width, indent)
                         for line in text.splitlines()) + '\n'


class CustomArgumentParser(ArgumentParser):
    def __init__(self, examples: List[str] = None, epilog: List[str] = None, usage: List[str] = None, **kwargs):
        self.examples = examples
        super().__init__(epilog='\n'.join(epilog) if epilog else None,
                         usage='\n'.join(usage) if usage else None,
                         **kwargs)

    def format_help(self) -> str:
        epilog, self.epilog = self.epilog, None
        try:
            result = super().format_help()
        finally:
            self.epilog = epilog

        formatter = self._get_formatter()
        if epilog:
            formatter.add_text(' ')
            formatter.add_text(epilog)
        if self.examples and isinstance(formatter, CustomHelpFormatter):
            formatter.add_examples(self.examples)

        result += formatter.format_help()
        # drop ':' after section headers ('\e[1mHEADER\e[22m:')
        return re.sub(r'(\033\[[0-9;]*m)?\s*:\s*(\n|\033|$)', r'\1\2', result)


class AppArgumentParser(CustomArgumentParser):
    def __init__(self):
        def fmt_u(s) -> str:
            return Console.wrap(s, SeqIndex.UNDERLINED)

        def fmt_default(s) -> str:
            return Console.wrap(s, SeqIndex.YELLOW)

        super().__init__(
            description='Streaming hex+ASCII dump renderer',
            usage=[
                '%(prog)s [<options>] [<file>]',
                '%(prog)s --legend',
                '%(prog)s --version',
                '%(prog)s --help',
            ],
            epilog=[
                f'Input is rendered as it arrives, {ROW_LEN} bytes per row; an unfinished row is redrawn in place'
                ' every time more bytes of it are received. Consecutive identical rows are displayed once, followed'
                f' by a single "{COLLAPSE_MARKER}" line, unless ' + Console.wrap('--no-squeeze', SeqIndex.BOLD) +
                ' is specified.',
                '',
                '(c) 2022 A. Shavykin <0.delameter@gmail.com>',
            ],
            examples=[
                'Dump a file',
                ''.ljust(4) + f"{fmt_u('%(prog)s')} file.bin",
                '',
                'Watch a device byte by byte, display every row',
                ''.ljust(4) + f"cat /dev/ttyUSB0 | {fmt_u('%(prog)s')} --no-squeeze",
                '',
                'Dump first 256 bytes of stdin and exit',
                ''.ljust(4) + f"{fmt_u('%(prog)s')} -B{fmt_u(256)}",
                '\n'
            ],
            add_help=False,
            formatter_class=lambda prog: CustomHelpFormatter(prog),
            prog='hexstream'
        )

        self.add_argument('filename', metavar='<file>', nargs='?', help='file to read from; if empty or "-", read stdin instead')

        modes_group = self.add_argument_group('operating mode')
        modes_group_nested = modes_group.add_mutually_exclusive_group()
        modes_group_nested.add_argument('-l', '--legend', action='store_true', default=False, help='show color map and exit')
        modes_group_nested.add_argument('-v', '--version', action='store_true', default=False, help='show app version and exit')
        modes_group.add_argument('-h', '--help', action='help', default=SUPPRESS, help='show this help message and exit')

        generic_group = self.add_argument_group('generic options')
        generic_group.add_argument('-B', '--max-bytes', metavar='<num>', action='store', type=int, default=0, help='stop after reading <num> bytes '+fmt_default('[default: no limit]'))
        generic_group.add_argument('--no-squeeze', action='store_true', default=False, help=f'display identical consecutive rows instead of "{COLLAPSE_MARKER}" line')
        generic_group.add_argument('-d', '--debug', action='count', default=0, help='enable debug mode; can be used from 1 to 3 times, each level increases verbosity (-d|dd|ddd)')
