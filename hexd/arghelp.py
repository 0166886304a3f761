# -----------------------------------------------------------------------------
# es7s/hexd [Hex display with byte classes and grapheme clusters]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import re
from argparse import HelpFormatter, Action, ArgumentParser, SUPPRESS
from typing import Optional, Iterable, List

import pytermor as pt

from .byteio import NumericMode
from .console import Console
from .settings import Settings, NO_COLOR_ENV, FORCE_COLOR_ENVS

STYLE_HEADER = pt.Style(bold=True)
STYLE_UNDERLINED = pt.Style(underlined=True)
STYLE_DEFAULT = pt.Style(fg=pt.cv.YELLOW)


class CustomHelpFormatter(HelpFormatter):
    INDENT_INCREMENT = 2
    INDENT = ' ' * INDENT_INCREMENT

    @staticmethod
    def format_header(title: str) -> str:
        return Console.render(title.upper(), STYLE_HEADER)

    def __init__(self, prog):
        super().__init__(prog, max_help_position=30, indent_increment=self.INDENT_INCREMENT)

    def start_section(self, heading: Optional[str]):
        super().start_section(self.format_header(heading))

    def add_usage(self, usage: Optional[str], actions: Iterable[Action], groups: Iterable,
                  prefix: Optional[str] = None):
        super().add_text(self.format_header('usage'))

        usage = usage.replace("\n", f"\n{self.INDENT}")
        super().add_usage(usage, actions, groups, prefix=self.INDENT)

    def add_examples(self, examples: List[str]):
        self.start_section('example' + ('s' if len(examples) > 1 else ''))
        self._add_item(self._format_text, ['\n'.join(examples)])
        self.end_section()

    def _format_action_invocation(self, action):
        # same as in superclass, but without printing argument for short options
        if not action.option_strings:
            default = self._get_default_metavar_for_positional(action)
            metavar, = self._metavar_formatter(action, default)(1)
            return metavar

        parts = []
        if action.nargs == 0:
            parts.extend(action.option_strings)
        else:
            default = self._get_default_metavar_for_optional(action)
            args_string = self._format_args(action, default)
            for option_string in action.option_strings:
                if len(option_string) > 2 or len(action.option_strings) == 1:
                    parts.append(f'{option_string} {args_string}')
                else:
                    parts.append(option_string)

        return ', '.join(parts)

    def _format_text(self, text: str) -> str:
        return super()._format_text(text).rstrip('\n') + '\n'

    def _fill_text(self, text, width, indent):
        return ''.join(indent + line for line in text.splitlines(keepends=True))


class CustomArgumentParser(ArgumentParser):
    def __init__(self, examples: List[str] = None, epilog: List[str] = None, usage: List[str] = None, **kwargs):
        self.examples = examples
        kwargs.update({
            'epilog': '\n'.join(epilog),
            'usage': '\n'.join(usage),
        })
        super(CustomArgumentParser, self).__init__(**kwargs)

    def format_help(self) -> str:
        formatter = self._get_formatter()
        if self.epilog:
            formatter.add_text(' ')
            formatter.add_text(self.epilog)
        if self.examples and isinstance(formatter, CustomHelpFormatter):
            formatter.add_examples(self.examples)

        ending_formatted = formatter.format_help()
        epilog, self.epilog = self.epilog, None

        result = super().format_help() + ending_formatted
        self.epilog = epilog
        # remove ':' from headers ('<_b>header:<_f>'):
        result = re.sub(r'(\033\[[0-9;]*m)?\s*:\s*(\n|\033|$)', r'\1\2', result)
        return result


class AppArgumentParser(CustomArgumentParser):
    def __init__(self):
        def fmt_default(s: str) -> str:
            return Console.render(s, STYLE_DEFAULT)

        def fmt_u(s: str) -> str:
            return Console.render(s, STYLE_UNDERLINED)

        numeric_tokens = ', '.join(m.value for m in NumericMode)

        super().__init__(
            description='Hex display with byte classes and grapheme clusters',
            usage=[
                '%(prog)s [<options>] [<file> ...]',
                '%(prog)s --legend',
                '%(prog)s --version',
                '%(prog)s --help',
            ],
            epilog=[
                'Mandatory or optional arguments to long options are also mandatory or optional for any'
                ' corresponding short options. Arguments can be separated with both space or "=" in both cases.',
                '',
                'Bytes are colored by class: numeric, printable, control, UTF-8 grapheme clusters and invalid bytes.'
                f' Numeric class is one of: {numeric_tokens} (also accepted: o, oct, d, dec, h, x, hex).',
                '',
                'Environment variables:',
                f'  {NO_COLOR_ENV}: disable colors entirely',
                f'  {", ".join(FORCE_COLOR_ENVS)}: always enable colors',
                '',
                '(c) 2022 A. Shavykin <0.delameter@gmail.com>',
            ],
            examples=[
                'Dump a file, 8 bytes per row, 4 bytes per group',
                ''.ljust(4) + f"{fmt_u('%(prog)s')} -w {fmt_u('8')} -g {fmt_u('4')} file.bin",
                '',
                'Dump stdin, highlight hexadecimal digits as numbers',
                ''.ljust(4) + f"echo cafe | {fmt_u('%(prog)s')} -n {fmt_u('hex')}",
                '',
                'Display byte class list and color map',
                ''.ljust(4) + f"{fmt_u('%(prog)s')} --legend",
                '\n'
            ],
            add_help=False,
            formatter_class=lambda prog: CustomHelpFormatter(prog),
            prog='hexd'
        )
        defaults = Settings()

        self.add_argument('filenames', metavar='<file>', nargs='*', help='files to read; if empty or "-", read stdin instead')

        modes_group = self.add_argument_group('operating mode')
        modes_group_nested = modes_group.add_mutually_exclusive_group()
        modes_group_nested.add_argument('-l', '--legend', action='store_true', default=False, help='show byte class list and color map and exit')
        modes_group_nested.add_argument('-v', '--version', action='store_true', default=False, help='show app version and exit')
        modes_group.add_argument('-h', '--help', action='help', default=SUPPRESS, help='show this help message and exit')

        table_group = self.add_argument_group('table options')
        table_group.add_argument('-w', '--width', metavar='<num>', action='store', type=int, default=defaults.width, help='number of bytes to print per row '+fmt_default('[default: %(default)s]'))
        table_group.add_argument('-g', '--group', metavar='<num>', action='store', type=int, default=defaults.group, help='number of bytes to group within a row '+fmt_default('[default: %(default)s]'))
        table_group.add_argument('-n', '--numeric', metavar='<class>', action='store', default=defaults.numeric, help='numeric class for the character table '+fmt_default('[default: %(default)s]'))

        generic_group = self.add_argument_group('generic options')
        generic_group.add_argument('-B', '--max-bytes', metavar='<num>', action='store', type=int, default=0, help='stop after reading <num> bytes of each input '+fmt_default('[default: no limit]'))
        generic_group.add_argument('-f', '--buffer', metavar='<size>', type=int, default=None, help='read buffer size, in bytes '+fmt_default(f'[default: {Settings.READ_CHUNK_SIZE}]'))
        generic_group.add_argument('-d', '--debug', action='count', default=0, help='enable debug mode; can be used from 1 to 3 times, each level increases verbosity (-d|dd|ddd)')
