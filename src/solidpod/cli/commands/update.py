from argparse import Namespace

from solidpod.cli import get_values
from solidpod.cli.commands import BaseCommand


def configure_cli(subparsers):
    parser = subparsers.add_parser(
        name='update',
        description=(
            'Append values to a text file in a container, one per line; '
            'reads values from STDIN if none are given'
        )
    )
    parser.add_argument('container', help='name of the container', action='store')
    parser.add_argument('file', help='name of the file in the container', action='store')
    parser.add_argument('values', nargs='*', help='values to append', metavar='VALUE')
    parser.add_argument(
        '--if-match',
        help='only write if the file has not changed since it was read (uses ETag)',
        action='store_true',
        dest='if_match'
    )
    parser.set_defaults(cmd_name='update')


class Command(BaseCommand):
    def __call__(self, args: Namespace):
        values = list(get_values(args))
        if args.if_match:
            self.check(self.context.pod.update_data_if_match(args.container, args.file, values))
        else:
            self.check(self.context.pod.update_data(args.container, args.file, values))
