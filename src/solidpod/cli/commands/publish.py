from argparse import Namespace

from solidpod.cli import get_values
from solidpod.cli.commands import BaseCommand


def configure_cli(subparsers):
    parser = subparsers.add_parser(
        name='publish',
        description=(
            'Write values to a text file in a container, one per line, replacing '
            'any existing content; reads values from STDIN if none are given'
        )
    )
    parser.add_argument('container', help='name of the container', action='store')
    parser.add_argument('file', help='name of the file in the container', action='store')
    parser.add_argument('values', nargs='*', help='values to write', metavar='VALUE')
    parser.set_defaults(cmd_name='publish')


class Command(BaseCommand):
    def __call__(self, args: Namespace):
        self.check(self.context.pod.publish_data(args.container, args.file, list(get_values(args))))
