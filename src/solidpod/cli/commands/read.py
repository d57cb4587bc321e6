from argparse import Namespace

from solidpod.cli.commands import BaseCommand


def configure_cli(subparsers):
    parser = subparsers.add_parser(
        name='read',
        description='Print the lines of a text file in a container'
    )
    parser.add_argument('container', help='name of the container', action='store')
    parser.add_argument('file', help='name of the file in the container', action='store')
    parser.set_defaults(cmd_name='read')


class Command(BaseCommand):
    def __call__(self, args: Namespace):
        result = self.check(self.context.pod.read_data(args.container, args.file))
        for value in result.value:
            print(value)
