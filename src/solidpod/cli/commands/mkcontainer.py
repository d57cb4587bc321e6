import logging
from argparse import Namespace

from solidpod.cli.commands import BaseCommand

logger = logging.getLogger(__name__)


def configure_cli(subparsers):
    parser = subparsers.add_parser(
        name='mkcontainer',
        description='Create a container in the pod root, if it does not already exist'
    )
    parser.add_argument(
        'names',
        nargs='+',
        help='name of the container to create; repeatable',
        metavar='NAME',
        action='store'
    )
    parser.set_defaults(cmd_name='mkcontainer')


class Command(BaseCommand):
    def __call__(self, args: Namespace):
        for name in args.names:
            result = self.check(self.context.pod.create_container(name))
            if not result.value:
                logger.info(f'Skipped existing container "{name}"')
