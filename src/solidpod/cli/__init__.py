#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import copy
import logging
import logging.config
import os
import sys
from argparse import ArgumentParser, FileType, Namespace
from datetime import datetime
from importlib import import_module
from pkgutil import iter_modules
from typing import Iterable

import yaml

from solidpod.cli import commands
from solidpod.context import PodContext
from solidpod.utils import DEFAULT_LOGGING_OPTIONS, add_file_handler, envsubst

logger = logging.getLogger(__name__)
now = datetime.now().strftime('%Y%m%d%H%M%S')


def load_commands(subparsers):
    # load all defined subcommands from the solidpod.cli.commands package,
    # using introspection
    command_modules = {}
    for finder, name, ispkg in iter_modules(commands.__path__):
        module = import_module(commands.__name__ + '.' + name)
        if hasattr(module, 'configure_cli'):
            module.configure_cli(subparsers)
            command_modules[name] = module
    return command_modules


def get_values(args: Namespace) -> Iterable[str]:
    if getattr(args, 'values', None):
        yield from args.values
    else:
        # fall back to STDIN
        yield from (line.rstrip('\n') for line in sys.stdin)


def get_logging_options(pod_config: dict, args: Namespace) -> dict:
    if 'LOGGING_CONFIG' in pod_config:
        with open(pod_config['LOGGING_CONFIG'], 'r') as logging_config_file:
            logging_options = yaml.safe_load(logging_config_file)
    else:
        logging_options = copy.deepcopy(DEFAULT_LOGGING_OPTIONS)

    # log file configuration; a custom logging config defines its own handlers
    log_dirname = pod_config.get('LOG_DIR')
    if log_dirname is not None and 'LOGGING_CONFIG' not in pod_config:
        if not os.path.isdir(log_dirname):
            os.makedirs(log_dirname)
        log_filename = 'solidpod.{0}.{1}.log'.format(args.cmd_name, now)
        add_file_handler(logging_options, os.path.join(log_dirname, log_filename))

    # manipulate console verbosity
    if 'console' in logging_options.get('handlers', {}):
        if args.verbose:
            logging_options['handlers']['console']['level'] = 'DEBUG'
        elif args.quiet:
            logging_options['handlers']['console']['level'] = 'WARNING'

    return logging_options


def main(argv=None):
    """Parse args and handle options."""

    parser = ArgumentParser(
        prog='solidpod',
        description='Read and write text files in a Solid pod.'
    )
    parser.set_defaults(cmd_name=None)

    parser.add_argument(
        '-c', '--config',
        help='Path to configuration file.',
        action='store',
        dest='config_file',
        type=FileType('r'),
        required=True
    )
    parser.add_argument(
        '-v', '--verbose',
        help='increase the verbosity of the status output',
        action='store_true'
    )
    parser.add_argument(
        '-q', '--quiet',
        help='decrease the verbosity of the status output',
        action='store_true'
    )

    subparsers = parser.add_subparsers(title='commands')

    command_modules = load_commands(subparsers)

    # parse command line args
    args = parser.parse_args(argv)

    # if no subcommand was selected, display the help
    if args.cmd_name is None:
        parser.print_help()
        sys.exit(0)

    config = envsubst(yaml.safe_load(args.config_file)) or {}
    context = PodContext(config=config, args=args)

    # configure logging
    logging.config.dictConfig(get_logging_options(context.pod_config, args))

    command_module = command_modules[args.cmd_name]

    # dispatch to the selected subcommand
    try:
        if not hasattr(command_module, 'Command'):
            raise RuntimeError(f'Unable to execute command {args.cmd_name}')

        command = command_module.Command(context=context)
        logger.debug(f'Loaded pod configuration from {args.config_file.name}')
        command(args)
    except RuntimeError as e:
        # something failed, exit with non-zero status
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        # aborted due to Ctrl+C
        sys.exit(2)


if __name__ == "__main__":
    main()
