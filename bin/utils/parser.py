from __future__ import annotations

import argparse
import logging
import os
import sys

import rich_argparse as rap


class CLIFormatter(logging.Formatter):
    """
    Include folder in the log
    """
    def format(self, record):
        record.filename = os.path.join(os.path.basename(os.path.dirname(record.pathname)), os.path.basename(record.filename))
        return super().format(record)


class OnelineArgumentFormatter(rap.ArgumentDefaultsRichHelpFormatter):
    def __init__(self, prog, max_help_position=30, **kwargs):
        super().__init__(prog, **kwargs)
        self._max_help_position = max_help_position

    def print_usage(self, file=None):
        if file is None:
            file = sys.stdout
        self._print_message(self.usage, file, False)

    def _format_usage(self, usage, actions, groups, prefix):
        # Do not include the default usage line
        return 'Usage:'


class CustomHelpFormatter(rap.RichHelpFormatter):
    def __init__(self, prog, indent_increment=2, max_help_position=30, width=None):
        super().__init__(prog, indent_increment, max_help_position, width)


class AkamaiParser(CustomHelpFormatter, argparse.ArgumentParser):
    def __init__(self, prog):
        super().__init__(prog,
                         max_help_position=30)

    @classmethod
    def get_args(cls, argv: list | None = None):
        parser = argparse.ArgumentParser(prog='Akamai CLI botman',
                                         formatter_class=AkamaiParser,
                                         conflict_handler='resolve', add_help=True,
                                         usage='Bot Manager configuration lookups')
        parser.add_argument('-a', '--accountkey',
                            metavar='accountkey', type=str, dest='account_switch_key',
                            help='account switch key (Akamai Internal Only)')
        subparsers = parser.add_subparsers(title='Available commands', metavar='', dest='command')
        cls.all_command(subparsers)
        return parser.parse_args(argv)

    @classmethod
    def create_main_command(cls, subparsers, name, help,
                            required_arguments=None,
                            optional_arguments=None,
                            subcommands=None):

        action = subparsers.add_parser(name=name,
                                       help=help,
                                       add_help=True,
                                       formatter_class=OnelineArgumentFormatter)
        action.description = help  # Set the subcommand's help message as the description
        action.usage = f'%(prog)s {name} [options]'  # Set a custom usage format

        if subcommands:
            subparsers = action.add_subparsers(title=name, metavar='', dest='subcommand')
            for subcommand in subcommands:
                cls.create_main_command(subparsers,
                                        subcommand['name'],
                                        subcommand['help'],
                                        subcommand.get('required_arguments', None),
                                        subcommand.get('optional_arguments', None),
                                        subcommands=subcommand.get('subcommands', None))

        cls.add_arguments(action, required_arguments, optional_arguments)
        return action

    @classmethod
    def add_arguments(cls, action, required_arguments=None, optional_arguments=None):

        if required_arguments:
            required = action.add_argument_group('Required Arguments')
            for arg in required_arguments:
                arg = dict(arg)
                name = arg.pop('name')
                required.add_argument(f'--{name}', metavar='', required=True, **arg)

        if optional_arguments:
            optional = action.add_argument_group('Optional Arguments')
            for arg in optional_arguments:
                arg = dict(arg)
                name = arg.pop('name')
                if 'action' in arg:
                    optional.add_argument(f'--{name}', required=False, **arg)
                else:
                    optional.add_argument(f'--{name}', metavar='', required=False, **arg)

            optional.add_argument('--log-level',
                                  choices=['debug', 'info', 'warning', 'error', 'critical'],
                                  default='info',
                                  help='Set the log level. Too noisy, increase to warning',
                                 )

            optional.add_argument('-e', '--edgerc',
                                  metavar='', type=str, dest='edgerc',
                                  help='location of the credentials file [$AKAMAI_EDGERC]')
            optional.add_argument('-s', '--section',
                                  metavar='', type=str, dest='section',
                                  help='section of the credentials file [$AKAMAI_EDGERC_SECTION]')

    @classmethod
    def all_command(cls, subparsers):
        actions = {}
        config_version = [{'name': 'config-id', 'help': 'security configuration id', 'type': int},
                          {'name': 'version', 'help': 'security configuration version', 'type': int}]
        output = {'name': 'output', 'help': 'save JSON response to output/botman/<filename>'}
        botman_sc = [{'name': 'category',
                      'help': 'list akamai bot categories',
                      'optional_arguments': [{'name': 'name', 'help': 'exact category name'}, output]},
                     {'name': 'detection',
                      'help': 'list bot detections',
                      'optional_arguments': [{'name': 'name', 'help': 'exact detection name'}, output]},
                     {'name': 'custom-category',
                      'help': 'list custom bot categories on the security configuration',
                      'required_arguments': config_version,
                      'optional_arguments': [{'name': 'id', 'help': 'categoryId'}, output]},
                     {'name': 'custom-client',
                      'help': 'list custom clients on the security configuration',
                      'required_arguments': config_version,
                      'optional_arguments': [{'name': 'id', 'help': 'customClientId'}, output]},
                     {'name': 'response-action',
                      'help': 'list response actions on the security configuration',
                      'required_arguments': config_version,
                      'optional_arguments': [{'name': 'id', 'help': 'actionId'}, output]},
                     {'name': 'sequence',
                      'help': 'show custom bot category sequence',
                      'required_arguments': config_version,
                      'optional_arguments': [output]},
                     {'name': 'setting',
                      'help': 'show bot management settings of a security policy',
                      'required_arguments': config_version + [{'name': 'policy-id', 'help': 'security policy id'}],
                      'optional_arguments': [{'name': 'remove-tag', 'help': 'ignore JSON tags from the output', 'nargs': '+'},
                                             output]},
                     ]
        actions['botman'] = cls.create_main_command(
                            subparsers,
                            'botman',
                            help='collect detail about bot manager configuration',
                            subcommands=botman_sc)
        return actions
