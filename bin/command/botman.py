from __future__ import annotations

import pandas as pd
from ak_api.security.errors import BotmanError
from ak_utils.botman import BotManagerWrapper
from rich import print_json
from tabulate import tabulate
from utils import files
from yaspin import yaspin


def main(args, logger) -> int:
    try:
        bot = BotManagerWrapper(account_switch_key=args.account_switch_key,
                                section=getattr(args, 'section', None),
                                edgerc_file=getattr(args, 'edgerc', None),
                                logger=logger)
    except BotmanError as err:
        logger.error(err)
        return 1

    handlers = {'category': list_category,
                'detection': list_detection,
                'custom-category': list_custom_category,
                'custom-client': list_custom_client,
                'response-action': list_response_action,
                'sequence': show_sequence,
                'setting': show_setting,
                }
    handler = handlers.get(args.subcommand)
    if handler is None:
        logger.critical('Please provide a botman subcommand, see --help')
        return 1

    try:
        handler(args, bot, logger)
    except BotmanError as err:
        logger.error(err)
        return 1
    return 0


def list_category(args, bot: BotManagerWrapper, logger) -> None:
    with yaspin():
        df = bot.list_akamai_bot_categories(args.name)
    show_table(df, ['categoryName', 'categoryId'], logger)
    save(args, df, 'akamai_bot_categories', logger)


def list_detection(args, bot: BotManagerWrapper, logger) -> None:
    with yaspin():
        df = bot.list_bot_detections(args.name)
    show_table(df, ['detectionName', 'detectionId'], logger)
    save(args, df, 'bot_detections', logger)


def list_custom_category(args, bot: BotManagerWrapper, logger) -> None:
    with yaspin():
        df = bot.list_custom_bot_categories(args.config_id, args.version, args.id)
    show_table(df, ['categoryName', 'categoryId'], logger)
    save(args, df, f'{args.config_id}_v{args.version}_custom_bot_categories', logger)


def list_custom_client(args, bot: BotManagerWrapper, logger) -> None:
    with yaspin():
        df = bot.list_custom_clients(args.config_id, args.version, args.id)
    show_table(df, ['customClientName', 'customClientId'], logger)
    save(args, df, f'{args.config_id}_v{args.version}_custom_clients', logger)


def list_response_action(args, bot: BotManagerWrapper, logger) -> None:
    with yaspin():
        df = bot.list_response_actions(args.config_id, args.version, args.id)
    show_table(df, ['actionName', 'actionId', 'actionType'], logger)
    save(args, df, f'{args.config_id}_v{args.version}_response_actions', logger)


def show_sequence(args, bot: BotManagerWrapper, logger) -> None:
    sequence = bot.custom_bot_category_sequence(args.config_id, args.version)
    print_json(data={'sequence': sequence})
    if args.output:
        files.write_json(files.output_filepath(args.output, ''), {'sequence': sequence})


def show_setting(args, bot: BotManagerWrapper, logger) -> None:
    setting = bot.bot_management_setting(args.config_id, args.version, args.policy_id, args.remove_tag)
    print_json(data=setting)
    if args.output:
        files.write_json(files.output_filepath(args.output, ''), setting)


def show_table(df: pd.DataFrame, columns: list, logger) -> None:
    if df.empty:
        logger.info('not found any record based on the search criteria')
        return
    columns = [col for col in columns if col in df.columns]
    print(tabulate(df[columns], headers=columns, tablefmt='simple', numalign='center', showindex=True, maxcolwidths=50))


def save(args, df: pd.DataFrame, default_name: str, logger) -> None:
    if args.output is None:
        return
    filepath = files.write_json(files.output_filepath(args.output, default_name), df.to_dict(orient='records'))
    logger.info(f'JSON file is saved at {filepath}')
