from __future__ import annotations

import json
import logging
import os
import time
from logging.config import dictConfig
from pathlib import Path
from time import gmtime
from time import perf_counter
from time import strftime

import coloredlogs


custom_level_styles = {
    'debug': {'color': 'blue'},
    'info': {'color': 'white'},
    'warning': {'color': 'yellow'},
    'error': {'color': 'red'},
    'critical': {'color': 'magenta'},
}


def setup_logger(args) -> logging.Logger:
    Path('logs').mkdir(parents=True, exist_ok=True)
    origin_config = load_local_config_file(config_file='logging.json')

    with open(origin_config) as f:
        log_cfg = json.load(f)

    log_cfg['handlers']['file_handler']['filename'] = 'logs/botman.log'
    log_cfg['formatters']['long']['()'] = 'utils.parser.CLIFormatter'
    dictConfig(log_cfg)
    logging.Formatter.converter = time.gmtime

    logger = logging.getLogger()
    logger.setLevel(logging.INFO)

    log_level = getattr(args, 'log_level', None) or 'info'
    coloredlogs.install(
        logger=logger,
        level=log_level.upper(),
        level_styles=custom_level_styles,
        fmt='%(levelname)-8s: %(message)s',
        field_styles={
            'asctime': {'color': 'black'},
            'levelname': {'color': 'black', 'bold': True},
        },
    )
    return logger


def load_local_config_file(config_file: str) -> str:
    # akamai cli install wins over the copy shipped next to the code
    local_home_path = os.path.expanduser(Path('~/.akamai-cli'))
    cli_config = f'{local_home_path}/src/cli-botman/bin/config/{config_file}'
    if Path(cli_config).exists():
        return cli_config

    packaged = get_cli_root_directory() / 'config' / config_file
    if packaged.exists():
        return str(packaged)
    raise FileNotFoundError(f'Could not find {config_file}')


def get_cli_root_directory() -> Path:
    return Path(__file__).resolve().parent.parent


def log_cli_timing(start_time) -> str:
    end_time = perf_counter()
    elapse_time = str(strftime('%H:%M:%S', gmtime(end_time - start_time)))
    msg = f'End Akamai CLI botman, TOTAL DURATION: {elapse_time}'
    return msg


if __name__ == '__main__':
    pass
