from __future__ import annotations

import sys
from pathlib import Path
from time import perf_counter

from command import botman
from utils import _logging as lg
from utils.parser import AkamaiParser as Parser


if __name__ == '__main__':
    start_time = perf_counter()
    args = Parser.get_args()
    logger = lg.setup_logger(args)

    exit_code = 0
    if args.command == 'botman':
        Path('output/botman').mkdir(parents=True, exist_ok=True)
        exit_code = botman.main(args, logger)
    else:
        logger.critical('Please provide a command, see --help')
        exit_code = 1

    end_time = lg.log_cli_timing(start_time)
    logger.info(end_time)
    sys.exit(exit_code)
