from __future__ import annotations

import json
import logging
from pathlib import Path


logger = logging.getLogger(__name__)


def write_json(filepath: str, json_object: dict | list) -> str:
    Path(filepath).parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, 'w') as f:
        json.dump(json_object, f, indent=4)
    filepath = Path(f'{filepath}').absolute()
    logger.debug(f'JSON file is saved locally at {str(filepath)}')
    return str(filepath)


def output_filepath(output: str | None, default_name: str) -> str:
    filename = output if output else default_name
    if not filename.endswith('.json'):
        filename = f'{filename}.json'
    return f'output/botman/{filename}'
