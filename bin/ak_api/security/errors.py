from __future__ import annotations

import html
import json
import logging

import requests


logger = logging.getLogger(__name__)

UNPARSEABLE_TITLE = 'Failed to unmarshal error body. Bot Manager API failed. Check details for more information.'
UNREADABLE_TITLE = 'Failed to read error body'


class BotmanError(Exception):
    pass


class SessionError(BotmanError):
    pass


class RequestError(BotmanError):
    pass


class ResponseFormatError(BotmanError):
    pass


class ValidationError(BotmanError, ValueError):
    def __init__(self, fields: list[str]):
        self.fields = list(fields)
        reasons = '; '.join(f'{field}: cannot be blank' for field in self.fields)
        super().__init__(f'struct validation: {reasons}')


class ApiError(BotmanError):
    """
    Problem document returned by the API for an unexpected status code.

    Two errors are equal when they carry the same status code and render the same text.
    """
    def __init__(self, type: str = '',
                 title: str = '',
                 detail: str = '',
                 status_code: int = 0,
                 instance: str = '',
                 errors: list[ApiError] | None = None):
        self.type = type
        self.title = title
        self.detail = detail
        self.instance = instance
        self.status_code = status_code
        self.errors = errors if errors else []
        super().__init__(self.type, self.title, self.detail, self.status_code)

    @classmethod
    def from_dict(cls, data: dict, status_code: int = 0) -> ApiError:
        children = []
        for child in data.get('errors') or []:
            if isinstance(child, dict):
                children.append(cls.from_dict(child, child.get('status', 0)))
        return cls(type=str(data.get('type', '')),
                   title=str(data.get('title', '')),
                   detail=str(data.get('detail', '')),
                   instance=str(data.get('instance', '')),
                   status_code=status_code,
                   errors=children)

    def to_dict(self) -> dict:
        doc = {'type': self.type,
               'title': self.title,
               'detail': self.detail,
               'instance': self.instance,
               'statusCode': self.status_code,
               'errors': [e.to_dict() for e in self.errors]}
        # type and detail are always rendered, the rest only when set
        return {k: v for k, v in doc.items() if v or k in ('type', 'detail')}

    def __str__(self) -> str:
        msg = json.dumps(self.to_dict(), indent='\t')
        return f'API error: \n{msg}'

    def __eq__(self, other) -> bool:
        if not isinstance(other, ApiError):
            return NotImplemented
        if self is other:
            return True
        if self.status_code != other.status_code:
            return False
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash((self.status_code, str(self)))


def parse_api_error(response: requests.Response) -> ApiError:
    try:
        body = response.text
    except (requests.RequestException, UnicodeDecodeError) as err:
        logger.error(f'reading error response body: {err}')
        return ApiError(title=UNREADABLE_TITLE, detail=str(err), status_code=response.status_code)

    try:
        doc = json.loads(body)
    except ValueError as err:
        doc = None
        logger.error(f'could not unmarshal API error: {err}')

    if not isinstance(doc, dict):
        return ApiError(title=UNPARSEABLE_TITLE, detail=html.unescape(body), status_code=response.status_code)
    return ApiError.from_dict(doc, response.status_code)


if __name__ == '__main__':
    pass
