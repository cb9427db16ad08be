from __future__ import annotations

import logging
import os
from configparser import NoSectionError
from pathlib import Path

import requests
from ak_api.security.errors import SessionError
from akamai.edgegrid import EdgeGridAuth
from akamai.edgegrid import EdgeRc


logger = logging.getLogger(__name__)


class AkamaiSession:
    def __init__(self, edgerc_file: str | None = None,
                 section: str | None = None,
                 account_switch_key: str | None = None,
                 host: str | None = None,
                 session: requests.Session | None = None):

        self.edgerc_file = edgerc_file if edgerc_file else os.environ.get('AKAMAI_EDGERC', f'{str(Path.home())}/.edgerc')
        self.section = section if section else os.environ.get('AKAMAI_EDGERC_SECTION', 'default')
        self.account_switch_key = account_switch_key if account_switch_key else None

        if host and session is not None:
            # caller brings its own signed session
            self.host = host
            self.session = session
        else:
            edgerc = EdgeRc(os.path.expanduser(self.edgerc_file))
            try:
                self.host = edgerc.get(self.section, 'host')
                self.session = session if session is not None else requests.Session()
                self.session.auth = EdgeGridAuth.from_edgerc(edgerc, self.section)
            except NoSectionError:
                raise SessionError(f'edgerc section "{self.section}" not found in {self.edgerc_file}')
        self.base_url = f'https://{self.host}'

    @property
    def params(self) -> dict:
        return {'accountSwitchKey': self.account_switch_key} if self.account_switch_key else {}

    def form_url(self, url: str) -> str:
        account_switch_key = f'&accountSwitchKey={self.account_switch_key}' if self.account_switch_key is not None else ''
        if '?' in url:
            return f'{url}{account_switch_key}'
        else:
            account_switch_key = account_switch_key.translate(account_switch_key.maketrans('&', '?'))
            return f'{url}{account_switch_key}'

    def update_account_key(self, account_key: str) -> None:
        self.account_switch_key = account_key

    def exec_request(self, method: str, url: str,
                     payload: dict | list | str | bytes | None = None,
                     headers: dict | None = None) -> requests.Response:
        '''
        Send one signed request. The caller owns the response and must close it.

        dict/list payloads are serialized as JSON, str/bytes are sent verbatim.
        '''
        kwargs = {'headers': headers}
        if isinstance(payload, (str, bytes)):
            kwargs['data'] = payload
        elif payload is not None:
            kwargs['json'] = payload
        return self.session.request(method, url, **kwargs)


if __name__ == '__main__':
    pass
