from __future__ import annotations

import logging

import pandas as pd
from ak_api.security import botman_models as m
from ak_api.security.botmanager import BotManager
from boltons.iterutils import remap


# tags we are not interested to display
IGNORE_KEYS = ['createDate', 'updateDate', 'createdBy', 'updatedBy']


class BotManagerWrapper(BotManager):
    def __init__(self, account_switch_key: str | None = None,
                 section: str | None = None,
                 edgerc_file: str | None = None,
                 logger: logging.Logger = None,
                 **kwargs):
        super().__init__(account_switch_key=account_switch_key, section=section, edgerc_file=edgerc_file,
                         logger=logger, **kwargs)

    def list_akamai_bot_categories(self, name: str | None = None) -> pd.DataFrame:
        resp = self.get_akamai_bot_category_list(m.GetAkamaiBotCategoryListRequest(category_name=name))
        return self.to_dataframe(resp['categories'], ['categoryName', 'categoryId'])

    def list_bot_detections(self, name: str | None = None) -> pd.DataFrame:
        resp = self.get_bot_detection_list(m.GetBotDetectionListRequest(detection_name=name))
        return self.to_dataframe(resp['detections'], ['detectionName', 'detectionId', 'description'])

    def list_custom_bot_categories(self, config_id: int, version: int, category_id: str | None = None) -> pd.DataFrame:
        resp = self.get_custom_bot_category_list(m.GetCustomBotCategoryListRequest(config_id=config_id,
                                                                                   version=version,
                                                                                   category_id=category_id))
        return self.to_dataframe(resp['categories'], ['categoryName', 'categoryId', 'description'])

    def list_custom_clients(self, config_id: int, version: int, client_id: str | None = None) -> pd.DataFrame:
        resp = self.get_custom_client_list(m.GetCustomClientListRequest(config_id=config_id,
                                                                        version=version,
                                                                        custom_client_id=client_id))
        return self.to_dataframe(resp['customClients'], ['customClientName', 'customClientId', 'customClientType'])

    def list_response_actions(self, config_id: int, version: int, action_id: str | None = None) -> pd.DataFrame:
        resp = self.get_response_action_list(m.GetResponseActionListRequest(config_id=config_id,
                                                                             version=version,
                                                                             action_id=action_id))
        return self.to_dataframe(resp['responseActions'], ['actionName', 'actionId', 'actionType'])

    def custom_bot_category_sequence(self, config_id: int, version: int) -> list:
        seq = self.get_custom_bot_category_sequence(m.GetCustomBotCategorySequenceRequest(config_id=config_id,
                                                                                          version=version))
        self.logger.debug(f'{len(seq.sequence)} categories in sequence')
        return seq.sequence

    def bot_management_setting(self, config_id: int, version: int, policy_id: str,
                               remove_tags: list | None = None) -> dict:
        resp = self.get_bot_management_setting(m.GetBotManagementSettingRequest(config_id=config_id,
                                                                                version=version,
                                                                                security_policy_id=policy_id))
        return self.strip_tags(resp, remove_tags)

    def to_dataframe(self, records: list, columns: list) -> pd.DataFrame:
        if not records:
            return pd.DataFrame(columns=columns)

        df = pd.json_normalize(self.strip_tags(records))
        self.logger.debug(f'{len(df.columns):<5} {df.columns.values.tolist()}')
        present = [col for col in columns if col in df.columns]
        extra = [col for col in df.columns if col not in present]
        return df[present + extra].fillna('')

    def strip_tags(self, data, remove_tags: list | None = None):
        ignore_keys = IGNORE_KEYS + remove_tags if remove_tags else IGNORE_KEYS
        self.logger.debug(f'{ignore_keys}')
        return remap(data, lambda p, k, v: k not in ignore_keys)


if __name__ == '__main__':
    pass
