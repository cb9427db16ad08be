# Techdocs reference
# https://techdocs.akamai.com/bot-manager/reference/api-summary
# https://techdocs.akamai.com/content-protector/reference/api-summary
from __future__ import annotations

import logging
from contextlib import closing

import requests
from ak_api.edge_auth import AkamaiSession
from ak_api.security import botman_models as m
from ak_api.security.errors import parse_api_error
from ak_api.security.errors import RequestError
from ak_api.security.errors import ResponseFormatError


OK = 200
CREATED = 201
NO_CONTENT = 204


class BotManager(AkamaiSession):
    def __init__(self, account_switch_key: str | None = None,
                 section: str | None = None,
                 edgerc_file: str | None = None,
                 host: str | None = None,
                 session: requests.Session | None = None,
                 logger: logging.Logger = None):
        super().__init__(edgerc_file=edgerc_file, section=section, account_switch_key=account_switch_key,
                         host=host, session=session)
        self.MODULE = f'{self.base_url}/appsec/v1'
        self.headers = {'Accept': 'application/json',
                        'Content-Type': 'application/json'}
        self.logger = logger if logger else logging.getLogger(__name__)

    def _call(self, operation: str, method: str, path: str, expected: int, payload=None):
        url = self.form_url(f'{self.MODULE}{path}')
        try:
            with closing(self.exec_request(method, url, payload=payload, headers=self.headers)) as resp:
                self.logger.debug(f'{operation:<45} {method:<6} {path} {resp.status_code}')
                if resp.status_code != expected:
                    raise parse_api_error(resp)
                if not resp.content:
                    return None
                try:
                    return resp.json()
                except ValueError as err:
                    raise ResponseFormatError(f'{operation} returned a body that is not JSON: {err}') from err
        except requests.RequestException as err:
            raise RequestError(f'{operation} request failed: {err}') from err

    def _list(self, operation: str, path: str, list_key: str, filter_key: str, value: str | None) -> dict:
        result = self._call(operation, 'GET', path, OK) or {}
        if not isinstance(result, dict):
            raise ResponseFormatError(f'{operation} returned {type(result).__name__}, expected an object')
        return {list_key: m.filter_records(result.get(list_key), filter_key, value)}

    def _start(self, operation: str, params: m.BotmanRequest) -> None:
        self.logger.debug(operation)
        params.validate()

    # AKAMAI BOT CATEGORY
    def get_akamai_bot_category_list(self, params: m.GetAkamaiBotCategoryListRequest) -> dict:
        self._start('GetAkamaiBotCategoryList', params)
        return self._list('GetAkamaiBotCategoryList', '/akamai-bot-categories',
                          'categories', 'categoryName', params.category_name)

    # AKAMAI BOT CATEGORY ACTION
    def get_akamai_bot_category_action_list(self, params: m.GetAkamaiBotCategoryActionListRequest) -> dict:
        self._start('GetAkamaiBotCategoryActionList', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/akamai-bot-category-actions'
        return self._list('GetAkamaiBotCategoryActionList', path, 'actions', 'categoryId', params.category_id)

    def get_akamai_bot_category_action(self, params: m.GetAkamaiBotCategoryActionRequest) -> dict:
        self._start('GetAkamaiBotCategoryAction', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/akamai-bot-category-actions/{params.category_id}'
        return self._call('GetAkamaiBotCategoryAction', 'GET', path, OK)

    def update_akamai_bot_category_action(self, params: m.UpdateAkamaiBotCategoryActionRequest) -> dict:
        self._start('UpdateAkamaiBotCategoryAction', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/akamai-bot-category-actions/{params.category_id}'
        return self._call('UpdateAkamaiBotCategoryAction', 'PUT', path, OK, params.json_payload)

    # AKAMAI DEFINED BOT
    def get_akamai_defined_bot_list(self, params: m.GetAkamaiDefinedBotListRequest) -> dict:
        self._start('GetAkamaiDefinedBotList', params)
        return self._list('GetAkamaiDefinedBotList', '/akamai-defined-bots', 'bots', 'botName', params.bot_name)

    # BOT ANALYTICS COOKIE
    def get_bot_analytics_cookie(self, params: m.GetBotAnalyticsCookieRequest) -> dict:
        self._start('GetBotAnalyticsCookie', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/advanced-settings/bot-analytics-cookie'
        return self._call('GetBotAnalyticsCookie', 'GET', path, OK)

    def update_bot_analytics_cookie(self, params: m.UpdateBotAnalyticsCookieRequest) -> dict:
        self._start('UpdateBotAnalyticsCookie', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/advanced-settings/bot-analytics-cookie'
        return self._call('UpdateBotAnalyticsCookie', 'PUT', path, OK, params.json_payload)

    def get_bot_analytics_cookie_values(self) -> dict:
        self.logger.debug('GetBotAnalyticsCookieValues')
        return self._call('GetBotAnalyticsCookieValues', 'GET', '/bot-analytics-cookie/values', OK)

    # BOT CATEGORY EXCEPTION
    def get_bot_category_exception(self, params: m.GetBotCategoryExceptionRequest) -> dict:
        self._start('GetBotCategoryException', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/bot-category-exceptions'
        return self._call('GetBotCategoryException', 'GET', path, OK)

    def update_bot_category_exception(self, params: m.UpdateBotCategoryExceptionRequest) -> dict:
        self._start('UpdateBotCategoryException', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/bot-category-exceptions'
        return self._call('UpdateBotCategoryException', 'PUT', path, OK, params.json_payload)

    # BOT DETECTION
    def get_bot_detection_list(self, params: m.GetBotDetectionListRequest) -> dict:
        self._start('GetBotDetectionList', params)
        return self._list('GetBotDetectionList', '/bot-detections', 'detections', 'detectionName', params.detection_name)

    # BOT DETECTION ACTION
    def get_bot_detection_action_list(self, params: m.GetBotDetectionActionListRequest) -> dict:
        self._start('GetBotDetectionActionList', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/bot-detection-actions'
        return self._list('GetBotDetectionActionList', path, 'actions', 'detectionId', params.detection_id)

    def get_bot_detection_action(self, params: m.GetBotDetectionActionRequest) -> dict:
        self._start('GetBotDetectionAction', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/bot-detection-actions/{params.detection_id}'
        return self._call('GetBotDetectionAction', 'GET', path, OK)

    def update_bot_detection_action(self, params: m.UpdateBotDetectionActionRequest) -> dict:
        self._start('UpdateBotDetectionAction', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/bot-detection-actions/{params.detection_id}'
        return self._call('UpdateBotDetectionAction', 'PUT', path, OK, params.json_payload)

    # BOT ENDPOINT COVERAGE REPORT
    def get_bot_endpoint_coverage_report(self, params: m.GetBotEndpointCoverageReportRequest) -> dict:
        self._start('GetBotEndpointCoverageReport', params)
        if params.config_id and params.version:
            path = f'/configs/{params.config_id}/versions/{params.version}/bot-endpoint-coverage-report'
        else:
            path = '/bot-endpoint-coverage-report'
        return self._list('GetBotEndpointCoverageReport', path, 'operations', 'operationId', params.operation_id)

    # BOT MANAGEMENT SETTING
    def get_bot_management_setting(self, params: m.GetBotManagementSettingRequest) -> dict:
        self._start('GetBotManagementSetting', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/bot-management-settings'
        return self._call('GetBotManagementSetting', 'GET', path, OK)

    def update_bot_management_setting(self, params: m.UpdateBotManagementSettingRequest) -> dict:
        self._start('UpdateBotManagementSetting', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/bot-management-settings'
        return self._call('UpdateBotManagementSetting', 'PUT', path, OK, params.json_payload)

    # CHALLENGE ACTION
    def get_challenge_action_list(self, params: m.GetChallengeActionListRequest) -> dict:
        self._start('GetChallengeActionList', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/challenge-actions'
        return self._list('GetChallengeActionList', path, 'challengeActions', 'actionId', params.action_id)

    def get_challenge_action(self, params: m.GetChallengeActionRequest) -> dict:
        self._start('GetChallengeAction', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/challenge-actions/{params.action_id}'
        return self._call('GetChallengeAction', 'GET', path, OK)

    def create_challenge_action(self, params: m.CreateChallengeActionRequest) -> dict:
        self._start('CreateChallengeAction', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/challenge-actions'
        return self._call('CreateChallengeAction', 'POST', path, CREATED, params.json_payload)

    def update_challenge_action(self, params: m.UpdateChallengeActionRequest) -> dict:
        self._start('UpdateChallengeAction', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/challenge-actions/{params.action_id}'
        return self._call('UpdateChallengeAction', 'PUT', path, OK, params.json_payload)

    def remove_challenge_action(self, params: m.RemoveChallengeActionRequest) -> None:
        self._start('RemoveChallengeAction', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/challenge-actions/{params.action_id}'
        self._call('RemoveChallengeAction', 'DELETE', path, NO_CONTENT)

    def update_google_recaptcha_secret_key(self, params: m.UpdateGoogleReCaptchaSecretKeyRequest) -> None:
        self._start('UpdateGoogleReCaptchaSecretKey', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/challenge-actions/{params.action_id}/google-recaptcha-secret-key'
        self._call('UpdateGoogleReCaptchaSecretKey', 'PUT', path, NO_CONTENT, params.to_payload())

    # CHALLENGE INTERCEPTION RULES
    def get_challenge_interception_rules(self, params: m.GetChallengeInterceptionRulesRequest) -> dict:
        self._start('GetChallengeInterceptionRules', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/challenge-interception-rules'
        return self._call('GetChallengeInterceptionRules', 'GET', path, OK)

    def update_challenge_interception_rules(self, params: m.UpdateChallengeInterceptionRulesRequest) -> dict:
        self._start('UpdateChallengeInterceptionRules', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/challenge-interception-rules'
        return self._call('UpdateChallengeInterceptionRules', 'PUT', path, OK, params.json_payload)

    # CLIENT SIDE SECURITY
    def get_client_side_security(self, params: m.GetClientSideSecurityRequest) -> dict:
        self._start('GetClientSideSecurity', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/advanced-settings/client-side-security'
        return self._call('GetClientSideSecurity', 'GET', path, OK)

    def update_client_side_security(self, params: m.UpdateClientSideSecurityRequest) -> dict:
        self._start('UpdateClientSideSecurity', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/advanced-settings/client-side-security'
        return self._call('UpdateClientSideSecurity', 'PUT', path, OK, params.json_payload)

    # CONDITIONAL ACTION
    def get_conditional_action_list(self, params: m.GetConditionalActionListRequest) -> dict:
        self._start('GetConditionalActionList', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/conditional-actions'
        return self._list('GetConditionalActionList', path, 'conditionalActions', 'actionId', params.action_id)

    def get_conditional_action(self, params: m.GetConditionalActionRequest) -> dict:
        self._start('GetConditionalAction', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/conditional-actions/{params.action_id}'
        return self._call('GetConditionalAction', 'GET', path, OK)

    def create_conditional_action(self, params: m.CreateConditionalActionRequest) -> dict:
        self._start('CreateConditionalAction', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/conditional-actions'
        return self._call('CreateConditionalAction', 'POST', path, CREATED, params.json_payload)

    def update_conditional_action(self, params: m.UpdateConditionalActionRequest) -> dict:
        self._start('UpdateConditionalAction', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/conditional-actions/{params.action_id}'
        return self._call('UpdateConditionalAction', 'PUT', path, OK, params.json_payload)

    def remove_conditional_action(self, params: m.RemoveConditionalActionRequest) -> None:
        self._start('RemoveConditionalAction', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/conditional-actions/{params.action_id}'
        self._call('RemoveConditionalAction', 'DELETE', path, NO_CONTENT)

    # CONTENT PROTECTION RULE
    def get_content_protection_rule_list(self, params: m.GetContentProtectionRuleListRequest) -> dict:
        self._start('GetContentProtectionRuleList', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/content-protection-rules'
        return self._list('GetContentProtectionRuleList', path, 'contentProtectionRules',
                          'contentProtectionRuleId', params.content_protection_rule_id)

    def get_content_protection_rule(self, params: m.GetContentProtectionRuleRequest) -> dict:
        self._start('GetContentProtectionRule', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/content-protection-rules/{params.content_protection_rule_id}'
        return self._call('GetContentProtectionRule', 'GET', path, OK)

    def create_content_protection_rule(self, params: m.CreateContentProtectionRuleRequest) -> dict:
        self._start('CreateContentProtectionRule', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/content-protection-rules'
        return self._call('CreateContentProtectionRule', 'POST', path, CREATED, params.json_payload)

    def update_content_protection_rule(self, params: m.UpdateContentProtectionRuleRequest) -> dict:
        self._start('UpdateContentProtectionRule', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/content-protection-rules/{params.content_protection_rule_id}'
        return self._call('UpdateContentProtectionRule', 'PUT', path, OK, params.json_payload)

    def remove_content_protection_rule(self, params: m.RemoveContentProtectionRuleRequest) -> None:
        self._start('RemoveContentProtectionRule', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/content-protection-rules/{params.content_protection_rule_id}'
        self._call('RemoveContentProtectionRule', 'DELETE', path, NO_CONTENT)

    # CONTENT PROTECTION RULE SEQUENCE
    def get_content_protection_rule_sequence(self, params: m.GetContentProtectionRuleSequenceRequest) -> m.ContentProtectionRuleUUIDSequence:
        self._start('GetContentProtectionRuleSequence', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/content-protection-rule-sequence'
        result = self._call('GetContentProtectionRuleSequence', 'GET', path, OK)
        return m.ContentProtectionRuleUUIDSequence.from_dict(result)

    def update_content_protection_rule_sequence(self, params: m.UpdateContentProtectionRuleSequenceRequest) -> m.ContentProtectionRuleUUIDSequence:
        self._start('UpdateContentProtectionRuleSequence', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/content-protection-rule-sequence'
        result = self._call('UpdateContentProtectionRuleSequence', 'PUT', path, OK,
                            params.content_protection_rule_sequence.to_dict())
        return m.ContentProtectionRuleUUIDSequence.from_dict(result)

    # CONTENT PROTECTION JAVASCRIPT INJECTION RULE
    def get_content_protection_javascript_injection_rule_list(self, params: m.GetContentProtectionJavaScriptInjectionRuleListRequest) -> dict:
        self._start('GetContentProtectionJavaScriptInjectionRuleList', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/content-protection-javascript-injection-rules'
        return self._list('GetContentProtectionJavaScriptInjectionRuleList', path,
                          'contentProtectionJavaScriptInjectionRules',
                          'contentProtectionJavaScriptInjectionRuleId',
                          params.content_protection_javascript_injection_rule_id)

    def get_content_protection_javascript_injection_rule(self, params: m.GetContentProtectionJavaScriptInjectionRuleRequest) -> dict:
        self._start('GetContentProtectionJavaScriptInjectionRule', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/content-protection-javascript-injection-rules/{params.content_protection_javascript_injection_rule_id}'
        return self._call('GetContentProtectionJavaScriptInjectionRule', 'GET', path, OK)

    def create_content_protection_javascript_injection_rule(self, params: m.CreateContentProtectionJavaScriptInjectionRuleRequest) -> dict:
        self._start('CreateContentProtectionJavaScriptInjectionRule', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/content-protection-javascript-injection-rules'
        return self._call('CreateContentProtectionJavaScriptInjectionRule', 'POST', path, CREATED, params.json_payload)

    def update_content_protection_javascript_injection_rule(self, params: m.UpdateContentProtectionJavaScriptInjectionRuleRequest) -> dict:
        self._start('UpdateContentProtectionJavaScriptInjectionRule', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/content-protection-javascript-injection-rules/{params.content_protection_javascript_injection_rule_id}'
        return self._call('UpdateContentProtectionJavaScriptInjectionRule', 'PUT', path, OK, params.json_payload)

    def remove_content_protection_javascript_injection_rule(self, params: m.RemoveContentProtectionJavaScriptInjectionRuleRequest) -> None:
        self._start('RemoveContentProtectionJavaScriptInjectionRule', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/content-protection-javascript-injection-rules/{params.content_protection_javascript_injection_rule_id}'
        self._call('RemoveContentProtectionJavaScriptInjectionRule', 'DELETE', path, NO_CONTENT)

    # CUSTOM BOT CATEGORY
    def get_custom_bot_category_list(self, params: m.GetCustomBotCategoryListRequest) -> dict:
        self._start('GetCustomBotCategoryList', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/custom-bot-categories'
        return self._list('GetCustomBotCategoryList', path, 'categories', 'categoryId', params.category_id)

    def get_custom_bot_category(self, params: m.GetCustomBotCategoryRequest) -> dict:
        self._start('GetCustomBotCategory', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/custom-bot-categories/{params.category_id}'
        return self._call('GetCustomBotCategory', 'GET', path, OK)

    def create_custom_bot_category(self, params: m.CreateCustomBotCategoryRequest) -> dict:
        self._start('CreateCustomBotCategory', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/custom-bot-categories'
        return self._call('CreateCustomBotCategory', 'POST', path, CREATED, params.json_payload)

    def update_custom_bot_category(self, params: m.UpdateCustomBotCategoryRequest) -> dict:
        self._start('UpdateCustomBotCategory', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/custom-bot-categories/{params.category_id}'
        return self._call('UpdateCustomBotCategory', 'PUT', path, OK, params.json_payload)

    def remove_custom_bot_category(self, params: m.RemoveCustomBotCategoryRequest) -> None:
        self._start('RemoveCustomBotCategory', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/custom-bot-categories/{params.category_id}'
        self._call('RemoveCustomBotCategory', 'DELETE', path, NO_CONTENT)

    # CUSTOM BOT CATEGORY ACTION
    def get_custom_bot_category_action_list(self, params: m.GetCustomBotCategoryActionListRequest) -> dict:
        self._start('GetCustomBotCategoryActionList', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/custom-bot-category-actions'
        return self._list('GetCustomBotCategoryActionList', path, 'actions', 'categoryId', params.category_id)

    def get_custom_bot_category_action(self, params: m.GetCustomBotCategoryActionRequest) -> dict:
        self._start('GetCustomBotCategoryAction', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/custom-bot-category-actions/{params.category_id}'
        return self._call('GetCustomBotCategoryAction', 'GET', path, OK)

    def update_custom_bot_category_action(self, params: m.UpdateCustomBotCategoryActionRequest) -> dict:
        self._start('UpdateCustomBotCategoryAction', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/custom-bot-category-actions/{params.category_id}'
        return self._call('UpdateCustomBotCategoryAction', 'PUT', path, OK, params.json_payload)

    # CUSTOM BOT CATEGORY ITEM SEQUENCE
    def get_custom_bot_category_item_sequence(self, params: m.GetCustomBotCategoryItemSequenceRequest) -> m.UUIDSequence:
        self._start('GetCustomBotCategoryItemSequence', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/custom-bot-categories/{params.category_id}/custom-bot-category-item-sequence'
        return m.UUIDSequence.from_dict(self._call('GetCustomBotCategoryItemSequence', 'GET', path, OK))

    def update_custom_bot_category_item_sequence(self, params: m.UpdateCustomBotCategoryItemSequenceRequest) -> m.UUIDSequence:
        self._start('UpdateCustomBotCategoryItemSequence', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/custom-bot-categories/{params.category_id}/custom-bot-category-item-sequence'
        result = self._call('UpdateCustomBotCategoryItemSequence', 'PUT', path, OK, params.sequence.to_dict())
        return m.UUIDSequence.from_dict(result)

    # CUSTOM BOT CATEGORY SEQUENCE
    def get_custom_bot_category_sequence(self, params: m.GetCustomBotCategorySequenceRequest) -> m.UUIDSequence:
        self._start('GetCustomBotCategorySequence', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/custom-bot-category-sequence'
        return m.UUIDSequence.from_dict(self._call('GetCustomBotCategorySequence', 'GET', path, OK))

    def update_custom_bot_category_sequence(self, params: m.UpdateCustomBotCategorySequenceRequest) -> m.UUIDSequence:
        self._start('UpdateCustomBotCategorySequence', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/custom-bot-category-sequence'
        result = self._call('UpdateCustomBotCategorySequence', 'PUT', path, OK, params.sequence.to_dict())
        return m.UUIDSequence.from_dict(result)

    # CUSTOM CLIENT
    def get_custom_client_list(self, params: m.GetCustomClientListRequest) -> dict:
        self._start('GetCustomClientList', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/custom-clients'
        return self._list('GetCustomClientList', path, 'customClients', 'customClientId', params.custom_client_id)

    def get_custom_client(self, params: m.GetCustomClientRequest) -> dict:
        self._start('GetCustomClient', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/custom-clients/{params.custom_client_id}'
        return self._call('GetCustomClient', 'GET', path, OK)

    def create_custom_client(self, params: m.CreateCustomClientRequest) -> dict:
        self._start('CreateCustomClient', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/custom-clients'
        return self._call('CreateCustomClient', 'POST', path, CREATED, params.json_payload)

    def update_custom_client(self, params: m.UpdateCustomClientRequest) -> dict:
        self._start('UpdateCustomClient', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/custom-clients/{params.custom_client_id}'
        return self._call('UpdateCustomClient', 'PUT', path, OK, params.json_payload)

    def remove_custom_client(self, params: m.RemoveCustomClientRequest) -> None:
        self._start('RemoveCustomClient', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/custom-clients/{params.custom_client_id}'
        self._call('RemoveCustomClient', 'DELETE', path, NO_CONTENT)

    # CUSTOM DEFINED BOT
    def get_custom_defined_bot_list(self, params: m.GetCustomDefinedBotListRequest) -> dict:
        self._start('GetCustomDefinedBotList', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/custom-defined-bots'
        return self._list('GetCustomDefinedBotList', path, 'bots', 'botId', params.bot_id)

    def get_custom_defined_bot(self, params: m.GetCustomDefinedBotRequest) -> dict:
        self._start('GetCustomDefinedBot', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/custom-defined-bots/{params.bot_id}'
        return self._call('GetCustomDefinedBot', 'GET', path, OK)

    def create_custom_defined_bot(self, params: m.CreateCustomDefinedBotRequest) -> dict:
        self._start('CreateCustomDefinedBot', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/custom-defined-bots'
        return self._call('CreateCustomDefinedBot', 'POST', path, CREATED, params.json_payload)

    def update_custom_defined_bot(self, params: m.UpdateCustomDefinedBotRequest) -> dict:
        self._start('UpdateCustomDefinedBot', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/custom-defined-bots/{params.bot_id}'
        return self._call('UpdateCustomDefinedBot', 'PUT', path, OK, params.json_payload)

    def remove_custom_defined_bot(self, params: m.RemoveCustomDefinedBotRequest) -> None:
        self._start('RemoveCustomDefinedBot', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/custom-defined-bots/{params.bot_id}'
        self._call('RemoveCustomDefinedBot', 'DELETE', path, NO_CONTENT)

    # CUSTOM DENY ACTION
    def get_custom_deny_action_list(self, params: m.GetCustomDenyActionListRequest) -> dict:
        self._start('GetCustomDenyActionList', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/custom-deny-actions'
        return self._list('GetCustomDenyActionList', path, 'customDenyActions', 'actionId', params.action_id)

    def get_custom_deny_action(self, params: m.GetCustomDenyActionRequest) -> dict:
        self._start('GetCustomDenyAction', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/custom-deny-actions/{params.action_id}'
        return self._call('GetCustomDenyAction', 'GET', path, OK)

    def create_custom_deny_action(self, params: m.CreateCustomDenyActionRequest) -> dict:
        self._start('CreateCustomDenyAction', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/custom-deny-actions'
        return self._call('CreateCustomDenyAction', 'POST', path, CREATED, params.json_payload)

    def update_custom_deny_action(self, params: m.UpdateCustomDenyActionRequest) -> dict:
        self._start('UpdateCustomDenyAction', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/custom-deny-actions/{params.action_id}'
        return self._call('UpdateCustomDenyAction', 'PUT', path, OK, params.json_payload)

    def remove_custom_deny_action(self, params: m.RemoveCustomDenyActionRequest) -> None:
        self._start('RemoveCustomDenyAction', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/custom-deny-actions/{params.action_id}'
        self._call('RemoveCustomDenyAction', 'DELETE', path, NO_CONTENT)

    # JAVASCRIPT INJECTION
    def get_javascript_injection(self, params: m.GetJavascriptInjectionRequest) -> dict:
        self._start('GetJavascriptInjection', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/javascript-injection'
        return self._call('GetJavascriptInjection', 'GET', path, OK)

    def update_javascript_injection(self, params: m.UpdateJavascriptInjectionRequest) -> dict:
        self._start('UpdateJavascriptInjection', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/javascript-injection'
        return self._call('UpdateJavascriptInjection', 'PUT', path, OK, params.json_payload)

    # RECATEGORIZED AKAMAI DEFINED BOT
    def get_recategorized_akamai_defined_bot_list(self, params: m.GetRecategorizedAkamaiDefinedBotListRequest) -> list[m.RecategorizedAkamaiDefinedBot]:
        self._start('GetRecategorizedAkamaiDefinedBotList', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/recategorized-akamai-defined-bots'
        result = self._list('GetRecategorizedAkamaiDefinedBotList', path, 'recategorizedBots', 'botId', params.bot_id)
        return [m.RecategorizedAkamaiDefinedBot.from_dict(bot) for bot in result['recategorizedBots']]

    def get_recategorized_akamai_defined_bot(self, params: m.GetRecategorizedAkamaiDefinedBotRequest) -> m.RecategorizedAkamaiDefinedBot:
        self._start('GetRecategorizedAkamaiDefinedBot', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/recategorized-akamai-defined-bots/{params.bot_id}'
        return m.RecategorizedAkamaiDefinedBot.from_dict(self._call('GetRecategorizedAkamaiDefinedBot', 'GET', path, OK))

    def create_recategorized_akamai_defined_bot(self, params: m.CreateRecategorizedAkamaiDefinedBotRequest) -> m.RecategorizedAkamaiDefinedBot:
        self._start('CreateRecategorizedAkamaiDefinedBot', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/recategorized-akamai-defined-bots'
        result = self._call('CreateRecategorizedAkamaiDefinedBot', 'POST', path, CREATED, params.to_payload())
        return m.RecategorizedAkamaiDefinedBot.from_dict(result)

    def update_recategorized_akamai_defined_bot(self, params: m.UpdateRecategorizedAkamaiDefinedBotRequest) -> m.RecategorizedAkamaiDefinedBot:
        self._start('UpdateRecategorizedAkamaiDefinedBot', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/recategorized-akamai-defined-bots/{params.bot_id}'
        result = self._call('UpdateRecategorizedAkamaiDefinedBot', 'PUT', path, OK, params.to_payload())
        return m.RecategorizedAkamaiDefinedBot.from_dict(result)

    def remove_recategorized_akamai_defined_bot(self, params: m.RemoveRecategorizedAkamaiDefinedBotRequest) -> None:
        self._start('RemoveRecategorizedAkamaiDefinedBot', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/recategorized-akamai-defined-bots/{params.bot_id}'
        self._call('RemoveRecategorizedAkamaiDefinedBot', 'DELETE', path, NO_CONTENT)

    # RESPONSE ACTION
    def get_response_action_list(self, params: m.GetResponseActionListRequest) -> dict:
        self._start('GetResponseActionList', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions'
        return self._list('GetResponseActionList', path, 'responseActions', 'actionId', params.action_id)

    # SERVE ALTERNATE ACTION
    def get_serve_alternate_action_list(self, params: m.GetServeAlternateActionListRequest) -> dict:
        self._start('GetServeAlternateActionList', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/serve-alternate-actions'
        return self._list('GetServeAlternateActionList', path, 'serveAlternateActions', 'actionId', params.action_id)

    def get_serve_alternate_action(self, params: m.GetServeAlternateActionRequest) -> dict:
        self._start('GetServeAlternateAction', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/serve-alternate-actions/{params.action_id}'
        return self._call('GetServeAlternateAction', 'GET', path, OK)

    def create_serve_alternate_action(self, params: m.CreateServeAlternateActionRequest) -> dict:
        self._start('CreateServeAlternateAction', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/serve-alternate-actions'
        return self._call('CreateServeAlternateAction', 'POST', path, CREATED, params.json_payload)

    def update_serve_alternate_action(self, params: m.UpdateServeAlternateActionRequest) -> dict:
        self._start('UpdateServeAlternateAction', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/serve-alternate-actions/{params.action_id}'
        return self._call('UpdateServeAlternateAction', 'PUT', path, OK, params.json_payload)

    def remove_serve_alternate_action(self, params: m.RemoveServeAlternateActionRequest) -> None:
        self._start('RemoveServeAlternateAction', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/response-actions/serve-alternate-actions/{params.action_id}'
        self._call('RemoveServeAlternateAction', 'DELETE', path, NO_CONTENT)

    # TRANSACTIONAL ENDPOINT
    def get_transactional_endpoint_list(self, params: m.GetTransactionalEndpointListRequest) -> dict:
        self._start('GetTransactionalEndpointList', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/transactional-endpoints/bot-protection'
        return self._list('GetTransactionalEndpointList', path, 'operations', 'operationId', params.operation_id)

    def get_transactional_endpoint(self, params: m.GetTransactionalEndpointRequest) -> dict:
        self._start('GetTransactionalEndpoint', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/transactional-endpoints/bot-protection/{params.operation_id}'
        return self._call('GetTransactionalEndpoint', 'GET', path, OK)

    def create_transactional_endpoint(self, params: m.CreateTransactionalEndpointRequest) -> dict:
        self._start('CreateTransactionalEndpoint', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/transactional-endpoints/bot-protection'
        return self._call('CreateTransactionalEndpoint', 'POST', path, CREATED, params.json_payload)

    def update_transactional_endpoint(self, params: m.UpdateTransactionalEndpointRequest) -> dict:
        self._start('UpdateTransactionalEndpoint', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/transactional-endpoints/bot-protection/{params.operation_id}'
        return self._call('UpdateTransactionalEndpoint', 'PUT', path, OK, params.json_payload)

    def remove_transactional_endpoint(self, params: m.RemoveTransactionalEndpointRequest) -> None:
        self._start('RemoveTransactionalEndpoint', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/security-policies/{params.security_policy_id}/transactional-endpoints/bot-protection/{params.operation_id}'
        self._call('RemoveTransactionalEndpoint', 'DELETE', path, NO_CONTENT)

    # TRANSACTIONAL ENDPOINT PROTECTION
    def get_transactional_endpoint_protection(self, params: m.GetTransactionalEndpointProtectionRequest) -> dict:
        self._start('GetTransactionalEndpointProtection', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/advanced-settings/transactional-endpoint-protection'
        return self._call('GetTransactionalEndpointProtection', 'GET', path, OK)

    def update_transactional_endpoint_protection(self, params: m.UpdateTransactionalEndpointProtectionRequest) -> dict:
        self._start('UpdateTransactionalEndpointProtection', params)
        path = f'/configs/{params.config_id}/versions/{params.version}/advanced-settings/transactional-endpoint-protection'
        return self._call('UpdateTransactionalEndpointProtection', 'PUT', path, OK, params.json_payload)


if __name__ == '__main__':
    pass
