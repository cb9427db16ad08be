from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from typing import Any

from ak_api.security.errors import ResponseFormatError
from ak_api.security.errors import ValidationError


def is_blank(value: Any) -> bool:
    return value is None or (not isinstance(value, bool) and not value)


@dataclass
class BotmanRequest:
    required = ()

    def missing_fields(self) -> list[str]:
        return [name for name in self.required if is_blank(getattr(self, name))]

    def validate(self) -> None:
        missing = self.missing_fields()
        if missing:
            raise ValidationError(missing)


# Shapes shared by most resources
@dataclass
class ConfigVersionRequest(BotmanRequest):
    config_id: int = 0
    version: int = 0
    required = ('config_id', 'version')


@dataclass
class ConfigVersionPayloadRequest(ConfigVersionRequest):
    json_payload: Any = None
    required = ('config_id', 'version', 'json_payload')


@dataclass
class PolicyRequest(ConfigVersionRequest):
    security_policy_id: str = ''
    required = ('config_id', 'version', 'security_policy_id')


@dataclass
class PolicyPayloadRequest(PolicyRequest):
    json_payload: Any = None
    required = ('config_id', 'version', 'security_policy_id', 'json_payload')


# Akamai bot categories
@dataclass
class GetAkamaiBotCategoryListRequest(BotmanRequest):
    category_name: str = ''


# Akamai bot category actions
@dataclass
class GetAkamaiBotCategoryActionListRequest(PolicyRequest):
    category_id: str = ''


@dataclass
class GetAkamaiBotCategoryActionRequest(PolicyRequest):
    category_id: str = ''
    required = ('config_id', 'version', 'security_policy_id', 'category_id')


@dataclass
class UpdateAkamaiBotCategoryActionRequest(PolicyRequest):
    category_id: str = ''
    json_payload: Any = None
    required = ('config_id', 'version', 'security_policy_id', 'category_id', 'json_payload')


# Akamai defined bots
@dataclass
class GetAkamaiDefinedBotListRequest(BotmanRequest):
    bot_name: str = ''


# Bot analytics cookie
@dataclass
class GetBotAnalyticsCookieRequest(ConfigVersionRequest):
    pass


@dataclass
class UpdateBotAnalyticsCookieRequest(ConfigVersionPayloadRequest):
    pass


# Bot category exceptions
@dataclass
class GetBotCategoryExceptionRequest(PolicyRequest):
    pass


@dataclass
class UpdateBotCategoryExceptionRequest(PolicyPayloadRequest):
    pass


# Bot detections
@dataclass
class GetBotDetectionListRequest(BotmanRequest):
    detection_name: str = ''


# Bot detection actions
@dataclass
class GetBotDetectionActionListRequest(PolicyRequest):
    detection_id: str = ''


@dataclass
class GetBotDetectionActionRequest(PolicyRequest):
    detection_id: str = ''
    required = ('config_id', 'version', 'security_policy_id', 'detection_id')


@dataclass
class UpdateBotDetectionActionRequest(PolicyRequest):
    detection_id: str = ''
    json_payload: Any = None
    required = ('config_id', 'version', 'security_policy_id', 'detection_id', 'json_payload')


# Bot endpoint coverage report
@dataclass
class GetBotEndpointCoverageReportRequest(BotmanRequest):
    config_id: int = 0
    version: int = 0
    operation_id: str = ''

    def missing_fields(self) -> list[str]:
        # account wide report when neither is set, config scoped needs both
        if is_blank(self.config_id) and is_blank(self.version):
            return []
        return [name for name in ('config_id', 'version') if is_blank(getattr(self, name))]


# Bot management settings
@dataclass
class GetBotManagementSettingRequest(PolicyRequest):
    pass


@dataclass
class UpdateBotManagementSettingRequest(PolicyPayloadRequest):
    pass


# Challenge actions
@dataclass
class GetChallengeActionListRequest(ConfigVersionRequest):
    action_id: str = ''


@dataclass
class GetChallengeActionRequest(ConfigVersionRequest):
    action_id: str = ''
    required = ('config_id', 'version', 'action_id')


@dataclass
class CreateChallengeActionRequest(ConfigVersionPayloadRequest):
    pass


@dataclass
class UpdateChallengeActionRequest(ConfigVersionRequest):
    action_id: str = ''
    json_payload: Any = None
    required = ('config_id', 'version', 'action_id', 'json_payload')


@dataclass
class RemoveChallengeActionRequest(ConfigVersionRequest):
    action_id: str = ''
    required = ('config_id', 'version', 'action_id')


@dataclass
class UpdateGoogleReCaptchaSecretKeyRequest(ConfigVersionRequest):
    action_id: str = ''
    secret_key: str = ''
    required = ('config_id', 'version', 'action_id', 'secret_key')

    def to_payload(self) -> dict:
        return {'googleReCaptchaSecretKey': self.secret_key}


# Challenge interception rules
@dataclass
class GetChallengeInterceptionRulesRequest(ConfigVersionRequest):
    pass


@dataclass
class UpdateChallengeInterceptionRulesRequest(ConfigVersionPayloadRequest):
    pass


# Client side security
@dataclass
class GetClientSideSecurityRequest(ConfigVersionRequest):
    pass


@dataclass
class UpdateClientSideSecurityRequest(ConfigVersionPayloadRequest):
    pass


# Conditional actions
@dataclass
class GetConditionalActionListRequest(ConfigVersionRequest):
    action_id: str = ''


@dataclass
class GetConditionalActionRequest(ConfigVersionRequest):
    action_id: str = ''
    required = ('config_id', 'version', 'action_id')


@dataclass
class CreateConditionalActionRequest(ConfigVersionPayloadRequest):
    pass


@dataclass
class UpdateConditionalActionRequest(ConfigVersionRequest):
    action_id: str = ''
    json_payload: Any = None
    required = ('config_id', 'version', 'action_id', 'json_payload')


@dataclass
class RemoveConditionalActionRequest(ConfigVersionRequest):
    action_id: str = ''
    required = ('config_id', 'version', 'action_id')


# Content protection rules
@dataclass
class GetContentProtectionRuleListRequest(PolicyRequest):
    content_protection_rule_id: str = ''


@dataclass
class GetContentProtectionRuleRequest(PolicyRequest):
    content_protection_rule_id: str = ''
    required = ('config_id', 'version', 'security_policy_id', 'content_protection_rule_id')


@dataclass
class CreateContentProtectionRuleRequest(PolicyPayloadRequest):
    pass


@dataclass
class UpdateContentProtectionRuleRequest(PolicyRequest):
    content_protection_rule_id: str = ''
    json_payload: Any = None
    required = ('config_id', 'version', 'security_policy_id', 'content_protection_rule_id', 'json_payload')


@dataclass
class RemoveContentProtectionRuleRequest(PolicyRequest):
    content_protection_rule_id: str = ''
    required = ('config_id', 'version', 'security_policy_id', 'content_protection_rule_id')


def sequence_from(data: dict | None, key: str) -> list[str]:
    data = data if data is not None else {}
    if not isinstance(data, dict):
        raise ResponseFormatError(f'sequence response is {type(data).__name__}, expected an object')
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ResponseFormatError(f'"{key}" is {type(value).__name__}, expected a list')
    return list(value)


# Content protection rule sequence
@dataclass
class ContentProtectionRuleUUIDSequence:
    content_protection_rule_sequence: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict | None) -> ContentProtectionRuleUUIDSequence:
        return cls(content_protection_rule_sequence=sequence_from(data, 'contentProtectionRuleSequence'))

    def to_dict(self) -> dict:
        return {'contentProtectionRuleSequence': list(self.content_protection_rule_sequence)}


@dataclass
class GetContentProtectionRuleSequenceRequest(PolicyRequest):
    pass


@dataclass
class UpdateContentProtectionRuleSequenceRequest(PolicyRequest):
    content_protection_rule_sequence: ContentProtectionRuleUUIDSequence = field(default_factory=ContentProtectionRuleUUIDSequence)

    def missing_fields(self) -> list[str]:
        missing = super().missing_fields()
        if is_blank(self.content_protection_rule_sequence.content_protection_rule_sequence):
            missing.append('content_protection_rule_sequence')
        return missing


# Content protection JavaScript injection rules
@dataclass
class GetContentProtectionJavaScriptInjectionRuleListRequest(PolicyRequest):
    content_protection_javascript_injection_rule_id: str = ''


@dataclass
class GetContentProtectionJavaScriptInjectionRuleRequest(PolicyRequest):
    content_protection_javascript_injection_rule_id: str = ''
    required = ('config_id', 'version', 'security_policy_id', 'content_protection_javascript_injection_rule_id')


@dataclass
class CreateContentProtectionJavaScriptInjectionRuleRequest(PolicyPayloadRequest):
    pass


@dataclass
class UpdateContentProtectionJavaScriptInjectionRuleRequest(PolicyRequest):
    content_protection_javascript_injection_rule_id: str = ''
    json_payload: Any = None
    required = ('config_id', 'version', 'security_policy_id',
                'content_protection_javascript_injection_rule_id', 'json_payload')


@dataclass
class RemoveContentProtectionJavaScriptInjectionRuleRequest(PolicyRequest):
    content_protection_javascript_injection_rule_id: str = ''
    required = ('config_id', 'version', 'security_policy_id', 'content_protection_javascript_injection_rule_id')


# Custom bot categories
@dataclass
class GetCustomBotCategoryListRequest(ConfigVersionRequest):
    category_id: str = ''


@dataclass
class GetCustomBotCategoryRequest(ConfigVersionRequest):
    category_id: str = ''
    required = ('config_id', 'version', 'category_id')


@dataclass
class CreateCustomBotCategoryRequest(ConfigVersionPayloadRequest):
    pass


@dataclass
class UpdateCustomBotCategoryRequest(ConfigVersionRequest):
    category_id: str = ''
    json_payload: Any = None
    required = ('config_id', 'version', 'category_id', 'json_payload')


@dataclass
class RemoveCustomBotCategoryRequest(ConfigVersionRequest):
    category_id: str = ''
    required = ('config_id', 'version', 'category_id')


# Custom bot category actions
@dataclass
class GetCustomBotCategoryActionListRequest(PolicyRequest):
    category_id: str = ''


@dataclass
class GetCustomBotCategoryActionRequest(PolicyRequest):
    category_id: str = ''
    required = ('config_id', 'version', 'security_policy_id', 'category_id')


@dataclass
class UpdateCustomBotCategoryActionRequest(PolicyRequest):
    category_id: str = ''
    json_payload: Any = None
    required = ('config_id', 'version', 'security_policy_id', 'category_id', 'json_payload')


# Sequences of bot / category ids
@dataclass
class UUIDSequence:
    sequence: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict | None) -> UUIDSequence:
        return cls(sequence=sequence_from(data, 'sequence'))

    def to_dict(self) -> dict:
        return {'sequence': list(self.sequence)}


@dataclass
class GetCustomBotCategoryItemSequenceRequest(ConfigVersionRequest):
    category_id: str = ''
    required = ('config_id', 'version', 'category_id')


@dataclass
class UpdateCustomBotCategoryItemSequenceRequest(ConfigVersionRequest):
    category_id: str = ''
    sequence: UUIDSequence = field(default_factory=UUIDSequence)
    required = ('config_id', 'version', 'category_id')

    def missing_fields(self) -> list[str]:
        missing = super().missing_fields()
        if is_blank(self.sequence.sequence):
            missing.append('sequence')
        return missing


@dataclass
class GetCustomBotCategorySequenceRequest(ConfigVersionRequest):
    pass


@dataclass
class UpdateCustomBotCategorySequenceRequest(ConfigVersionRequest):
    sequence: UUIDSequence = field(default_factory=UUIDSequence)

    def missing_fields(self) -> list[str]:
        missing = super().missing_fields()
        if is_blank(self.sequence.sequence):
            missing.append('sequence')
        return missing


# Custom clients
@dataclass
class GetCustomClientListRequest(ConfigVersionRequest):
    custom_client_id: str = ''


@dataclass
class GetCustomClientRequest(ConfigVersionRequest):
    custom_client_id: str = ''
    required = ('config_id', 'version', 'custom_client_id')


@dataclass
class CreateCustomClientRequest(ConfigVersionPayloadRequest):
    pass


@dataclass
class UpdateCustomClientRequest(ConfigVersionRequest):
    custom_client_id: str = ''
    json_payload: Any = None
    required = ('config_id', 'version', 'custom_client_id', 'json_payload')


@dataclass
class RemoveCustomClientRequest(ConfigVersionRequest):
    custom_client_id: str = ''
    required = ('config_id', 'version', 'custom_client_id')


# Custom defined bots
@dataclass
class GetCustomDefinedBotListRequest(ConfigVersionRequest):
    bot_id: str = ''


@dataclass
class GetCustomDefinedBotRequest(ConfigVersionRequest):
    bot_id: str = ''
    required = ('config_id', 'version', 'bot_id')


@dataclass
class CreateCustomDefinedBotRequest(ConfigVersionPayloadRequest):
    pass


@dataclass
class UpdateCustomDefinedBotRequest(ConfigVersionRequest):
    bot_id: str = ''
    json_payload: Any = None
    required = ('config_id', 'version', 'bot_id', 'json_payload')


@dataclass
class RemoveCustomDefinedBotRequest(ConfigVersionRequest):
    bot_id: str = ''
    required = ('config_id', 'version', 'bot_id')


# Custom deny actions
@dataclass
class GetCustomDenyActionListRequest(ConfigVersionRequest):
    action_id: str = ''


@dataclass
class GetCustomDenyActionRequest(ConfigVersionRequest):
    action_id: str = ''
    required = ('config_id', 'version', 'action_id')


@dataclass
class CreateCustomDenyActionRequest(ConfigVersionPayloadRequest):
    pass


@dataclass
class UpdateCustomDenyActionRequest(ConfigVersionRequest):
    action_id: str = ''
    json_payload: Any = None
    required = ('config_id', 'version', 'action_id', 'json_payload')


@dataclass
class RemoveCustomDenyActionRequest(ConfigVersionRequest):
    action_id: str = ''
    required = ('config_id', 'version', 'action_id')


# JavaScript injection
@dataclass
class GetJavascriptInjectionRequest(PolicyRequest):
    pass


@dataclass
class UpdateJavascriptInjectionRequest(PolicyPayloadRequest):
    pass


# Recategorized akamai defined bots
@dataclass
class RecategorizedAkamaiDefinedBot:
    bot_id: str = ''
    category_id: str = ''

    @classmethod
    def from_dict(cls, data: dict | None) -> RecategorizedAkamaiDefinedBot:
        data = data if data is not None else {}
        if not isinstance(data, dict):
            raise ResponseFormatError(f'recategorized bot is {type(data).__name__}, expected an object')
        return cls(bot_id=data.get('botId', ''), category_id=data.get('customBotCategoryId', ''))

    def to_dict(self) -> dict:
        return {'botId': self.bot_id, 'customBotCategoryId': self.category_id}


@dataclass
class GetRecategorizedAkamaiDefinedBotListRequest(ConfigVersionRequest):
    bot_id: str = ''


@dataclass
class GetRecategorizedAkamaiDefinedBotRequest(ConfigVersionRequest):
    bot_id: str = ''
    required = ('config_id', 'version', 'bot_id')


@dataclass
class CreateRecategorizedAkamaiDefinedBotRequest(ConfigVersionRequest):
    bot_id: str = ''
    category_id: str = ''
    required = ('config_id', 'version', 'bot_id', 'category_id')

    def to_payload(self) -> dict:
        return RecategorizedAkamaiDefinedBot(self.bot_id, self.category_id).to_dict()


@dataclass
class UpdateRecategorizedAkamaiDefinedBotRequest(CreateRecategorizedAkamaiDefinedBotRequest):
    pass


@dataclass
class RemoveRecategorizedAkamaiDefinedBotRequest(ConfigVersionRequest):
    bot_id: str = ''
    required = ('config_id', 'version', 'bot_id')


# Response actions
@dataclass
class GetResponseActionListRequest(ConfigVersionRequest):
    action_id: str = ''


# Serve alternate actions
@dataclass
class GetServeAlternateActionListRequest(ConfigVersionRequest):
    action_id: str = ''


@dataclass
class GetServeAlternateActionRequest(ConfigVersionRequest):
    action_id: str = ''
    required = ('config_id', 'version', 'action_id')


@dataclass
class CreateServeAlternateActionRequest(ConfigVersionPayloadRequest):
    pass


@dataclass
class UpdateServeAlternateActionRequest(ConfigVersionRequest):
    action_id: str = ''
    json_payload: Any = None
    required = ('config_id', 'version', 'action_id', 'json_payload')


@dataclass
class RemoveServeAlternateActionRequest(ConfigVersionRequest):
    action_id: str = ''
    required = ('config_id', 'version', 'action_id')


# Transactional endpoints
@dataclass
class GetTransactionalEndpointListRequest(PolicyRequest):
    operation_id: str = ''


@dataclass
class GetTransactionalEndpointRequest(PolicyRequest):
    operation_id: str = ''
    required = ('config_id', 'version', 'security_policy_id', 'operation_id')


@dataclass
class CreateTransactionalEndpointRequest(PolicyPayloadRequest):
    pass


@dataclass
class UpdateTransactionalEndpointRequest(PolicyRequest):
    operation_id: str = ''
    json_payload: Any = None
    required = ('config_id', 'version', 'security_policy_id', 'operation_id', 'json_payload')


@dataclass
class RemoveTransactionalEndpointRequest(PolicyRequest):
    operation_id: str = ''
    required = ('config_id', 'version', 'security_policy_id', 'operation_id')


# Transactional endpoint protection
@dataclass
class GetTransactionalEndpointProtectionRequest(ConfigVersionRequest):
    pass


@dataclass
class UpdateTransactionalEndpointProtectionRequest(ConfigVersionPayloadRequest):
    pass


def filter_records(records: list | None, key: str, value: str | None) -> list:
    '''
    Keep the records whose ``key`` equals ``value``; no value keeps everything in order.
    '''
    records = records if records else []
    if not isinstance(records, list):
        raise ResponseFormatError(f'expected a list of records, got {type(records).__name__}')
    if not value:
        return list(records)

    matches = []
    for i, record in enumerate(records):
        if not isinstance(record, dict):
            raise ResponseFormatError(f'record {i} is {type(record).__name__}, expected an object')
        found = record.get(key)
        if not isinstance(found, str):
            raise ResponseFormatError(f'record {i} has no string "{key}"')
        if found == value:
            matches.append(record)
    return matches


if __name__ == '__main__':
    pass
