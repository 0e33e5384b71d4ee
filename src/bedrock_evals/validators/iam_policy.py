"""評価ジョブ用IAMポリシーのセキュリティ検査。"""

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from bedrock_evals.models.errors import (
    InputFileNotFoundError,
    InputFileReadError,
    InvalidPolicyError,
    RuleConfigError,
)
from bedrock_evals.models.policy import PolicyCheckConfig, PolicyReport, PolicyStatement
from bedrock_evals.models.validation import ValidationResult
from bedrock_evals.validators._rules import load_rule_file

logger = logging.getLogger(__name__)

RULES_FILE = "iam-policy-checks.yaml"

PolicyCheck = Callable[[list[PolicyStatement], PolicyCheckConfig], list[ValidationResult]]


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


def _statements_from(document: dict[str, Any]) -> list[PolicyStatement]:
    """Statementを配列・単一オブジェクトのどちらでも受け付けて正規化する。"""
    raw = document.get("Statement")
    if isinstance(raw, dict):
        raw = [raw]
    if not isinstance(raw, list):
        return []
    return [PolicyStatement.model_validate(item) for item in raw if isinstance(item, dict)]


def check_wildcard_resource(statements: list[PolicyStatement], config: PolicyCheckConfig) -> list[ValidationResult]:
    """Allow文のResourceに "*" が含まれていないか。"""
    if not any("*" in s.resource for s in statements if s.is_allow):
        return []
    return [
        ValidationResult(
            severity="warning",
            rule_id="wildcard-resource",
            message="Found wildcard '*' in Allow statement Resource",
            recommendation="Scope Resource to the evaluation bucket and model ARNs.",
        )
    ]


def check_wildcard_action(statements: list[PolicyStatement], config: PolicyCheckConfig) -> list[ValidationResult]:
    """Allow文のActionに "*" または "<service>:*" が含まれていないか。"""
    offending = _unique(
        [a for s in statements if s.is_allow for a in s.action if a == "*" or a.endswith(":*")]
    )
    if not offending:
        return []
    return [
        ValidationResult(
            severity="warning",
            rule_id="wildcard-action",
            message=f"Found wildcard action in Allow statement: {', '.join(offending)}",
            recommendation="List the individual actions the evaluation job needs.",
        )
    ]


def check_unconditioned_sensitive_action(
    statements: list[PolicyStatement],
    config: PolicyCheckConfig,
) -> list[ValidationResult]:
    """機密性の高いアクションがConditionなしで許可されていないか。"""
    results: list[ValidationResult] = []
    for action in config.sensitive_actions:
        sids = _unique(
            [s.display_sid for s in statements if s.is_allow and action in s.action and not s.has_condition]
        )
        if sids:
            results.append(
                ValidationResult(
                    severity="warning",
                    rule_id="unconditioned-sensitive-action",
                    message=f"Action '{action}' in statement '{', '.join(sids)}' has no Condition",
                    recommendation="Add a Condition such as aws:SourceAccount or aws:SourceArn.",
                )
            )
    return results


def check_dangerous_s3_action(statements: list[PolicyStatement], config: PolicyCheckConfig) -> list[ValidationResult]:
    """破壊的・権限昇格につながるS3アクションが許可されていないか。"""
    dangerous = set(config.dangerous_s3_actions)
    offending = _unique([a for s in statements if s.is_allow for a in s.action if a in dangerous])
    if not offending:
        return []
    return [
        ValidationResult(
            severity="warning",
            rule_id="dangerous-s3-action",
            message=f"Found dangerous S3 action in Allow statement: {', '.join(offending)}",
            recommendation="Evaluation jobs only need s3:GetObject, s3:PutObject and s3:ListBucket.",
        )
    ]


POLICY_CHECKS: tuple[PolicyCheck, ...] = (
    check_wildcard_resource,
    check_wildcard_action,
    check_unconditioned_sensitive_action,
    check_dangerous_s3_action,
)


class IAMPolicyLinter:
    """IAMポリシー文書をルールテーブルに基づいて検査する。"""

    def __init__(self, config_dir: Path) -> None:
        self._config_dir = config_dir
        self._config: PolicyCheckConfig | None = None

    def _load_config(self) -> PolicyCheckConfig:
        if self._config is None:
            data = load_rule_file(self._config_dir, RULES_FILE)
            try:
                self._config = PolicyCheckConfig.model_validate(data)
            except ValidationError as e:
                raise RuleConfigError(f"Invalid IAM policy check definition in {RULES_FILE}: {e}") from e
        return self._config

    def lint(self, path: Path) -> PolicyReport:
        """ポリシーファイルを読み込んで検査する。

        Raises:
            InputFileNotFoundError: ファイルが存在しない場合。
            InputFileReadError: ファイルが読み込めない場合。
            InvalidPolicyError: JSONとして解釈できない場合。
        """
        if not path.is_file():
            raise InputFileNotFoundError(str(path))
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            raise InvalidPolicyError(str(path)) from None
        except OSError as e:
            raise InputFileReadError(str(path), e.strerror or type(e).__name__) from e
        try:
            document = json.loads(text)
        except (ValueError, RecursionError):
            raise InvalidPolicyError(str(path)) from None
        return self.lint_document(document, path=str(path))

    def lint_document(self, document: Any, path: str = "<inline>") -> PolicyReport:
        """パース済みのポリシー文書を検査する。

        各チェックはAllow文のみを対象に独立して実行され、警告はチェックごとに集約される。
        Deny文が1件もない場合はinfoを追加するが、合否には影響しない。

        Args:
            document: ポリシー文書（JSONオブジェクト）。
            path: レポートに記録する文書の識別子。

        Returns:
            検査結果。

        Raises:
            InvalidPolicyError: 文書がJSONオブジェクトでない場合。
        """
        if not isinstance(document, dict):
            raise InvalidPolicyError(path, reason="Policy document is not a JSON object")

        config = self._load_config()
        statements = _statements_from(document)

        results: list[ValidationResult] = []
        for check in POLICY_CHECKS:
            results.extend(check(statements, config))

        if not any(s.is_deny for s in statements):
            results.append(
                ValidationResult(
                    severity="info",
                    rule_id="no-explicit-deny",
                    message="No explicit Deny statements found. Consider adding deny rules for dangerous actions.",
                )
            )

        logger.debug("Linted %s: %d statements, %d findings", path, len(statements), len(results))
        return PolicyReport(path=path, statement_count=len(statements), results=results)
