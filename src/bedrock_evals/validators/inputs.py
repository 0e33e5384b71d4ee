"""AWS CLI引数の入力値バリデーション。"""

import re
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from bedrock_evals.models.errors import RuleConfigError, UnknownValidationTypeError
from bedrock_evals.models.validation import InputCheckResult, InputRule
from bedrock_evals.validators._rules import load_rule_file

RULES_FILE = "input-patterns.yaml"


class InputValidator:
    """カテゴリごとの固定パターンで入力値を検証する。"""

    def __init__(self, config_dir: Path) -> None:
        self._config_dir = config_dir
        self._rules: dict[str, InputRule] | None = None

    def _load_rules(self) -> dict[str, InputRule]:
        """入力パターン定義をYAMLファイルから読み込む。"""
        if self._rules is not None:
            return self._rules

        data = load_rule_file(self._config_dir, RULES_FILE)
        rules: dict[str, InputRule] = {}
        try:
            for rule_data in data.get("patterns") or []:
                rule = InputRule.model_validate(rule_data)
                rules[rule.category] = rule
        except ValidationError as e:
            raise RuleConfigError(f"Invalid input pattern definition in {RULES_FILE}: {e}") from e

        self._rules = rules
        return rules

    @property
    def categories(self) -> list[str]:
        return list(self._load_rules())

    def get_rule(self, category: str) -> InputRule:
        """カテゴリに対応するルールを返す。

        Raises:
            UnknownValidationTypeError: 未定義のカテゴリの場合。
        """
        rule = self._load_rules().get(category)
        if rule is None:
            raise UnknownValidationTypeError(category)
        return rule

    def validate(self, category: str, value: str) -> InputCheckResult:
        """入力値がカテゴリのパターンに完全一致するか検証する。

        Args:
            category: 検証カテゴリ（例: "region", "bucket_name"）。
            value: 検証対象の文字列。

        Returns:
            検証結果。不一致の場合もエラーは送出せず valid=False を返す。

        Raises:
            UnknownValidationTypeError: 未定義のカテゴリの場合。
        """
        rule = self.get_rule(category)
        valid = re.fullmatch(rule.pattern, value) is not None
        if valid:
            message = f"'{value}' is a valid {category}"
        else:
            message = f"Invalid {rule.label}: '{value}'"
        return InputCheckResult(
            category=category,
            value=value,
            valid=valid,
            message=message,
            pattern=rule.pattern,
            example=rule.example,
        )

    def validate_all(self, values: Mapping[str, str]) -> list[InputCheckResult]:
        """複数の（カテゴリ, 値）をまとめて検証する。結果は入力順。"""
        return [self.validate(category, value) for category, value in values.items()]
