"""IAMポリシー検査のデータモデル。"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bedrock_evals.models.validation import ValidationResult


def _as_string_list(value: Any) -> list[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [v for v in value if isinstance(v, str)]
    return []


class PolicyStatement(BaseModel):
    """IAMポリシーのStatement要素。

    ActionとResourceは文字列・配列のどちらでも受け付け、リストに正規化する。
    """

    model_config = ConfigDict(extra="ignore")

    sid: str | None = Field(default=None, alias="Sid")
    effect: str | None = Field(default=None, alias="Effect")
    action: list[str] = Field(default_factory=list, alias="Action")
    resource: list[str] = Field(default_factory=list, alias="Resource")
    condition: Any = Field(default=None, alias="Condition")

    @field_validator("action", "resource", mode="before")
    @classmethod
    def _normalize_list(cls, value: Any) -> list[str]:
        return _as_string_list(value)

    @field_validator("sid", "effect", mode="before")
    @classmethod
    def _ignore_non_string(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None

    @property
    def is_allow(self) -> bool:
        return self.effect == "Allow"

    @property
    def is_deny(self) -> bool:
        return self.effect == "Deny"

    @property
    def has_condition(self) -> bool:
        return self.condition is not None

    @property
    def display_sid(self) -> str:
        return self.sid or "unnamed"


class PolicyCheckConfig(BaseModel):
    """IAMポリシー検査の設定値（YAMLから読み込み）。"""

    sensitive_actions: list[str]
    dangerous_s3_actions: list[str]


class PolicyReport(BaseModel):
    """IAMポリシー1件分の検査結果。"""

    path: str
    statement_count: int
    results: list[ValidationResult] = Field(default_factory=list)

    @property
    def warning_count(self) -> int:
        return sum(1 for r in self.results if r.severity == "warning")

    @property
    def info_count(self) -> int:
        return sum(1 for r in self.results if r.severity == "info")

    @property
    def passed(self) -> bool:
        """警告が0件なら合格。infoは判定に影響しない。"""
        return self.warning_count == 0
