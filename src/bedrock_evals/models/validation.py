"""バリデーション関連のデータモデル。"""

from typing import Literal

from pydantic import BaseModel

Severity = Literal["error", "warning", "info"]


class InputRule(BaseModel):
    """入力値検証ルール定義（YAMLから読み込み）。"""

    category: str
    label: str
    pattern: str
    example: str


class InputCheckResult(BaseModel):
    """入力値1件の検証結果。"""

    category: str
    value: str
    valid: bool
    message: str
    pattern: str
    example: str


class ValidationResult(BaseModel):
    """データセット検証・ポリシー検査の個別検出結果。"""

    severity: Severity
    rule_id: str
    message: str
    line: int | None = None
    recommendation: str = ""
