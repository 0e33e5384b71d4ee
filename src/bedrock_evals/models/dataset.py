"""評価データセット検証のデータモデル。"""

import re
from typing import Literal

from pydantic import BaseModel, Field

from bedrock_evals.models.validation import ValidationResult

DatasetVerdict = Literal["passed", "passed_with_warnings", "failed"]


class DatasetCheckConfig(BaseModel):
    """データセット検証の設定値（YAMLから読み込み）。"""

    boundary_markers: list[str]
    control_characters: re.Pattern[str]
    expected_model_responses: int = 1


class DatasetReport(BaseModel):
    """JSONLデータセット1ファイル分の検証結果。"""

    path: str
    total_lines: int
    checksum: str
    results: list[ValidationResult] = Field(default_factory=list)

    @property
    def error_count(self) -> int:
        return sum(1 for r in self.results if r.severity == "error")

    @property
    def warning_count(self) -> int:
        return sum(1 for r in self.results if r.severity == "warning")

    @property
    def verdict(self) -> DatasetVerdict:
        """エラーがあればfailed、警告のみならpassed_with_warnings、どちらもなければpassed。"""
        if self.error_count > 0:
            return "failed"
        if self.warning_count > 0:
            return "passed_with_warnings"
        return "passed"
