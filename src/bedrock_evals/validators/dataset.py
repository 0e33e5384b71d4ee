"""Bedrock評価ジョブ用JSONLデータセットの検証ロジック。"""

import hashlib
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from bedrock_evals.models.dataset import DatasetCheckConfig, DatasetReport
from bedrock_evals.models.errors import InputFileNotFoundError, InputFileReadError, RuleConfigError
from bedrock_evals.models.validation import ValidationResult
from bedrock_evals.validators._rules import load_rule_file

logger = logging.getLogger(__name__)

RULES_FILE = "dataset-checks.yaml"


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def _response_texts(record: dict[str, Any]) -> list[str]:
    """modelResponses[*].response を文字列として取り出す。"""
    responses = record.get("modelResponses")
    if not isinstance(responses, list):
        return []
    return [_as_text(item.get("response")) for item in responses if isinstance(item, dict)]


def _json_type_name(value: Any) -> str:
    if isinstance(value, dict):
        return "object"
    if isinstance(value, str):
        return "string"
    if value is None:
        return "null"
    return type(value).__name__


class DatasetVerifier:
    """JSONLデータセットを1行ずつ検証し、チェックサムと判定を返す。"""

    def __init__(self, config_dir: Path) -> None:
        self._config_dir = config_dir
        self._config: DatasetCheckConfig | None = None

    def _load_config(self) -> DatasetCheckConfig:
        if self._config is None:
            data = load_rule_file(self._config_dir, RULES_FILE)
            try:
                self._config = DatasetCheckConfig.model_validate(data)
            except ValidationError as e:
                raise RuleConfigError(f"Invalid dataset check definition in {RULES_FILE}: {e}") from e
        return self._config

    def verify(self, path: Path) -> DatasetReport:
        """データセットファイルを検証する。

        空行（空白のみの行）はスキップするが行番号は消費する。
        各行は独立に検証し、途中でエラーがあってもファイル末尾まで走査する。

        Args:
            path: JSONLファイルのパス。

        Returns:
            検証結果。判定は report.verdict で参照する。

        Raises:
            InputFileNotFoundError: ファイルが存在しない場合。
            InputFileReadError: ファイルが読み込めない場合。
        """
        config = self._load_config()
        if not path.is_file():
            raise InputFileNotFoundError(str(path))

        try:
            content = path.read_bytes()
        except OSError as e:
            raise InputFileReadError(str(path), e.strerror or type(e).__name__) from e
        checksum = hashlib.sha256(content).hexdigest()

        lines = content.decode("utf-8", errors="replace").split("\n")
        if lines and lines[-1] == "":
            lines.pop()

        results: list[ValidationResult] = []
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            results.extend(self._check_line(line_number, line, config))

        logger.debug("Verified %s: %d lines, %d findings", path, len(lines), len(results))
        return DatasetReport(
            path=str(path),
            total_lines=len(lines),
            checksum=checksum,
            results=results,
        )

    def _check_line(self, line_number: int, line: str, config: DatasetCheckConfig) -> list[ValidationResult]:
        """1行分のレコードを検証する。"""
        # 桁数上限を超える整数はValueError、深いネストはRecursionErrorになる
        try:
            record = json.loads(line)
        except (ValueError, RecursionError):
            return [
                ValidationResult(
                    severity="error",
                    rule_id="invalid-json",
                    message="Invalid JSON",
                    line=line_number,
                    recommendation="Each line must be a complete JSON object.",
                )
            ]
        if not isinstance(record, dict):
            return [
                ValidationResult(
                    severity="error",
                    rule_id="not-an-object",
                    message=f"Expected a JSON object, found {_json_type_name(record)}",
                    line=line_number,
                    recommendation="Each line must be a complete JSON object.",
                )
            ]

        results: list[ValidationResult] = []
        results.extend(self._check_required_fields(line_number, record, config))
        results.extend(self._check_boundary_markers(line_number, record, config))
        results.extend(self._check_control_characters(line_number, record, config))
        return results

    @staticmethod
    def _check_required_fields(
        line_number: int,
        record: dict[str, Any],
        config: DatasetCheckConfig,
    ) -> list[ValidationResult]:
        """prompt / modelResponses の存在と modelResponses の件数を検証する。"""
        results: list[ValidationResult] = []
        if "prompt" not in record:
            results.append(
                ValidationResult(
                    severity="error",
                    rule_id="missing-prompt",
                    message="Missing 'prompt' field",
                    line=line_number,
                )
            )

        if "modelResponses" not in record:
            results.append(
                ValidationResult(
                    severity="error",
                    rule_id="missing-model-responses",
                    message="Missing 'modelResponses' field",
                    line=line_number,
                )
            )
            return results

        responses = record["modelResponses"]
        expected = config.expected_model_responses
        if not isinstance(responses, list):
            found = _json_type_name(responses)
        elif len(responses) != expected:
            found = str(len(responses))
        else:
            return results

        results.append(
            ValidationResult(
                severity="warning",
                rule_id="model-response-count",
                message=f"Expected exactly {expected} modelResponse, found {found}",
                line=line_number,
                recommendation="Bring-your-own-response jobs evaluate a single model per record.",
            )
        )
        return results

    @staticmethod
    def _check_boundary_markers(
        line_number: int,
        record: dict[str, Any],
        config: DatasetCheckConfig,
    ) -> list[ValidationResult]:
        """プロンプト境界マーカーの混入を検出する。"""
        text = "\n".join(
            [
                _as_text(record.get("prompt")),
                *_response_texts(record),
                _as_text(record.get("referenceResponse")),
            ]
        )
        if not any(marker in text for marker in config.boundary_markers):
            return []
        return [
            ValidationResult(
                severity="warning",
                rule_id="boundary-marker",
                message="Contains boundary marker strings that may cause prompt injection",
                line=line_number,
                recommendation="Remove or escape the boundary markers before uploading.",
            )
        ]

    @staticmethod
    def _check_control_characters(
        line_number: int,
        record: dict[str, Any],
        config: DatasetCheckConfig,
    ) -> list[ValidationResult]:
        """タブ・改行以外の制御文字を検出する。"""
        text = "".join([_as_text(record.get("prompt")), *_response_texts(record)])
        if not config.control_characters.search(text):
            return []
        return [
            ValidationResult(
                severity="warning",
                rule_id="control-characters",
                message="Contains control characters, consider sanitizing",
                line=line_number,
            )
        ]
