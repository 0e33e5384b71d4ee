"""検証系のMCPツール定義。"""

from pathlib import Path
from typing import Any

from fastmcp import FastMCP

from bedrock_evals.models.dataset import DatasetReport
from bedrock_evals.models.errors import BedrockEvalsError
from bedrock_evals.models.policy import PolicyReport
from bedrock_evals.validators.dataset import DatasetVerifier
from bedrock_evals.validators.iam_policy import IAMPolicyLinter
from bedrock_evals.validators.inputs import InputValidator


def _dataset_payload(report: DatasetReport) -> dict[str, Any]:
    return {
        "path": report.path,
        "verdict": report.verdict,
        "checksum": report.checksum,
        "total_lines": report.total_lines,
        "error_count": report.error_count,
        "warning_count": report.warning_count,
        "results": [r.model_dump() for r in report.results],
    }


def _policy_payload(report: PolicyReport) -> dict[str, Any]:
    return {
        "path": report.path,
        "passed": report.passed,
        "statement_count": report.statement_count,
        "warning_count": report.warning_count,
        "results": [r.model_dump() for r in report.results],
    }


def register_validation_tools(
    mcp: FastMCP,
    input_validator: InputValidator,
    dataset_verifier: DatasetVerifier,
    policy_linter: IAMPolicyLinter,
) -> None:
    """検証関連のMCPツールを登録する。"""

    @mcp.tool()
    async def validate_input(category: str, value: str) -> dict[str, Any]:
        """AWS CLIに渡す値を検証する。

        評価ジョブ作成コマンドに値を埋め込む前に呼び出してください。

        Args:
            category: 検証カテゴリ。region, bucket_name, role_name, job_name,
                account_id, model_id のいずれか。
            value: 検証対象の値。
        """
        try:
            return input_validator.validate(category, value).model_dump()
        except BedrockEvalsError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def validate_inputs(values: dict[str, str]) -> dict[str, Any]:
        """複数の値をまとめて検証する。

        Args:
            values: カテゴリをキー、検証対象の値を値とする辞書。
                例: {"region": "us-east-1", "bucket_name": "my-eval-bucket"}
        """
        try:
            results = input_validator.validate_all(values)
        except BedrockEvalsError as e:
            return {"error": type(e).__name__, "message": str(e)}
        return {
            "valid": all(r.valid for r in results),
            "results": [r.model_dump() for r in results],
        }

    @mcp.tool()
    async def verify_dataset(path: str) -> dict[str, Any]:
        """評価用JSONLデータセットを検証する。

        各行のJSON構造・必須フィールド・境界マーカー・制御文字を検査し、
        SHA-256チェックサムと判定（passed / passed_with_warnings / failed）を返します。
        verdictがfailedの場合はS3へアップロードしないでください。

        Args:
            path: JSONLファイルのパス。
        """
        try:
            report = dataset_verifier.verify(Path(path))
        except BedrockEvalsError as e:
            return {"error": type(e).__name__, "message": str(e)}
        return _dataset_payload(report)

    @mcp.tool()
    async def lint_iam_policy(path: str) -> dict[str, Any]:
        """IAMポリシーJSONファイルの危険な権限付与を検査する。

        Args:
            path: ポリシーJSONファイルのパス。
        """
        try:
            report = policy_linter.lint(Path(path))
        except BedrockEvalsError as e:
            return {"error": type(e).__name__, "message": str(e)}
        return _policy_payload(report)

    @mcp.tool()
    async def lint_iam_policy_document(policy: dict[str, Any]) -> dict[str, Any]:
        """ファイルに書き出す前のIAMポリシー文書を検査する。

        Args:
            policy: ポリシー文書（Version, Statement を持つオブジェクト）。
        """
        try:
            report = policy_linter.lint_document(policy)
        except BedrockEvalsError as e:
            return {"error": type(e).__name__, "message": str(e)}
        return _policy_payload(report)
