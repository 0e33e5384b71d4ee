"""検証ツールのコマンドラインエントリポイント。

各コマンドは終了ステータスと標準出力・標準エラー出力のテキスト行でのみ結果を返す。
"""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from bedrock_evals.config import RULES_DIR
from bedrock_evals.log import configure_logging
from bedrock_evals.models.dataset import DatasetReport
from bedrock_evals.models.errors import BedrockEvalsError
from bedrock_evals.models.policy import PolicyReport
from bedrock_evals.models.validation import ValidationResult
from bedrock_evals.validators.dataset import DatasetVerifier
from bedrock_evals.validators.iam_policy import IAMPolicyLinter
from bedrock_evals.validators.inputs import InputValidator


def _parser(prog: str, description: str, epilog: str | None = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description, epilog=epilog)
    parser.add_argument("--log-level", default="WARNING", help="logging level (default: WARNING)")
    return parser


def _err(message: str) -> None:
    print(message, file=sys.stderr)


def _format_result(result: ValidationResult) -> str:
    prefix = result.severity.upper()
    if result.line is not None:
        return f"{prefix}: Line {result.line}: {result.message}"
    return f"{prefix}: {result.message}"


def validate_input_main(argv: Sequence[str] | None = None) -> int:
    """`bedrock-evals-validate-input <type> <value>`"""
    parser = _parser(
        prog="bedrock-evals-validate-input",
        description="Validate an AWS CLI argument for a Bedrock evaluation job.",
        epilog="Types: region, bucket_name, role_name, job_name, account_id, model_id",
    )
    parser.add_argument("type", help="validation type")
    parser.add_argument("value", help="value to validate")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    validator = InputValidator(config_dir=RULES_DIR)
    try:
        result = validator.validate(args.type, args.value)
    except BedrockEvalsError as e:
        _err(f"ERROR: {e}")
        return 1

    if not result.valid:
        _err(f"ERROR: {result.message}")
        _err(f"  Expected pattern: {result.pattern} (e.g., {result.example})")
        return 1

    print(f"OK: {result.message}")
    return 0


def render_dataset_report(report: DatasetReport) -> int:
    """データセット検証結果を出力し、終了ステータスを返す。"""
    print(f"Validating dataset: {report.path} ({report.total_lines} lines)")
    print("---")
    for result in report.results:
        _err(_format_result(result))
    print("---")
    print(f"SHA-256: {report.checksum}")
    print(f"Lines: {report.total_lines}")
    print(f"Errors: {report.error_count}")
    print(f"Warnings: {report.warning_count}")

    if report.verdict == "failed":
        print(f"RESULT: FAILED ({report.error_count} error(s) found)")
        return 1
    if report.verdict == "passed_with_warnings":
        print(f"RESULT: PASSED with {report.warning_count} warning(s)")
        return 0
    print("RESULT: PASSED (dataset is valid)")
    return 0


def verify_dataset_main(argv: Sequence[str] | None = None) -> int:
    """`bedrock-evals-verify-dataset <dataset.jsonl>`"""
    parser = _parser(
        prog="bedrock-evals-verify-dataset",
        description="Validate a JSONL dataset for Bedrock evaluation jobs.",
    )
    parser.add_argument("dataset", type=Path, help="path to the JSONL dataset")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    verifier = DatasetVerifier(config_dir=RULES_DIR)
    try:
        report = verifier.verify(args.dataset)
    except BedrockEvalsError as e:
        _err(f"ERROR: {e}")
        return 1
    return render_dataset_report(report)


def render_policy_report(report: PolicyReport) -> int:
    """IAMポリシー検査結果を出力し、終了ステータスを返す。"""
    print(f"Checking IAM policy: {report.path}")
    print("---")
    for result in report.results:
        _err(_format_result(result))
    print("---")
    if not report.passed:
        print(f"RESULT: {report.warning_count} warning(s) found")
        return 1
    print("RESULT: No warnings, policy looks good")
    return 0


def lint_policy_main(argv: Sequence[str] | None = None) -> int:
    """`bedrock-evals-lint-policy <policy.json>`"""
    parser = _parser(
        prog="bedrock-evals-lint-policy",
        description="Validate an IAM policy JSON file for common security issues.",
    )
    parser.add_argument("policy", type=Path, help="path to the policy JSON file")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    linter = IAMPolicyLinter(config_dir=RULES_DIR)
    try:
        report = linter.lint(args.policy)
    except BedrockEvalsError as e:
        _err(f"ERROR: {e}")
        return 1
    return render_policy_report(report)
