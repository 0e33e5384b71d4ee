"""ルール定義のMCPリソース。"""

from pathlib import Path

import yaml
from fastmcp import FastMCP

from bedrock_evals.validators._rules import load_rule_file
from bedrock_evals.validators.dataset import RULES_FILE as DATASET_RULES_FILE
from bedrock_evals.validators.iam_policy import RULES_FILE as POLICY_RULES_FILE
from bedrock_evals.validators.inputs import RULES_FILE as INPUT_RULES_FILE


def register_rule_resources(mcp: FastMCP, config_dir: Path) -> None:
    """検証ルール定義をMCPリソースとして登録する。"""

    def _dump(filename: str) -> str:
        data = load_rule_file(config_dir, filename)
        return yaml.dump(data, allow_unicode=True, default_flow_style=False, sort_keys=False)

    @mcp.resource("bedrock-evals://rules/input-patterns")
    async def input_patterns() -> str:
        """入力値検証のカテゴリ・パターン・例の一覧を取得する。"""
        return _dump(INPUT_RULES_FILE)

    @mcp.resource("bedrock-evals://rules/dataset-checks")
    async def dataset_checks() -> str:
        """データセット検証で使う境界マーカーと制御文字の定義を取得する。"""
        return _dump(DATASET_RULES_FILE)

    @mcp.resource("bedrock-evals://rules/iam-policy-checks")
    async def iam_policy_checks() -> str:
        """IAMポリシー検査の対象アクション一覧を取得する。"""
        return _dump(POLICY_RULES_FILE)
