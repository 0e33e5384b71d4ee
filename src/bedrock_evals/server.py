"""FastMCPベースのMCPサーバーエントリポイント。"""

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from bedrock_evals.config import ServerConfig
from bedrock_evals.prompts.workflow import register_workflow_prompts
from bedrock_evals.resources.rules import register_rule_resources
from bedrock_evals.tools.validation import register_validation_tools
from bedrock_evals.validators.dataset import DatasetVerifier
from bedrock_evals.validators.iam_policy import IAMPolicyLinter
from bedrock_evals.validators.inputs import InputValidator


def create_server(config: ServerConfig | None = None) -> FastMCP:
    """MCPサーバーを作成し、ツール・リソース・プロンプトを登録する。

    Args:
        config: サーバー設定。Noneの場合はデフォルト設定を使用。

    Returns:
        設定済みのFastMCPインスタンス。
    """
    if config is None:
        config = ServerConfig()

    mcp = FastMCP("bedrock-evals")

    input_validator = InputValidator(config_dir=config.config_dir)
    dataset_verifier = DatasetVerifier(config_dir=config.config_dir)
    policy_linter = IAMPolicyLinter(config_dir=config.config_dir)

    register_validation_tools(mcp, input_validator, dataset_verifier, policy_linter)
    register_rule_resources(mcp, config.config_dir)
    register_workflow_prompts(mcp)

    # ヘルスチェックエンドポイント
    @mcp.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok"})

    return mcp
