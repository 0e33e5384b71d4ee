"""評価ジョブ前のプリフライトMCPプロンプト定義。"""

from fastmcp import FastMCP


def register_workflow_prompts(mcp: FastMCP) -> None:
    """ワークフロー系のMCPプロンプトを登録する。"""

    @mcp.prompt()
    def evaluation_preflight() -> str:
        """Bedrock評価ジョブを作成する前の検証手順を返す。"""
        return (
            "## Bedrock評価ジョブのプリフライトチェック\n\n"
            "AWS CLIコマンドを実行する前に、以下の順番で検証してください。\n\n"
            "1. `validate_inputs` ツールで region, bucket_name, role_name, job_name, "
            "account_id, model_id をまとめて検証してください。"
            " `valid` がfalseの値はコマンドに埋め込まないでください。\n"
            "2. `verify_dataset` ツールでJSONLデータセットを検証してください。"
            " `verdict` が `failed` の場合はエラー行を修正して再検証してください。"
            " `passed_with_warnings` の場合は警告内容を利用者に提示してください。\n"
            "3. アップロードしたデータセットの `checksum` を記録してください。"
            " 評価結果とデータセットの対応付けに使います。\n"
            "4. `lint_iam_policy` または `lint_iam_policy_document` で評価ジョブ用ロールの"
            "ポリシーを検査してください。警告がある場合はリソースARNとアクションを絞り込んでください。\n"
            "5. 全ての検証を通過してから `aws bedrock create-evaluation-job` を実行してください。\n"
        )
