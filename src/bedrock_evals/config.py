"""bedrock-evalsの設定管理。"""

from pathlib import Path

from pydantic_settings import BaseSettings

_PACKAGE_ROOT = Path(__file__).parent

# パッケージ同梱のルール定義。CLIは常にこれを使う
RULES_DIR = _PACKAGE_ROOT / "rules"


class ServerConfig(BaseSettings):
    """MCPサーバーの設定。環境変数から読み込み可能。"""

    model_config = {"env_prefix": "BEDROCK_EVALS_"}

    config_dir: Path = RULES_DIR
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "WARNING"
