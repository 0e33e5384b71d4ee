"""ルール定義YAMLの読み込み。"""

import logging
from pathlib import Path
from typing import Any

import yaml

from bedrock_evals.models.errors import RuleConfigError

logger = logging.getLogger(__name__)


def load_rule_file(config_dir: Path, filename: str) -> dict[str, Any]:
    """config_dir配下のルール定義ファイルを読み込む。

    Raises:
        RuleConfigError: ファイルが存在しない、またはマッピングとして読めない場合。
    """
    rule_file = config_dir / filename
    try:
        with open(rule_file, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise RuleConfigError(f"Rule file not found: {rule_file}") from None
    except yaml.YAMLError as e:
        raise RuleConfigError(f"Rule file is not valid YAML: {rule_file}: {e}") from e
    if not isinstance(data, dict):
        raise RuleConfigError(f"Rule file must contain a mapping: {rule_file}")
    logger.debug("Loaded rule file %s", rule_file)
    return data
