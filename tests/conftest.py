"""テスト共通フィクスチャ。"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from bedrock_evals.config import ServerConfig
from bedrock_evals.validators.dataset import DatasetVerifier
from bedrock_evals.validators.iam_policy import IAMPolicyLinter
from bedrock_evals.validators.inputs import InputValidator


@pytest.fixture
def config_dir() -> Path:
    """ルール定義ディレクトリ。"""
    return Path(__file__).parent.parent / "src" / "bedrock_evals" / "rules"


@pytest.fixture
def input_validator(config_dir: Path) -> InputValidator:
    return InputValidator(config_dir=config_dir)


@pytest.fixture
def dataset_verifier(config_dir: Path) -> DatasetVerifier:
    return DatasetVerifier(config_dir=config_dir)


@pytest.fixture
def policy_linter(config_dir: Path) -> IAMPolicyLinter:
    return IAMPolicyLinter(config_dir=config_dir)


@pytest.fixture
def server_config(config_dir: Path) -> ServerConfig:
    """テスト用ServerConfig。"""
    return ServerConfig(config_dir=config_dir)


@pytest.fixture
def write_jsonl(tmp_path: Path) -> Callable[[list[Any]], Path]:
    """レコード（dictまたは生の行文字列）のリストからJSONLファイルを作る。"""

    def _write(lines: list[Any], name: str = "dataset.jsonl") -> Path:
        path = tmp_path / name
        rendered = [line if isinstance(line, str) else json.dumps(line) for line in lines]
        path.write_text("".join(f"{line}\n" for line in rendered), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_policy(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """ポリシー文書をJSONファイルに書き出す。"""

    def _write(document: dict[str, Any], name: str = "policy.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        return path

    return _write
