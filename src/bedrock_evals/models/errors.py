"""bedrock-evalsのカスタム例外クラス。"""


class BedrockEvalsError(Exception):
    """bedrock-evalsの基底例外クラス。"""


class UnknownValidationTypeError(BedrockEvalsError):
    """未定義の入力検証カテゴリが指定された場合の例外。"""

    def __init__(self, category: str) -> None:
        super().__init__(f"Unknown validation type: '{category}'")
        self.category = category


class InputFileNotFoundError(BedrockEvalsError):
    """検証対象のファイルが存在しない場合の例外。"""

    def __init__(self, path: str) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path


class InvalidPolicyError(BedrockEvalsError):
    """IAMポリシーがJSONとして解釈できない場合の例外。"""

    def __init__(self, path: str, reason: str = "Invalid JSON") -> None:
        super().__init__(f"{reason} in {path}")
        self.path = path
        self.reason = reason


class RuleConfigError(BedrockEvalsError):
    """ルール定義ファイルの読み込みエラー。"""


class InputFileReadError(BedrockEvalsError):
    """検証対象のファイルが読み込めない場合の例外。"""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason
