"""InputValidatorのユニットテスト。"""

from pathlib import Path

import pytest

from bedrock_evals.models.errors import RuleConfigError, UnknownValidationTypeError
from bedrock_evals.validators.inputs import InputValidator


class TestInputValidator:
    def test_categories_in_table_order(self, input_validator: InputValidator) -> None:
        assert input_validator.categories == [
            "region",
            "bucket_name",
            "role_name",
            "job_name",
            "account_id",
            "model_id",
        ]

    @pytest.mark.parametrize(
        ("category", "value"),
        [
            ("region", "us-east-1"),
            ("region", "ap-northeast-1"),
            ("bucket_name", "my-eval-bucket"),
            ("bucket_name", "abc"),
            ("bucket_name", "my.eval.bucket"),
            ("role_name", "BedrockEvalRole"),
            ("role_name", "service-role+eval=1,a.b@c_d"),
            ("job_name", "my-eval-20240101"),
            ("job_name", "a--b"),
            ("account_id", "123456789012"),
            ("model_id", "amazon.nova-pro-v1:0"),
            ("model_id", "anthropic.claude-3-haiku-20240307-v1:0"),
        ],
    )
    def test_accepts_valid_values(self, input_validator: InputValidator, category: str, value: str) -> None:
        result = input_validator.validate(category, value)
        assert result.valid is True
        assert result.message == f"'{value}' is a valid {category}"

    @pytest.mark.parametrize(
        ("category", "value"),
        [
            ("region", "US-EAST-1"),
            ("region", "useast1"),
            ("region", "us-east-"),
            ("bucket_name", "ab"),
            ("bucket_name", "My-Bucket"),
            ("bucket_name", "-bucket"),
            ("bucket_name", "bucket-"),
            ("role_name", "role with space"),
            ("role_name", ""),
            ("job_name", "My-Job"),
            ("job_name", "job-"),
            ("job_name", "-job"),
            ("account_id", "1234567890123"),
            ("account_id", "12345678901"),
            ("account_id", "12345678901a"),
            ("model_id", "model/id"),
            ("model_id", ""),
        ],
    )
    def test_rejects_invalid_values(self, input_validator: InputValidator, category: str, value: str) -> None:
        result = input_validator.validate(category, value)
        assert result.valid is False
        assert value in result.message

    def test_bucket_name_length_boundaries(self, input_validator: InputValidator) -> None:
        assert input_validator.validate("bucket_name", "a" * 63).valid is True
        assert input_validator.validate("bucket_name", "a" * 64).valid is False

    def test_job_name_length_boundaries(self, input_validator: InputValidator) -> None:
        assert input_validator.validate("job_name", "a" * 62).valid is True
        assert input_validator.validate("job_name", "a" * 63).valid is True
        assert input_validator.validate("job_name", "a" * 64).valid is False

    def test_trailing_newline_is_rejected(self, input_validator: InputValidator) -> None:
        assert input_validator.validate("account_id", "123456789012\n").valid is False

    def test_failure_carries_pattern_and_example(self, input_validator: InputValidator) -> None:
        result = input_validator.validate("region", "nowhere")
        assert result.message == "Invalid AWS region: 'nowhere'"
        assert result.pattern == "^[a-z]{2}-[a-z]+-[0-9]+$"
        assert result.example == "us-east-1"

    def test_bucket_pattern_is_preserved(self, input_validator: InputValidator) -> None:
        assert input_validator.get_rule("bucket_name").pattern == r"^[a-z0-9][a-z0-9.\-]{1,61}[a-z0-9]$"
        assert input_validator.get_rule("account_id").example == "123456789012"

    def test_unknown_category_raises(self, input_validator: InputValidator) -> None:
        with pytest.raises(UnknownValidationTypeError) as exc_info:
            input_validator.validate("vpc_id", "vpc-123")
        assert str(exc_info.value) == "Unknown validation type: 'vpc_id'"

    def test_validate_all_keeps_input_order(self, input_validator: InputValidator) -> None:
        results = input_validator.validate_all({"region": "us-west-2", "account_id": "42"})
        assert [r.category for r in results] == ["region", "account_id"]
        assert [r.valid for r in results] == [True, False]

    def test_missing_rules_file_raises(self, tmp_path: Path) -> None:
        validator = InputValidator(config_dir=tmp_path)
        with pytest.raises(RuleConfigError):
            validator.validate("region", "us-east-1")

    def test_is_deterministic(self, input_validator: InputValidator) -> None:
        first = input_validator.validate("job_name", "eval-job")
        second = input_validator.validate("job_name", "eval-job")
        assert first == second
