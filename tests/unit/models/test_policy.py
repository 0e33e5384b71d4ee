"""IAMポリシー関連データモデルのユニットテスト。"""

from bedrock_evals.models.policy import PolicyReport, PolicyStatement
from bedrock_evals.models.validation import ValidationResult


class TestPolicyStatement:
    def test_scalar_action_and_resource_become_lists(self) -> None:
        statement = PolicyStatement.model_validate({"Effect": "Allow", "Action": "s3:GetObject", "Resource": "*"})
        assert statement.action == ["s3:GetObject"]
        assert statement.resource == ["*"]
        assert statement.is_allow is True

    def test_non_string_entries_are_dropped(self) -> None:
        statement = PolicyStatement.model_validate({"Effect": "Deny", "Action": ["s3:GetObject", 3, None]})
        assert statement.action == ["s3:GetObject"]
        assert statement.resource == []
        assert statement.is_deny is True

    def test_condition_presence(self) -> None:
        assert PolicyStatement.model_validate({"Condition": {}}).has_condition is True
        assert PolicyStatement.model_validate({"Condition": None}).has_condition is False
        assert PolicyStatement.model_validate({}).has_condition is False

    def test_display_sid(self) -> None:
        assert PolicyStatement.model_validate({"Sid": "Read"}).display_sid == "Read"
        assert PolicyStatement.model_validate({}).display_sid == "unnamed"


class TestPolicyReport:
    def test_info_does_not_fail(self) -> None:
        report = PolicyReport(
            path="p.json",
            statement_count=0,
            results=[ValidationResult(severity="info", rule_id="no-explicit-deny", message="m")],
        )
        assert report.passed is True
        assert report.info_count == 1

    def test_warning_fails(self) -> None:
        report = PolicyReport(
            path="p.json",
            statement_count=1,
            results=[ValidationResult(severity="warning", rule_id="wildcard-resource", message="m")],
        )
        assert report.passed is False
        assert report.warning_count == 1
