"""Tests for custom field definitions: naming, value coercion and filtering."""

from datetime import date, datetime
from uuid import uuid4

import pytest

from app.domain.entities.custom_field import (
    CUSTOM_FIELD_TEMPLATES,
    CustomFieldDefinition,
    CustomFieldType,
    to_field_name,
)
from app.domain.value_objects import CustomFieldId, UserId


def make_field(label="Notice Period", field_type=CustomFieldType.TEXT, **kwargs):
    return CustomFieldDefinition(
        id=CustomFieldId.generate(),
        owner_id=UserId(uuid4()),
        name=kwargs.pop("name", ""),
        label=label,
        field_type=field_type,
        **kwargs,
    )


class TestDefinition:

    @pytest.mark.parametrize(
        "label,expected",
        [
            ("Notice Period", "notice_period"),
            ("  Salary (ZAR)! ", "salary_zar"),
            ("Has Driver's License", "has_driver_s_license"),
        ],
    )
    def test_field_name_from_label(self, label, expected):
        assert to_field_name(label) == expected

    def test_name_derived_from_label_when_missing(self):
        assert make_field("Years in Trade").name == "years_in_trade"

    def test_label_required(self):
        with pytest.raises(ValueError):
            make_field(label="  ", name="something")

    def test_select_requires_options(self):
        with pytest.raises(ValueError, match="at least one option"):
            make_field(field_type=CustomFieldType.SELECT, options=["  "])

    def test_cannot_depend_on_itself(self):
        with pytest.raises(ValueError, match="conditional on itself"):
            make_field("Notice Period", conditional_on="notice_period")

    def test_update_keeps_name(self):
        definition = make_field("Notice Period")
        definition.update(name="renamed", label="Notice", required=True)

        assert definition.name == "notice_period"
        assert definition.label == "Notice"
        assert definition.required is True

    def test_update_unknown_attribute(self):
        with pytest.raises(ValueError, match="Unknown"):
            make_field().update(colour="blue")


class TestValidateValue:

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_blank_values_become_none(self, raw):
        assert make_field().validate_value(raw) is None

    def test_text_is_trimmed(self):
        assert make_field().validate_value("  30 days ") == "30 days"

    @pytest.mark.parametrize("raw,expected", [("Yes", True), ("y", True), ("1", True), ("No", False), ("0", False), (True, True)])
    def test_boolean_coercion(self, raw, expected):
        assert make_field("Relocate", CustomFieldType.BOOLEAN).validate_value(raw) is expected

    def test_boolean_rejects_other_text(self):
        with pytest.raises(ValueError, match="Relocate must be yes or no"):
            make_field("Relocate", CustomFieldType.BOOLEAN).validate_value("maybe")

    def test_number_coercion(self):
        definition = make_field("Years", CustomFieldType.NUMBER)

        assert definition.validate_value("5") == 5
        assert isinstance(definition.validate_value("5.0"), int)
        assert definition.validate_value("2.5") == 2.5

    @pytest.mark.parametrize("raw", ["abc", True])
    def test_number_rejects_non_numeric(self, raw):
        with pytest.raises(ValueError, match="must be a number"):
            make_field("Years", CustomFieldType.NUMBER).validate_value(raw)

    def test_date_coercion(self):
        definition = make_field("Available", CustomFieldType.DATE)

        assert definition.validate_value("2024-03-01T10:00:00") == "2024-03-01"
        assert definition.validate_value(date(2024, 3, 1)) == "2024-03-01"
        assert definition.validate_value(datetime(2024, 3, 1, 9, 30)) == "2024-03-01"

    def test_date_rejects_bad_format(self):
        with pytest.raises(ValueError, match="YYYY-MM-DD"):
            make_field("Available", CustomFieldType.DATE).validate_value("01/03/2024")

    def test_select_matches_option_case_insensitively(self):
        definition = make_field(field_type=CustomFieldType.SELECT, options=["Immediate", "1 Month"])

        assert definition.validate_value("immediate") == "Immediate"

    def test_select_rejects_unknown_option(self):
        definition = make_field(field_type=CustomFieldType.SELECT, options=["Immediate", "1 Month"])

        with pytest.raises(ValueError, match="must be one of: Immediate, 1 Month"):
            definition.validate_value("Never")


class TestConditionalFields:

    def test_unconditional_field_always_active(self):
        assert make_field().is_active_for({})

    def test_truthy_condition(self):
        definition = make_field("Clearance Level", conditional_on="has_clearance")

        assert definition.is_active_for({"has_clearance": True})
        assert not definition.is_active_for({"has_clearance": False})
        assert not definition.is_active_for({})

    def test_condition_on_specific_value(self):
        definition = make_field("Vehicle Type", conditional_on="has_vehicle", conditional_value="Yes")

        assert definition.is_active_for({"has_vehicle": "yes"})
        assert not definition.is_active_for({"has_vehicle": "no"})


class TestMatchesFilter:

    def test_blank_filter_matches_everything(self):
        assert make_field().matches_filter(None, "")

    def test_missing_value_never_matches(self):
        assert not make_field().matches_filter(None, "anything")

    def test_text_filter_is_case_insensitive_substring(self):
        assert make_field().matches_filter("Three Months", "month")
        assert not make_field().matches_filter("Immediate", "month")

    def test_boolean_filter(self):
        definition = make_field("Relocate", CustomFieldType.BOOLEAN)

        assert definition.matches_filter(True, "true")
        assert definition.matches_filter(False, "false")
        assert not definition.matches_filter(True, "false")

    def test_number_filter_compares_numerically(self):
        definition = make_field("Years", CustomFieldType.NUMBER)

        assert definition.matches_filter(5, "5.0")
        assert not definition.matches_filter(5, "abc")

    def test_date_filter_compares_day(self):
        definition = make_field("Available", CustomFieldType.DATE)

        assert definition.matches_filter("2024-03-01", "2024-03-01T00:00:00")
        assert not definition.matches_filter("2024-03-02", "2024-03-01")


class TestTemplates:

    def test_available_templates(self):
        assert set(CUSTOM_FIELD_TEMPLATES) == {"recruitment", "internal", "trades", "tech"}

    def test_recruitment_template_requires_notice_period(self):
        fields = {f.name: f for f in CUSTOM_FIELD_TEMPLATES["recruitment"].fields}

        assert fields["notice_period"].required
        assert fields["notice_period"].field_type == CustomFieldType.SELECT
        assert "Immediate" in fields["notice_period"].options

    def test_template_fields_build_valid_definitions(self):
        for template in CUSTOM_FIELD_TEMPLATES.values():
            for template_field in template.fields:
                definition = make_field(
                    label=template_field.label,
                    name=template_field.name,
                    field_type=template_field.field_type,
                    required=template_field.required,
                    options=list(template_field.options),
                )
                assert definition.name == template_field.name
