"""Tests for test plan models."""

import pytest
from pydantic import ValidationError

from output_test_harness.models.plan import (
    DEFAULT_PLAN,
    BaselineTest,
    TestInvocation,
    TestPlan,
    VariantTest,
)


def test_default_plan_invocations() -> None:
    """Default plan runs test2, then test2Formatted in three formats."""
    assert DEFAULT_PLAN.to_invocations() == [
        TestInvocation(test_name="test2"),
        TestInvocation(
            test_name="test2Formatted",
            args=["plain"],
            output_label="test2Formatted_plain",
        ),
        TestInvocation(
            test_name="test2Formatted",
            args=["spaced"],
            output_label="test2Formatted_spaced",
        ),
        TestInvocation(
            test_name="test2Formatted",
            args=["pretty"],
            output_label="test2Formatted_pretty",
        ),
    ]


def test_baseline_has_no_output_label() -> None:
    """Baseline invocation keeps its args and has no output label."""
    invocation = BaselineTest(test_name="smoke", args=["-v"]).to_invocation()

    assert invocation == TestInvocation(test_name="smoke", args=["-v"])


def test_variant_output_label_prefix() -> None:
    """Uses the configured prefix for output labels."""
    variants = VariantTest(
        test_name="fmt", labels=["a", "b"], output_label_prefix="expected/fmt"
    )

    labels = [i.output_label for i in variants.to_invocations()]

    assert labels == ["expected/fmt_a", "expected/fmt_b"]


def test_variant_requires_labels() -> None:
    """Rejects a variant test without labels."""
    with pytest.raises(ValidationError):
        VariantTest(test_name="fmt", labels=[])


def test_plan_is_frozen() -> None:
    """Plans cannot be modified after creation."""
    with pytest.raises(ValidationError):
        DEFAULT_PLAN.version = "2"  # type: ignore[misc]


def test_plan_from_dict() -> None:
    """Validates nested plan data."""
    plan = TestPlan.model_validate(
        {
            "baseline": {"test_name": "t1"},
            "variants": {"test_name": "t2", "labels": ["x"]},
        }
    )

    assert plan.version == "1"
    assert [i.test_name for i in plan.to_invocations()] == ["t1", "t2"]


@pytest.mark.parametrize(
    ("invocation", "expected"),
    [
        (TestInvocation(test_name="test2"), "test2"),
        (
            TestInvocation(
                test_name="test2Formatted",
                args=["plain"],
                output_label="test2Formatted_plain",
            ),
            "test2Formatted_plain (plain)",
        ),
    ],
)
def test_describe(invocation: TestInvocation, expected: str) -> None:
    """Describes invocations by output label and args."""
    assert invocation.describe() == expected
