"""Models for test plans and the invocations derived from them."""

from collections.abc import Sequence

from pydantic import Field

from output_test_harness.models.base import Model


class TestInvocation(Model):
    """One execution of the output test runner."""

    __test__ = False

    test_name: str = Field(..., description="Test identifier passed to the runner")
    args: Sequence[str] = Field(
        default_factory=list, description="Extra arguments, in order"
    )
    output_label: str | None = Field(
        default=None, description="Label naming the expected output file"
    )

    def describe(self) -> str:
        """Return a short human-readable label for logs."""
        name = self.output_label or self.test_name
        if self.args:
            return f"{name} ({' '.join(self.args)})"
        return name


class BaselineTest(Model):
    """Test run once, without variants."""

    test_name: str = Field(..., description="Test identifier")
    args: Sequence[str] = Field(default_factory=list, description="Extra arguments")

    def to_invocation(self) -> TestInvocation:
        """Convert to a single invocation without an output label."""
        return TestInvocation(test_name=self.test_name, args=list(self.args))


class VariantTest(Model):
    """Test run once per label, with the label as its only extra argument."""

    test_name: str = Field(..., description="Test identifier")
    labels: Sequence[str] = Field(
        ..., min_length=1, description="Variant labels, run in this order"
    )
    output_label_prefix: str | None = Field(
        default=None,
        description="Prefix of each output label (defaults to the test name)",
    )

    def to_invocations(self) -> Sequence[TestInvocation]:
        """Convert into one invocation per label.

        Each invocation gets the output label ``<prefix>_<label>`` and the
        label itself as its single argument.
        """
        prefix = self.output_label_prefix or self.test_name
        return [
            TestInvocation(
                test_name=self.test_name,
                args=[label],
                output_label=f"{prefix}_{label}",
            )
            for label in self.labels
        ]


class TestPlan(Model):
    """Complete test plan: a baseline test followed by its variants."""

    __test__ = False

    version: str = Field(default="1", description="Plan schema version")
    baseline: BaselineTest = Field(..., description="Test run first")
    variants: VariantTest = Field(..., description="Test run once per label")

    def to_invocations(self) -> Sequence[TestInvocation]:
        """Return every invocation in execution order."""
        return [self.baseline.to_invocation(), *self.variants.to_invocations()]


DEFAULT_PLAN = TestPlan(
    baseline=BaselineTest(test_name="test2"),
    variants=VariantTest(
        test_name="test2Formatted",
        labels=["plain", "spaced", "pretty"],
    ),
)
