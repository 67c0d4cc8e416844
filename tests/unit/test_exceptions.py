"""
Unit tests for ordering error messages
"""

from ordered_form.core.exceptions import (
    CircularChainError,
    InvalidDifferedTargetError,
    InvalidPositionShapeError,
    SymmetricConflictError,
)
from ordered_form.core.models import Side


class TestErrorMessages:
    """Test messages shown to whoever wrote the positions"""

    def test_invalid_differed_target(self):
        """Test missing target message"""
        error = InvalidDifferedTargetError("p", Side.BEFORE, "q")

        assert str(error) == (
            'The "p" form is configured to be placed just before the form "q" '
            'but the form "q" does not exist.'
        )

    def test_circular_chain(self):
        """Test circular chain message"""
        error = CircularChainError(["b", "a", "b"], Side.AFTER)

        assert str(error) == (
            "The form ordering cannot be resolved due to conflict in after "
            'positions ("b" => "a" => "b").'
        )

    def test_circular_chain_mixed_sides(self):
        """Test circular chain message for loops across sides"""
        error = CircularChainError(["c", "a", "b", "c"], None)

        assert "before/after positions" in str(error)
        assert error.side is None

    def test_circular_chain_copies_chain(self):
        """Test the chain attribute does not alias the caller's list"""
        chain = ["a", "a"]
        error = CircularChainError(chain, Side.BEFORE)
        chain.append("x")

        assert error.chain == ["a", "a"]

    def test_symmetric_conflict(self):
        """Test symmetric conflict message"""
        error = SymmetricConflictError("b", "a")

        assert str(error) == (
            "The form ordering does not support symmetrical before/after "
            'option ("b" <=> "a").'
        )

    def test_invalid_string_position(self):
        """Test message for unknown string positions"""
        error = InvalidPositionShapeError("a", "middle")

        assert str(error) == (
            'The "a" form uses position as string which can only be "first" '
            'or "last" (current: "middle").'
        )

    def test_invalid_mapping_position(self):
        """Test message for mappings without before/after"""
        error = InvalidPositionShapeError("a", {"foo": 1, "bar": 2})

        assert '(current: "foo", "bar")' in str(error)

    def test_invalid_mapping_target_reason(self):
        """Test message for mappings with an unusable target"""
        error = InvalidPositionShapeError("a", {"before": ""}, '"before" must name a sibling')

        assert '"before" must name a sibling' in str(error)

    def test_invalid_other_shape(self):
        """Test message for unsupported types"""
        error = InvalidPositionShapeError("a", 42)

        assert "(current: 42)" in str(error)
