"""
Tests for the Result[P] envelope and StepRecord wrapper.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default factories (steps, warnings)
    - has_warning() method
    - StepRecord accessors and summary()
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pymatrix.core.result import Result, StepRecord


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


@dataclass(frozen=True)
class FakeRecord(StepRecord):

    @property
    def value(self) -> float:
        return self._result.params.value


class TestResultConstruction:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={'operation': 'test'},
            steps=('one', 'two'),
            timing={'total_seconds': 0.01},
            backend_name='fake',
        )
        assert result.params.value == 42.0
        assert result.info['operation'] == 'test'
        assert result.steps == ('one', 'two')
        assert result.timing['total_seconds'] == 0.01
        assert result.backend_name == 'fake'

    def test_defaults(self):
        result = Result(params=FakeParams(value=1.0), info={})
        assert result.steps == ()
        assert result.warnings == ()
        assert result.timing is None
        assert result.backend_name == ''

    def test_frozen(self):
        result = Result(params=FakeParams(value=1.0), info={})
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)


class TestHasWarning:

    def test_substring_match(self):
        result = Result(
            params=FakeParams(value=1.0),
            info={},
            warnings=("QR algorithm did not converge after 5 iterations",),
        )
        assert result.has_warning("did not converge")
        assert not result.has_warning("singular")

    def test_no_warnings(self):
        result = Result(params=FakeParams(value=1.0), info={})
        assert not result.has_warning("anything")


class TestStepRecord:

    def _record(self):
        return FakeRecord(Result(
            params=FakeParams(value=3.5),
            info={'operation': 'fake', 'condition': 2.0},
            steps=('first step', 'second step'),
            timing={'total_seconds': 0.5},
            backend_name='fake_backend',
            warnings=('careful',),
        ))

    def test_accessors(self):
        record = self._record()
        assert record.value == 3.5
        assert record.steps == ('first step', 'second step')
        assert record.timing == {'total_seconds': 0.5}
        assert record.backend_name == 'fake_backend'
        assert record.warnings == ('careful',)

    def test_metadata_is_a_copy(self):
        record = self._record()
        metadata = record.metadata
        metadata['operation'] = 'tampered'
        assert record.metadata['operation'] == 'fake'

    def test_summary(self):
        lines = self._record().summary().splitlines()
        assert lines[0] == "1. first step"
        assert lines[1] == "2. second step"
        assert "operation: fake" in lines
        assert "condition: 2" in lines

    def test_frozen(self):
        record = self._record()
        with pytest.raises(FrozenInstanceError):
            record._result = None
