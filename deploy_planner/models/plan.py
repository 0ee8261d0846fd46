# deploy_planner/models/plan.py
"""Test pairing and staging result models"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Any, Tuple

from .component import Component
from ..constants import UNASSIGNED_STAGE


class MatchState(Enum):
    """Pairing state of a test component"""
    NOT_EVALUATED = "not_evaluated"
    NO_MATCH = "no_match"
    MATCHED = "matched"


class NodeState(Enum):
    """Stager state of a graph node"""
    UNSEEN = "unseen"
    QUEUED = "queued"
    PLACED = "placed"


@dataclass
class TestMatch:
    """Outcome of matching one test component"""
    __test__ = False  # not a pytest class

    test_id: str
    state: MatchState
    subject_id: Optional[str] = None
    score: int = 0


class PairingTable:
    """Bidirectional test/subject pairing

    ``test_of`` maps every evaluated subject to its test id (or None) and
    ``subject_of`` maps every matched test to its subject, so that
    ``subject_of[test_of[s]] == s`` whenever ``test_of[s]`` is set.
    """

    def __init__(self):
        self.test_of: Dict[str, Optional[str]] = {}
        self.subject_of: Dict[str, str] = {}
        self.matches: Dict[str, TestMatch] = {}

    def add_subject(self, subject_id: str) -> None:
        """Register a subject with no test yet"""
        self.test_of.setdefault(subject_id, None)

    def set_match(self, test_id: str, subject_id: str, score: int) -> None:
        """Pair a test with a subject, replacing any earlier pairing of either side"""
        previous_test = self.test_of.get(subject_id)
        if previous_test is not None and previous_test != test_id:
            self.set_no_match(previous_test)

        previous_subject = self.subject_of.get(test_id)
        if previous_subject is not None and previous_subject != subject_id:
            self.test_of[previous_subject] = None

        self.test_of[subject_id] = test_id
        self.subject_of[test_id] = subject_id
        self.matches[test_id] = TestMatch(test_id, MatchState.MATCHED, subject_id, score)

    def set_no_match(self, test_id: str) -> None:
        """Mark a test as evaluated without a subject"""
        subject_id = self.subject_of.pop(test_id, None)
        if subject_id is not None and self.test_of.get(subject_id) == test_id:
            self.test_of[subject_id] = None
        self.matches[test_id] = TestMatch(test_id, MatchState.NO_MATCH)

    def state(self, test_id: str) -> MatchState:
        """Get the pairing state of a test"""
        match = self.matches.get(test_id)
        return match.state if match else MatchState.NOT_EVALUATED

    def get_match(self, test_id: str) -> Optional[TestMatch]:
        return self.matches.get(test_id)

    def is_test(self, component_id: str) -> bool:
        return component_id in self.matches

    def is_subject(self, component_id: str) -> bool:
        return component_id in self.test_of

    def pending_subject(self, test_id: str) -> Optional[str]:
        """Get the subject a test is still waiting for"""
        return self.subject_of.get(test_id)

    def consume(self, subject_id: str) -> Optional[str]:
        """Take the pairing of a subject being placed

        Returns the paired test id, or None when the subject has no test.
        Both directions are cleared so the test is no longer deferred.
        """
        test_id = self.test_of.get(subject_id)
        if test_id is None:
            return None
        self.test_of[subject_id] = None
        self.subject_of.pop(test_id, None)
        return test_id

    def unmatched_tests(self) -> List[str]:
        """Get tests that found no subject"""
        return [m.test_id for m in self.matches.values() if m.state == MatchState.NO_MATCH]


@dataclass
class ResidualComponent:
    """Diagnostic for a component the stager could not place"""
    id: str
    name: str
    type: str
    in_degree: int
    unmet_dependencies: List[Tuple[str, str]] = field(default_factory=list)
    awaiting_subject: Optional[str] = None

    def describe(self) -> str:
        """Get a one-line description"""
        if self.awaiting_subject and not self.unmet_dependencies:
            return f'{self.id} "{self.name}" waits for unplaced subject {self.awaiting_subject}'
        deps = ", ".join(f'{dep_id} - "{dep_name}"' for dep_id, dep_name in self.unmet_dependencies)
        return f'{self.id} "{self.name}" - {self.in_degree} unmet: {deps}'

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'id': self.id,
            'name': self.name,
            'type': self.type,
            'in_degree': self.in_degree,
            'unmet_dependencies': [
                {'id': dep_id, 'name': dep_name}
                for dep_id, dep_name in self.unmet_dependencies
            ],
            'awaiting_subject': self.awaiting_subject
        }


@dataclass
class StagePlan:
    """Ordered deployment groups produced by the stager"""
    groups: List[List[Component]] = field(default_factory=list)
    untested: List[str] = field(default_factory=list)
    residual: List[ResidualComponent] = field(default_factory=list)
    unmatched_tests: List[str] = field(default_factory=list)
    assignments: Dict[str, int] = field(default_factory=dict)

    @property
    def group_count(self) -> int:
        return len(self.groups)

    @property
    def has_residual(self) -> bool:
        return bool(self.residual)

    def stage_of(self, component_id: str) -> int:
        """Get the stage index of a component, -1 when not placed"""
        return self.assignments.get(component_id, UNASSIGNED_STAGE)

    def add_group(self, components: List[Component]) -> int:
        """Append a group and record its assignments"""
        index = len(self.groups)
        self.groups.append(components)
        for component in components:
            self.assignments[component.id] = index
        return index

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'groups': [[c.to_dict() for c in group] for group in self.groups],
            'untested': list(self.untested),
            'residual': [r.to_dict() for r in self.residual],
            'unmatched_tests': list(self.unmatched_tests)
        }
