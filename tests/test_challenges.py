"""
Tests for the Stack Lab challenges and their validation
"""
import pytest

from stacklab.core import ChallengeError
from stacklab.lab import (CHALLENGES, ChallengeType, Difficulty, MatchOutcomeChallenge, MatchOutcomeInput,
                          PredictValidChallenge, PredictValidInput, TraceChallenge, TraceInput, TraceQuestion,
                          UnlockChallenge, UnlockInput, get_challenge, validate_challenge)


def test_challenge_ids_are_unique():
    ids = [challenge.id for challenge in CHALLENGES]
    assert len(ids) == len(set(ids))


def test_every_kind_is_present():
    kinds = {challenge.challenge_type for challenge in CHALLENGES}
    assert kinds == set(ChallengeType)


def test_get_challenge():
    challenge = get_challenge("unlock-simple-add")
    assert isinstance(challenge, UnlockChallenge)
    assert challenge.difficulty is Difficulty.EASY
    with pytest.raises(ChallengeError):
        get_challenge("no-such-challenge")


# --- Unlock --- #

def test_unlock_solved(engine):
    result = validate_challenge(get_challenge("unlock-simple-add"), UnlockInput([5, 3]), engine)
    assert result.solved
    assert result.message == "Correct! The script validates."
    assert result.execution_success is True
    assert len(result.steps) == 5


def test_unlock_not_solved():
    result = validate_challenge(get_challenge("unlock-simple-add"), UnlockInput([5, 4]))
    assert not result.solved
    assert result.message == "Script invalid: top stack item is false"
    assert result.execution_error == result.message


def test_unlock_conditional_branches():
    assert validate_challenge(get_challenge("unlock-conditional"), UnlockInput([1])).solved
    assert validate_challenge(get_challenge("medium-unlock-else-200"), UnlockInput([0])).solved


def test_unlock_with_wrong_input_kind():
    result = validate_challenge(get_challenge("unlock-comparison"), PredictValidInput(True))
    assert not result.solved
    assert result.message == "Invalid input for unlock challenge"
    assert result.steps == []


@pytest.mark.parametrize("challenge_id, unlocking", [
    ("unlock-comparison", [4, 4]),
    ("easy-unlock-sum-20", [12, 8]),
    ("medium-unlock-sum-15", [7, 8]),
    ("medium-unlock-verify-add", [5, 7]),
    ("medium-unlock-dup-equal", ["anything"]),
    ("medium-unlock-negate", [10]),
    ("hard-unlock-1sub-equal", [5]),
    ("hard-unlock-three-add", [9, 4, 5]),
    ("hard-unlock-2dup-add-equal", [0, 5]),
    ("hard-unlock-nested-if", [1]),
    ("hard-unlock-sub-equal", [10, 5]),
])
def test_unlock_solutions(challenge_id, unlocking):
    assert validate_challenge(get_challenge(challenge_id), UnlockInput(unlocking)).solved


# --- Match outcome --- #

def test_match_valid_goal():
    challenge = get_challenge("match-valid-one")
    assert challenge.goal_is_valid
    assert validate_challenge(challenge, MatchOutcomeInput([1], [])).solved
    assert not validate_challenge(challenge, MatchOutcomeInput([0], [])).solved


def test_match_final_stack():
    challenge = get_challenge("medium-match-two-values")
    result = validate_challenge(challenge, MatchOutcomeInput([1], [2]))
    assert result.solved
    assert result.message == "Correct! Script validates and final stack matches."


def test_match_final_stack_mismatch():
    result = validate_challenge(get_challenge("match-final-stack"), MatchOutcomeInput([2], []))
    assert not result.solved
    assert result.message == "Final stack was [2]; expected [1]."
    assert result.execution_success is True


def test_match_final_stack_invalid_script():
    result = validate_challenge(get_challenge("match-final-stack"), MatchOutcomeInput([], ["OP_DROP"]))
    assert not result.solved
    assert result.message.startswith("Stack underflow")


def test_match_with_wrong_input_kind():
    result = validate_challenge(get_challenge("match-valid-one"), UnlockInput([1]))
    assert result.message == "Invalid input for match_outcome challenge"


def test_match_rot():
    challenge = get_challenge("hard-match-rot")
    assert validate_challenge(challenge, MatchOutcomeInput([1, 2, 3], ["OP_ROT", "OP_NIP", "OP_NIP"])).solved


# --- Trace --- #

@pytest.mark.parametrize("challenge", [c for c in CHALLENGES if isinstance(c, TraceChallenge)],
                         ids=lambda c: c.id)
def test_trace_expected_answers_are_correct(challenge):
    answer = challenge.expected_answer
    if isinstance(answer, tuple):
        answer = list(answer)
    result = validate_challenge(challenge, TraceInput(answer))
    assert result.solved, result.message


def test_trace_wrong_stack():
    result = validate_challenge(get_challenge("medium-trace-swap"), TraceInput([10, 20]))
    assert not result.solved
    assert result.message == "Expected stack [20, 10]."
    assert result.execution_success is None


def test_trace_wrong_validity():
    result = validate_challenge(get_challenge("trace-invalid"), TraceInput(True))
    assert not result.solved
    assert result.message == "Script is invalid."


def test_trace_step_out_of_range():
    challenge = TraceChallenge("t", "Out of range", "", Difficulty.EASY, unlocking_script=(1,),
                               question=TraceQuestion.stack_after(5), expected_answer=(1,))
    result = validate_challenge(challenge, TraceInput([1]))
    assert not result.solved
    assert result.message == "Step index out of range."


def test_trace_with_wrong_input_kind():
    result = validate_challenge(get_challenge("trace-invalid"), PredictValidInput(False))
    assert result.message == "Invalid input for trace challenge"


# --- Predict valid --- #

@pytest.mark.parametrize("challenge", [c for c in CHALLENGES if isinstance(c, PredictValidChallenge)],
                         ids=lambda c: c.id)
def test_predict_expected_validity_is_correct(challenge):
    result = validate_challenge(challenge, PredictValidInput(challenge.expected_valid))
    assert result.solved
    assert result.execution_success is challenge.expected_valid


def test_predict_wrong_guess():
    result = validate_challenge(get_challenge("predict-invalid"), PredictValidInput(True))
    assert not result.solved
    assert result.message == "Script is invalid."


def test_predict_with_wrong_input_kind():
    result = validate_challenge(get_challenge("predict-equal"), TraceInput(True))
    assert result.message == "Invalid input for predict_valid challenge"


def test_match_outcome_challenges_have_goals():
    for challenge in CHALLENGES:
        if isinstance(challenge, MatchOutcomeChallenge) and not challenge.goal_is_valid:
            assert len(challenge.final_stack) > 0
