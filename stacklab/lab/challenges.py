"""
Stack Lab challenges: the challenge data model, the user answers and the validation of one against the other.

Every runnable challenge is checked by actually running the combined script on a ScriptEngine, so the verdict a
learner gets is always the interpreter's verdict.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional

from stacklab.core import ChallengeError, get_logger
from stacklab.script.formatters import format_stack_for_log
from stacklab.script.results import ExecutionResult, ExecutionStep
from stacklab.script.script_engine import ScriptEngine
from stacklab.script.stack import StackItem, items_equal

__all__ = ["ChallengeType", "Difficulty", "TraceQuestion", "Challenge", "UnlockChallenge", "MatchOutcomeChallenge",
           "TraceChallenge", "PredictValidChallenge", "UnlockInput", "MatchOutcomeInput", "TraceInput",
           "PredictValidInput", "ValidationResult", "validate_challenge", "stacks_equal", "CHALLENGES",
           "get_challenge"]

logger = get_logger(__name__)


class ChallengeType(Enum):
    UNLOCK = "unlock"
    MATCH_OUTCOME = "match_outcome"
    TRACE = "trace"
    PREDICT_VALID = "predict_valid"


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


# --- Challenges --- #

@dataclass(frozen=True)
class TraceQuestion:
    """
    kind is either "stack_after_step" (with a step_index) or "valid"
    """
    kind: str
    step_index: Optional[int] = None

    STACK_AFTER_STEP: ClassVar[str] = "stack_after_step"
    VALID: ClassVar[str] = "valid"

    @classmethod
    def stack_after(cls, step_index: int) -> "TraceQuestion":
        return cls(cls.STACK_AFTER_STEP, step_index)

    @classmethod
    def valid(cls) -> "TraceQuestion":
        return cls(cls.VALID)


@dataclass(frozen=True)
class Challenge:
    id: str
    title: str
    description: str
    difficulty: Difficulty

    challenge_type: ClassVar[ChallengeType]


@dataclass(frozen=True)
class UnlockChallenge(Challenge):
    locking_script: tuple = ()

    challenge_type: ClassVar[ChallengeType] = ChallengeType.UNLOCK


@dataclass(frozen=True)
class MatchOutcomeChallenge(Challenge):
    final_stack: Optional[tuple] = None  # None: any valid script solves it
    allowed_ops: tuple = ()  # Display hint only

    challenge_type: ClassVar[ChallengeType] = ChallengeType.MATCH_OUTCOME

    @property
    def goal_is_valid(self) -> bool:
        return self.final_stack is None


@dataclass(frozen=True)
class TraceChallenge(Challenge):
    unlocking_script: tuple = ()
    locking_script: tuple = ()
    question: TraceQuestion = field(default_factory=TraceQuestion.valid)
    expected_answer: tuple | bool = True

    challenge_type: ClassVar[ChallengeType] = ChallengeType.TRACE


@dataclass(frozen=True)
class PredictValidChallenge(Challenge):
    unlocking_script: tuple = ()
    locking_script: tuple = ()
    expected_valid: bool = True

    challenge_type: ClassVar[ChallengeType] = ChallengeType.PREDICT_VALID


# --- User input --- #

@dataclass
class UnlockInput:
    unlocking_script: list


@dataclass
class MatchOutcomeInput:
    unlocking_script: list
    locking_script: list


@dataclass
class TraceInput:
    answer: list | tuple | bool  # A stack (bottom first) or a validity guess


@dataclass
class PredictValidInput:
    user_valid: bool


# --- Validation --- #

@dataclass(frozen=True)
class ValidationResult:
    solved: bool
    message: str
    steps: list[ExecutionStep] = field(default_factory=list)
    execution_success: Optional[bool] = None
    execution_error: Optional[str] = None

    @classmethod
    def from_execution(cls, solved: bool, message: str, result: ExecutionResult, with_outcome: bool = True):
        if not with_outcome:
            return cls(solved, message, result.steps)
        return cls(solved, message, result.steps, result.success, result.error)


def stacks_equal(left: list[StackItem], right: list[StackItem]) -> bool:
    if len(left) != len(right):
        return False
    return all(items_equal(a, b) for a, b in zip(left, right))


def _validity_message(result: ExecutionResult) -> str:
    return "Correct! The script validates." if result.success else (result.error or "Script did not validate.")


def validate_challenge(challenge: Challenge, user_input, engine: ScriptEngine = None) -> ValidationResult:
    """
    Checks the user's answer against the challenge.

    A user_input of the wrong kind for the challenge is reported as unsolved, it does not raise.
    """
    engine = engine or ScriptEngine()

    match challenge:
        case UnlockChallenge():
            if not isinstance(user_input, UnlockInput):
                return _invalid_input(challenge)
            result = engine.execute_pair(user_input.unlocking_script, challenge.locking_script)
            return ValidationResult.from_execution(result.success, _validity_message(result), result)

        case MatchOutcomeChallenge():
            if not isinstance(user_input, MatchOutcomeInput):
                return _invalid_input(challenge)
            result = engine.execute_pair(user_input.unlocking_script, user_input.locking_script)
            if challenge.goal_is_valid:
                return ValidationResult.from_execution(result.success, _validity_message(result), result)

            expected = list(challenge.final_stack)
            solved = result.success and stacks_equal(result.final_stack, expected)
            if solved:
                message = "Correct! Script validates and final stack matches."
            elif not result.success:
                message = _validity_message(result)
            else:
                message = (f"Final stack was {format_stack_for_log(result.final_stack)}; "
                           f"expected {format_stack_for_log(expected)}.")
            return ValidationResult.from_execution(solved, message, result)

        case TraceChallenge():
            if not isinstance(user_input, TraceInput):
                return _invalid_input(challenge)
            result = engine.execute_pair(challenge.unlocking_script, challenge.locking_script)

            if challenge.question.kind == TraceQuestion.VALID:
                solved = user_input.answer is result.success
                message = "Correct!" if solved else f"Script is {'valid' if result.success else 'invalid'}."
                return ValidationResult.from_execution(solved, message, result, with_outcome=False)

            step_index = challenge.question.step_index
            if step_index is None or not 0 <= step_index < len(result.steps):
                return ValidationResult(False, "Step index out of range.", result.steps)
            stack_after = result.steps[step_index].stack_after
            solved = isinstance(user_input.answer, (list, tuple)) and stacks_equal(user_input.answer, stack_after)
            message = "Correct!" if solved else f"Expected stack {format_stack_for_log(stack_after)}."
            return ValidationResult.from_execution(solved, message, result, with_outcome=False)

        case PredictValidChallenge():
            if not isinstance(user_input, PredictValidInput):
                return _invalid_input(challenge)
            result = engine.execute_pair(challenge.unlocking_script, challenge.locking_script)
            solved = user_input.user_valid == result.success
            message = "Correct!" if solved else f"Script is {'valid' if result.success else 'invalid'}."
            return ValidationResult.from_execution(solved, message, result)

    return ValidationResult(False, "Unknown challenge type")


def _invalid_input(challenge: Challenge) -> ValidationResult:
    logger.debug(f"Rejected input for challenge {challenge.id}")
    return ValidationResult(False, f"Invalid input for {challenge.challenge_type.value} challenge")


# --- Challenge list --- #

_EASY, _MEDIUM, _HARD = Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD
_IF_100_ELSE_200 = ("OP_IF", 100, "OP_ELSE", 200, "OP_ENDIF")

CHALLENGES = (
    # Unlock
    UnlockChallenge(
        "unlock-simple-add", "Unlock: Simple addition",
        "The locking script expects two numbers on the stack, adds them, and checks the result equals 8. "
        "Provide an unlocking script that pushes the correct two numbers.",
        _EASY, locking_script=("OP_ADD", 8, "OP_EQUAL")),
    UnlockChallenge(
        "unlock-comparison", "Unlock: Comparison",
        "The locking script checks that the top two values are equal (OP_EQUAL). Push two equal values.",
        _EASY, locking_script=("OP_EQUAL",)),
    UnlockChallenge(
        "unlock-conditional", "Unlock: Conditional",
        "Non-zero runs the first branch (pushes 100), zero runs the else branch (pushes 200). "
        "Provide an unlocking script that leaves 100 on the stack.",
        _MEDIUM, locking_script=_IF_100_ELSE_200),
    UnlockChallenge(
        "easy-unlock-sum-20", "Unlock: Sum to 20",
        "The locking script adds two numbers and checks the result equals 20. Push two numbers that sum to 20.",
        _EASY, locking_script=("OP_ADD", 20, "OP_EQUAL")),
    UnlockChallenge(
        "medium-unlock-sum-15", "Unlock: Sum to 15",
        "The locking script adds two numbers and checks the result equals 15. Push two numbers that sum to 15.",
        _MEDIUM, locking_script=("OP_ADD", 15, "OP_EQUAL")),
    UnlockChallenge(
        "medium-unlock-verify-add", "Unlock: Add then verify",
        "The locking script adds two numbers, runs OP_VERIFY (fails on 0) and then pushes 1. "
        "Push two numbers with a non-zero sum.",
        _MEDIUM, locking_script=("OP_ADD", "OP_VERIFY", 1)),
    UnlockChallenge(
        "medium-unlock-dup-equal", "Unlock: Duplicate and equal",
        "The locking script duplicates the top value and checks both copies are equal. Push any single value.",
        _MEDIUM, locking_script=("OP_DUP", "OP_EQUAL")),
    UnlockChallenge(
        "medium-unlock-else-200", "Unlock: Else branch",
        "Non-zero pushes 100, zero pushes 200. Provide an unlocking script that leaves 200 on the stack.",
        _MEDIUM, locking_script=_IF_100_ELSE_200),
    UnlockChallenge(
        "medium-unlock-negate", "Unlock: OP_NEGATE",
        "The locking script negates one number and checks the result equals -10.",
        _MEDIUM, locking_script=("OP_NEGATE", -10, "OP_EQUAL")),
    UnlockChallenge(
        "hard-unlock-1sub-equal", "Unlock: OP_1SUB and equal",
        "The locking script subtracts 1 from one number and checks the result equals 4.",
        _HARD, locking_script=("OP_1SUB", 4, "OP_EQUAL")),
    UnlockChallenge(
        "hard-unlock-three-add", "Unlock: Three numbers, sum check",
        "The locking script expects three numbers c, a, b (b on top). It adds a and b and checks the sum equals c.",
        _HARD, locking_script=("OP_ADD", "OP_EQUAL")),
    UnlockChallenge(
        "hard-unlock-2dup-add-equal", "Unlock: 2DUP add and equal",
        "The locking script duplicates the top two values, adds the copies and checks the sum equals the top "
        "original value. The bottom value must therefore be 0.",
        _HARD, locking_script=("OP_2DUP", "OP_ADD", "OP_EQUAL")),
    UnlockChallenge(
        "hard-unlock-nested-if", "Unlock: Conditional with 42",
        "Non-zero pushes 42, zero pushes 99. Leave 42 on the stack.",
        _HARD, locking_script=("OP_IF", 42, "OP_ELSE", 99, "OP_ENDIF")),
    UnlockChallenge(
        "hard-unlock-sub-equal", "Unlock: Subtraction check",
        "The locking script computes a - b (b on top) and checks the result equals 5.",
        _HARD, locking_script=("OP_SUB", 5, "OP_EQUAL")),

    # Match outcome
    MatchOutcomeChallenge(
        "match-valid-one", "Match: Script must validate",
        "Build an unlocking and a locking script that together leave a non-zero value on top of the stack.",
        _EASY),
    MatchOutcomeChallenge(
        "match-final-stack", "Match: Final stack [1]",
        "Build scripts so that execution ends with exactly one value on the stack: 1.",
        _MEDIUM, final_stack=(1,)),
    MatchOutcomeChallenge(
        "match-add-equal", "Match: Add and equal",
        "Build scripts that push two numbers, add them, and check the result equals a constant.",
        _EASY, allowed_ops=("OP_ADD", "OP_EQUAL")),
    MatchOutcomeChallenge(
        "medium-match-final-5", "Match: Final stack [5]",
        "Build scripts so execution ends with exactly one value on the stack: 5.",
        _MEDIUM, final_stack=(5,)),
    MatchOutcomeChallenge(
        "medium-match-two-values", "Match: Final stack [1, 2]",
        "Build scripts so the final stack holds exactly two values: 1 at the bottom and 2 on top.",
        _MEDIUM, final_stack=(1, 2)),
    MatchOutcomeChallenge(
        "medium-match-abs", "Match: Final stack using OP_ABS",
        "Push a negative number and run OP_ABS so that exactly one value, 5, is left on the stack.",
        _MEDIUM, final_stack=(5,), allowed_ops=("OP_ABS",)),
    MatchOutcomeChallenge(
        "hard-match-three-values", "Match: Final stack [3, 2, 1]",
        "Build scripts so the final stack holds exactly three values: 3 at the bottom, then 2, then 1 on top.",
        _HARD, final_stack=(3, 2, 1)),
    MatchOutcomeChallenge(
        "hard-match-rot", "Match: Use OP_ROT",
        "Push three numbers and run OP_ROT, then leave exactly one value on the stack: 1.",
        _HARD, final_stack=(1,), allowed_ops=("OP_ROT",)),
    MatchOutcomeChallenge(
        "hard-match-over-equal", "Match: OP_OVER and OP_EQUAL",
        "Build scripts that use OP_OVER and OP_EQUAL and validate.",
        _HARD, allowed_ops=("OP_OVER", "OP_EQUAL")),
    MatchOutcomeChallenge(
        "hard-match-2dup", "Match: Final stack using 2DUP",
        "Use OP_2DUP and leave exactly two identical values on the stack: [7, 7].",
        _HARD, final_stack=(7, 7), allowed_ops=("OP_2DUP",)),

    # Trace
    TraceChallenge(
        "trace-stack-after-step", "Trace: Stack after second push",
        "The script pushes 5, then 3, then runs OP_ADD. What is on the stack after step 1?",
        _EASY, unlocking_script=(5, 3), locking_script=("OP_ADD",),
        question=TraceQuestion.stack_after(1), expected_answer=(5, 3)),
    TraceChallenge(
        "trace-invalid", "Trace: Invalid script",
        "Determine whether this script validates. It uses OP_VERIFY with zero.",
        _EASY, unlocking_script=(0,), locking_script=("OP_VERIFY", 1),
        question=TraceQuestion.valid(), expected_answer=False),
    TraceChallenge(
        "easy-trace-add-result", "Trace: Stack after OP_ADD",
        "The script pushes 7 and 4, then runs OP_ADD. What is on the stack after step 2?",
        _EASY, unlocking_script=(7, 4), locking_script=("OP_ADD",),
        question=TraceQuestion.stack_after(2), expected_answer=(11,)),
    TraceChallenge(
        "easy-trace-conditional", "Trace: Conditional valid?",
        "The script pushes 0, then OP_IF 1 OP_ELSE 2 OP_ENDIF. Does it validate?",
        _EASY, unlocking_script=(0,), locking_script=("OP_IF", 1, "OP_ELSE", 2, "OP_ENDIF"),
        question=TraceQuestion.valid(), expected_answer=True),
    TraceChallenge(
        "easy-trace-empty-stack", "Trace: Stack after the first push",
        "The script pushes 1, then 2. What is on the stack after step 0?",
        _EASY, unlocking_script=(1, 2), locking_script=(),
        question=TraceQuestion.stack_after(0), expected_answer=(1,)),
    TraceChallenge(
        "medium-trace-step2", "Trace: Stack after the second push",
        "The script pushes 1, then 2, then runs OP_ADD. What is on the stack after step 1?",
        _MEDIUM, unlocking_script=(1, 2), locking_script=("OP_ADD",),
        question=TraceQuestion.stack_after(1), expected_answer=(1, 2)),
    TraceChallenge(
        "medium-trace-swap", "Trace: Stack after OP_SWAP",
        "The script pushes 10, then 20, then runs OP_SWAP. What is on the stack after step 2?",
        _MEDIUM, unlocking_script=(10, 20), locking_script=("OP_SWAP",),
        question=TraceQuestion.stack_after(2), expected_answer=(20, 10)),
    TraceChallenge(
        "hard-trace-nip", "Trace: Stack after OP_NIP",
        "The script pushes 10, then 20, then runs OP_NIP. What is on the stack after step 2?",
        _HARD, unlocking_script=(10, 20), locking_script=("OP_NIP",),
        question=TraceQuestion.stack_after(2), expected_answer=(20,)),
    TraceChallenge(
        "hard-trace-step3", "Trace: Stack after the third push",
        "The script pushes 2, 3, 4, then runs OP_ADD. What is on the stack after step 2?",
        _HARD, unlocking_script=(2, 3, 4), locking_script=("OP_ADD",),
        question=TraceQuestion.stack_after(2), expected_answer=(2, 3, 4)),
    TraceChallenge(
        "hard-trace-verify-conditional", "Trace: Verify then conditional",
        "The script pushes 1 and 1, runs OP_VERIFY, then OP_IF 1 OP_ELSE 0 OP_ENDIF. Does it validate?",
        _HARD, unlocking_script=(1, 1), locking_script=("OP_VERIFY", "OP_IF", 1, "OP_ELSE", 0, "OP_ENDIF"),
        question=TraceQuestion.valid(), expected_answer=True),
    TraceChallenge(
        "hard-trace-multi-step", "Trace: Multi-step arithmetic",
        "The script pushes 5 and 3, runs OP_ADD, pushes 2 and runs OP_SUB. What is on the stack after step 2?",
        _HARD, unlocking_script=(5, 3), locking_script=("OP_ADD", 2, "OP_SUB"),
        question=TraceQuestion.stack_after(2), expected_answer=(8,)),

    # Predict valid
    PredictValidChallenge(
        "predict-valid-simple", "Predict: Does it validate?",
        "Predict whether the combined script validates.",
        _EASY, unlocking_script=(5, 3), locking_script=("OP_ADD", 8, "OP_EQUAL"), expected_valid=True),
    PredictValidChallenge(
        "predict-invalid", "Predict: Invalid script",
        "Predict whether the scripts validate. This one is designed to fail.",
        _EASY, unlocking_script=(0,), locking_script=("OP_VERIFY", 1), expected_valid=False),
    PredictValidChallenge(
        "predict-equal", "Predict: Equal check",
        "Two values are compared with OP_EQUAL. Does this script validate?",
        _EASY, unlocking_script=(7, 7), locking_script=("OP_EQUAL",), expected_valid=True),
    PredictValidChallenge(
        "easy-predict-min", "Predict: OP_MIN result",
        "The script pushes 10 and 5, then runs OP_MIN. Does it validate?",
        _EASY, unlocking_script=(10, 5), locking_script=("OP_MIN",), expected_valid=True),
    PredictValidChallenge(
        "easy-predict-lessthan", "Predict: OP_LESSTHAN",
        "The script pushes 3 and 7, then runs OP_LESSTHAN (1 if 3 < 7). Does it validate?",
        _EASY, unlocking_script=(3, 7), locking_script=("OP_LESSTHAN",), expected_valid=True),
    PredictValidChallenge(
        "medium-predict-verify-invalid", "Predict: OP_VERIFY with zero",
        "The script pushes 0 then runs OP_VERIFY. Does it validate?",
        _MEDIUM, unlocking_script=(0,), locking_script=("OP_VERIFY", 1), expected_valid=False),
    PredictValidChallenge(
        "medium-predict-max", "Predict: OP_MAX",
        "The script pushes 3 and 9, then runs OP_MAX. Does it validate?",
        _MEDIUM, unlocking_script=(3, 9), locking_script=("OP_MAX",), expected_valid=True),
    PredictValidChallenge(
        "medium-predict-1add", "Predict: OP_1ADD",
        "The script pushes 6, then runs OP_1ADD. Does it validate?",
        _MEDIUM, unlocking_script=(6,), locking_script=("OP_1ADD",), expected_valid=True),
    PredictValidChallenge(
        "hard-predict-conditional", "Predict: Conditional script",
        "The script pushes 1, then OP_IF 100 OP_ELSE 0 OP_ENDIF. Does it validate?",
        _HARD, unlocking_script=(1,), locking_script=("OP_IF", 100, "OP_ELSE", 0, "OP_ENDIF"), expected_valid=True),
    PredictValidChallenge(
        "hard-predict-equalverify", "Predict: OP_EQUALVERIFY",
        "The script pushes two equal values, runs OP_EQUALVERIFY and pushes 1. Does it validate?",
        _HARD, unlocking_script=(6, 6), locking_script=("OP_EQUALVERIFY", 1), expected_valid=True),
)

_CHALLENGES_BY_ID = {challenge.id: challenge for challenge in CHALLENGES}


def get_challenge(challenge_id: str) -> Challenge:
    try:
        return _CHALLENGES_BY_ID[challenge_id]
    except KeyError:
        raise ChallengeError(f"Unknown challenge: {challenge_id}") from None
