import numpy as np
import pytest

from qtoybox.quantum import algorithms
from qtoybox.quantum.qubit import classify_oracle


def test_deutsch_jozsa_step_trace():
    result = algorithms.deutsch_jozsa(rng=0)
    assert len(result.steps) == 4
    assert result.steps[0] == ("1.0|0>", "1.0|1>")
    assert result.steps[1] == ("|+>", "|->")
    assert result.steps[2] == ("U_f|+>", "U_f|->")
    v1, v2 = result.steps[3]
    assert v1 in ("1.0|0>", "1.0|1>")
    assert v2 == "U_f|->"


@pytest.mark.parametrize("seed", range(8))
def test_deutsch_jozsa_verdict_matches_last_oracle_answer(seed):
    result = algorithms.deutsch_jozsa(rng=seed)

    draws = np.random.default_rng(seed).random(3)
    expected_answer = classify_oracle(draws[2]).output

    assert result.answer == expected_answer
    if result.answer == 1:
        assert result.verdict == algorithms.CONSTANT
        assert result.is_constant
        assert result.message == "Function is constant"
        assert result.steps[3][0] == "1.0|0>"
    else:
        assert result.verdict == algorithms.BALANCED
        assert result.message == "Function is balanced"
        assert result.steps[3][0] == "1.0|1>"


def test_deutsch_jozsa_sees_both_verdicts():
    verdicts = {algorithms.deutsch_jozsa(rng=seed).verdict for seed in range(40)}
    assert verdicts == {algorithms.CONSTANT, algorithms.BALANCED}
