import random

import pytest

from gridlife.exceptions import InvariantViolation
from gridlife.program import Instruction, Program, mutate, random_symbol

PARENTS = ["", "l", "pi", "lpiwj", "iiijjw"]


@pytest.mark.parametrize("code", PARENTS)
def test_mutation_without_probabilities_copies_program(code, make_parameters, seeded_rng):
    parameters = make_parameters()

    child = mutate(Program(code), parameters, seeded_rng)

    assert child == Program(code)
    assert len(child) == len(code)


@pytest.mark.parametrize("code", PARENTS)
def test_add_only_appends_one_symbol(code, make_parameters, seeded_rng):
    parameters = make_parameters(add_probability=1.0)

    child = mutate(Program(code), parameters, seeded_rng)

    assert len(child) == len(code) + 1
    assert child.code[: len(code) - 1] == code[:-1]
    if code:
        assert child.code[len(code) - 1] == code[-1]
    assert child.code[-1] in parameters.valid_instructions


@pytest.mark.parametrize("code", ["l", "pi", "lpiwj"])
def test_remove_only_drops_last_symbol(code, make_parameters, seeded_rng):
    parameters = make_parameters(remove_probability=1.0)

    child = mutate(Program(code), parameters, seeded_rng)

    assert child.code == code[:-1]


@pytest.mark.parametrize("code", ["l", "pi", "lpiwj"])
def test_add_and_remove_replace_last_slot(code, make_parameters):
    parameters = make_parameters(add_probability=1.0, remove_probability=1.0, valid_instructions="w")

    child = mutate(Program(code), parameters, random.Random(7))

    assert child.code == code[:-1] + "w"


def test_remove_never_fires_on_empty_program(make_parameters, seeded_rng):
    parameters = make_parameters(add_probability=1.0, remove_probability=1.0)

    child = mutate(Program(""), parameters, seeded_rng)

    assert len(child) == 1


def test_change_overwrites_exactly_one_position(make_parameters, seeded_rng):
    parameters = make_parameters(change_probability=1.0, valid_instructions="l")

    child = mutate(Program("pppp"), parameters, seeded_rng)

    assert len(child) == 4
    assert child.code.count("l") == 1
    assert child.code.count("p") == 3


def test_change_on_empty_program_is_noop(make_parameters, seeded_rng):
    parameters = make_parameters(change_probability=1.0)

    assert mutate(Program(""), parameters, seeded_rng) == Program("")


def test_empty_alphabet_yields_empty_program(make_parameters, seeded_rng):
    parameters = make_parameters(add_probability=1.0, change_probability=1.0, valid_instructions="")

    assert mutate(Program("lpi"), parameters, seeded_rng) == Program("")


def test_mutation_leaves_parent_untouched(make_parameters, seeded_rng):
    parameters = make_parameters(add_probability=1.0, remove_probability=0.5, change_probability=1.0)
    parent = Program("lpiwj")

    for _ in range(20):
        mutate(parent, parameters, seeded_rng)

    assert parent.code == "lpiwj"


def test_mutation_is_reproducible_for_a_seed(make_parameters):
    parameters = make_parameters(add_probability=0.5, remove_probability=0.5, change_probability=0.5)

    def lineage(seed):
        rng = random.Random(seed)
        program = Program("lpiwj")
        history = []
        for _ in range(30):
            program = mutate(program, parameters, rng)
            history.append(program.code)
        return history

    assert lineage(3) == lineage(3)


def test_random_symbol_from_empty_alphabet_is_invariant_violation(seeded_rng):
    with pytest.raises(InvariantViolation):
        random_symbol("", seeded_rng)


def test_program_renders_as_symbol_list():
    assert str(Program("lpi")) == "[l, p, i]"
    assert str(Program()) == "[]"


def test_programs_compare_by_content():
    assert Program("lpi") == Program("lpi")
    assert Program("lpi") != Program("lp")
    assert Program("lpi").uses_only("lpiwj")
    assert not Program("lpz").uses_only("lpiwj")


def test_instruction_lookup():
    assert Instruction.from_symbol("i") is Instruction.MOVE_FORWARD
    assert Instruction.from_symbol("j") is Instruction.EAT
    with pytest.raises(InvariantViolation):
        Instruction.from_symbol("z")
