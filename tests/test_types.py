import pytest

from lispy.errors import LispyStructureError, LispyTypeError
from lispy.types.atom import Boolean, Nil, NilType, Number, Symbol, is_atom
from lispy.types.expression import (
    Builtin,
    Closure,
    Empty,
    EmptyType,
    Pair,
    append,
    car,
    cdr,
    cons,
    is_true,
    iter_list,
    make_list,
    to_list,
)


def test_nil_and_empty_are_singletons():
    assert NilType() is Nil
    assert EmptyType() is Empty
    assert not Nil


def test_symbols_compare_by_name():
    assert Symbol("abc") == Symbol("abc")
    assert Symbol("abc") != Symbol("Abc")
    assert hash(Symbol("abc")) == hash(Symbol("abc"))
    assert Symbol("abc") != "abc"


def test_numbers_are_floats():
    assert Number(3).value == 3.0
    assert isinstance(Number(3).value, float)
    assert Number(3) == Number(3.0)
    assert Number(1) != Boolean(True)


@pytest.mark.parametrize(
    "expr, text",
    [
        (Number(3), "3.0"),
        (Number(-2.5), "-2.5"),
        (Symbol("foo"), "foo"),
        (Boolean(True), "true"),
        (Boolean(False), "false"),
        (Nil, "NIL"),
        (Empty, "Void"),
        (Builtin("f", lambda args: args), "Lambda"),
        (Pair(Number(1), Number(2)), "(1.0,2.0)"),
        (make_list([Number(1), Number(2)]), "(1.0,(2.0,NIL))"),
        (make_list([make_list([Symbol("a")]), Symbol("b")]), "((a,NIL),(b,NIL))"),
    ]
)
def test_display_strings(expr, text):
    assert str(expr) == text


def test_is_atom():
    assert all(is_atom(x) for x in (Number(1), Symbol("x"), Boolean(False), Nil))
    assert not is_atom(Pair(Nil, Nil))
    assert not is_atom(Empty)


def test_pair_equality_is_structural():
    assert make_list([Number(1), Number(2)]) == make_list([Number(1), Number(2)])
    assert make_list([Number(1), Number(2)]) != make_list([Number(1)])
    assert make_list([Number(1)]) != Number(1)
    assert Pair(Number(1), Number(2)) != make_list([Number(1), Number(2)])


def test_car_and_cdr():
    lst = make_list([Number(1), Number(2)])
    assert car(lst) == Number(1)
    assert cdr(lst) == make_list([Number(2)])
    assert car(Nil) is Nil
    assert cdr(Nil) is Nil
    assert car(Number(5)) == Number(5)


@pytest.mark.parametrize("value", [Number(5), Empty, Builtin("f", lambda args: args)])
def test_cdr_rejects_non_lists(value):
    with pytest.raises(LispyTypeError):
        cdr(value)


@pytest.mark.parametrize("value", [Empty, Builtin("f", lambda args: args)])
def test_car_rejects_non_atoms(value):
    with pytest.raises(LispyTypeError):
        car(value)


def test_append_places_item_last():
    lst = Nil
    for i in (1, 2, 3):
        lst = append(lst, Number(i))
    assert to_list(lst) == [Number(1), Number(2), Number(3)]


def test_append_does_not_mutate():
    original = make_list([Number(1)])
    extended = append(original, Number(2))
    assert to_list(original) == [Number(1)]
    assert to_list(extended) == [Number(1), Number(2)]


def test_append_to_atom_conses_in_front():
    assert append(Number(5), Number(1)) == Pair(Number(1), Number(5))


@pytest.mark.parametrize("tail", [Empty, Builtin("f", lambda args: args)])
def test_append_past_non_atom_fails(tail):
    with pytest.raises(LispyStructureError):
        append(Pair(Number(1), tail), Number(2))


def test_iter_list_rejects_improper_lists():
    with pytest.raises(LispyStructureError):
        list(iter_list(Pair(Number(1), Number(2))))
    with pytest.raises(LispyStructureError):
        to_list(Symbol("x"))
    assert to_list(Nil) == []


def test_cons_builds_pair():
    assert cons(Number(1), Nil) == make_list([Number(1)])


@pytest.mark.parametrize(
    "value, expected",
    [
        (Boolean(True), True),
        (Boolean(False), False),
        (Nil, False),
        (Number(0), True),
        (Symbol("x"), True),
        (make_list([Number(1)]), True),
    ]
)
def test_truthiness(value, expected):
    assert is_true(value) is expected


def test_closure_is_abstract():
    with pytest.raises(TypeError):
        Closure("bare")

    class Identity(Closure):
        __slots__ = ()

        def __call__(self, args):
            return args

    identity = Identity("identity")
    assert identity(make_list([Number(1)])) == make_list([Number(1)])
    assert str(identity) == "Lambda"
