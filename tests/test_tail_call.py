import pytest

from lispi.errors import LispiArityError, LispiRecurOutsideFunction, LispiUnboundSymbol
from lispi.types.persistent_list import from_iterable
from lispi.types.symbol import Symbol

FOLDL = """
(def foldl (fn (fun acc coll)
  (if (empty? coll)
      acc
      (recur fun (fun acc (first coll)) (rest coll)))))
"""


def test_foldl_with_recur(interp):
    interp.eval(FOLDL)
    assert interp.eval("(foldl (fn (a b) (+ a b)) 0 (list 1 2 3))") == 6


def test_foldl_over_a_hundred_thousand_elements(interp):
    """Fails with a stack error unless recur runs in constant stack."""
    interp.eval(FOLDL)
    interp.env.define(Symbol("big"), from_iterable(range(1, 100_001)))
    assert interp.eval("(foldl (fn (a b) (+ a b)) 0 big)") == 5_000_050_000


def test_building_a_long_list_with_recur(interp):
    interp.eval("(def build (fn (n acc) (if (= n 0) acc (recur (dec n) (cons n acc)))))")
    interp.eval("(def xs (build 100000 (list)))")
    assert interp.eval("(count xs)") == 100_000
    assert interp.eval("(first xs)") == 1


def test_recur_rebinds_from_current_values(interp):
    interp.eval("(def count-down (fn (n acc) (if (= n 0) acc (recur (- n 1) (cons n acc)))))")
    assert list(interp.eval("(count-down 3 (list))")) == [1, 2, 3]


def test_recur_targets_the_innermost_function(interp):
    interp.eval("""
    (def outer (fn (n)
      ((fn (k acc) (if (= k 0) acc (recur (- k 1) (+ acc n)))) n 0)))
    """)
    assert interp.eval("(outer 4)") == 16


def test_general_tail_calls_run_in_constant_stack(interp):
    interp.eval("(def even? (fn (n) (if (= n 0) true (odd? (- n 1)))))")
    interp.eval("(def odd? (fn (n) (if (= n 0) false (even? (- n 1)))))")
    assert interp.eval("(even? 10000)") is True
    assert interp.eval("(odd? 10001)") is True


def test_non_tail_calls_inside_a_loop(interp):
    interp.eval("(def sq (fn (x) (* x x)))")
    interp.eval("(def sum-sq (fn (n acc) (if (= n 0) acc (recur (- n 1) (+ acc (sq n))))))")
    assert interp.eval("(sum-sq 3 0)") == 14


@pytest.mark.parametrize(
    "source",
    [
        "(recur 1)",
        "(+ 1 (recur 2))",
        "(def r (recur 1))",
    ],
)
def test_recur_outside_a_function(interp, source):
    with pytest.raises(LispiRecurOutsideFunction):
        interp.eval(source)


@pytest.mark.parametrize(
    "definition",
    [
        "(def g (fn (n) (+ 1 (recur n))))",
        "(def g (fn (n) (if (recur n) 1 2)))",
        "(def g (fn (n) ((recur n) 1)))",
        "(def g (fn (n) (def m (recur n))))",
    ],
)
def test_recur_outside_tail_position(interp, definition):
    interp.eval(definition)
    with pytest.raises(LispiRecurOutsideFunction):
        interp.eval("(g 1)")


def test_recur_arity(interp):
    interp.eval("(def h (fn (a b) (recur a)))")
    with pytest.raises(LispiArityError):
        interp.eval("(h 1 2)")


def test_each_recur_iteration_gets_a_fresh_frame(interp):
    # every earlier iteration defines `seen`, but only in its own frame
    interp.eval("(def g (fn (n) (if (= n 0) seen (if (def seen n) (recur (- n 1))))))")
    with pytest.raises(LispiUnboundSymbol):
        interp.eval("(g 2)")
    with pytest.raises(LispiUnboundSymbol):
        interp.eval("seen")
