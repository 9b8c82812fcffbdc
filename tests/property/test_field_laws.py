import random

from hypothesis import given, settings, strategies as st

from shamir_core.field import PRIME, FieldElement
from shamir_core.sharing import generate_shares, reconstruct_secret

elements = st.integers(min_value=0, max_value=PRIME - 1).map(FieldElement)
nonzero = st.integers(min_value=1, max_value=PRIME - 1).map(FieldElement)


@given(nonzero)
def test_inverse_is_multiplicative_inverse(a: FieldElement) -> None:
    assert a * a.inverse() == FieldElement.one()


@given(elements, nonzero)
def test_division_undoes_multiplication(a: FieldElement, b: FieldElement) -> None:
    assert (a / b) * b == a


@given(elements, elements)
def test_subtraction_matches_integer_arithmetic(a: FieldElement, b: FieldElement) -> None:
    difference = a - b
    assert difference.value == (a.value - b.value) % PRIME
    assert difference + b == a


@given(elements, elements, elements)
def test_multiplication_distributes(a: FieldElement, b: FieldElement, c: FieldElement) -> None:
    assert a * (b + c) == a * b + a * c


@settings(max_examples=25, deadline=None)
@given(
    elements,
    st.integers(min_value=2, max_value=8),
    st.integers(min_value=0, max_value=6),
    st.randoms(use_true_random=False),
)
def test_any_threshold_subset_restores_secret(
    secret: FieldElement, threshold: int, extra: int, rng: random.Random
) -> None:
    count = threshold + extra
    shares = generate_shares(secret, threshold, count)
    size = rng.randint(threshold, count)
    assert reconstruct_secret(rng.sample(shares, size)) == secret
