import pytest
from hypothesis import HealthCheck, settings

from bignum.limbs import MASK, UINT64_MAX

# Decimal output divides by ten once per digit, keep examples small and
# without a deadline.
settings.register_profile(
    "bignum",
    max_examples=60,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile("bignum")

LIMB_BOUNDARY = [
    0,
    1,
    MASK - 1,
    MASK,
    MASK + 1,
    UINT64_MAX - 1,
    UINT64_MAX,
    UINT64_MAX + 1,
    (1 << 96) - 1,
    1 << 96,
]


@pytest.fixture(params=LIMB_BOUNDARY + [-x for x in LIMB_BOUNDARY if x])
def boundary(request):
    yield request.param
