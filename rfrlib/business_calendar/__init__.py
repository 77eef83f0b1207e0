from .date_utils import (
    BusinessDayConvention,
    add_tenor,
    make_effective,
    make_maturity,
    make_overnight_maturity,
)
from .inverse import InverseModifiedFollowing
