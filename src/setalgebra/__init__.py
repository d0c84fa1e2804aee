from setalgebra._bag import Bag, to_set
from setalgebra._bundle import contracts_enabled, set_contracts_enabled
from setalgebra._cli import main
from setalgebra._decorators import against, ensures, law, requires
from setalgebra._engine import LawResult, check_module
from setalgebra._errors import IndexOutOfRangeError, MalformedSetError, SetAlgebraError
from setalgebra._predicates import contains, first_duplicate, is_ascending, is_descending, is_monotonic, is_set
from setalgebra._set import Set
from setalgebra._sort import quick_sort
from setalgebra._strategies import register_element_strategy, register_strategy, register_strategy_factory

__all__ = [
    "Bag",
    "IndexOutOfRangeError",
    "LawResult",
    "MalformedSetError",
    "Set",
    "SetAlgebraError",
    "against",
    "check_module",
    "contains",
    "contracts_enabled",
    "ensures",
    "first_duplicate",
    "is_ascending",
    "is_descending",
    "is_monotonic",
    "is_set",
    "law",
    "main",
    "quick_sort",
    "register_element_strategy",
    "register_strategy",
    "register_strategy_factory",
    "requires",
    "set_contracts_enabled",
    "to_set",
]
