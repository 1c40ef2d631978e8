from fold.fold_datatypes import MISSING, Missing, Reducer, is_missing
from fold.fold_runtime import fold
from fold.fold_bind import emulate_bind
from fold.fold_todo import TodoList

__all__ = [
    "fold",
    "MISSING",
    "Missing",
    "Reducer",
    "is_missing",
    "emulate_bind",
    "TodoList",
]
